"""
Constants used by the project
"""

DATA_KEY_KUBECONFIG = 'kubeconfig'

GARDEN_NAMESPACE = 'garden'
PROJECT_NAMESPACE_PREFIX = 'garden-'
ANNOTATION_SHOOT_USE_AS_SEED = 'shoot.gardener.cloud/use-as-seed'

IDENTIFIER_SEPARATOR = '--'
GARDEN_KUBECONFIG_SUFFIX = '-garden'

SHOOT_OWNER_KIND = 'Shoot'
KUBECONFIG_NAMESPACE_MARKER = '.kubeconfig'

CLUSTER_IDENTITY_NAMESPACE = 'kube-system'
CLUSTER_IDENTITY_CONFIGMAP = 'cluster-identity'
CLUSTER_IDENTITY_KEY = 'cluster-identity'

GARDENER_GROUP = 'core.gardener.cloud'
GARDENER_VERSION = 'v1beta1'
PROJECTS_PLURAL = 'projects'
SHOOTS_PLURAL = 'shoots'
