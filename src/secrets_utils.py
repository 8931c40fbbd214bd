import base64
import logging
from typing import Any, Dict, Iterable, Optional

from kubernetes.client import V1Secret

from cache import FirstWinsIndex, OverwriteIndex
from consts import ANNOTATION_SHOOT_USE_AS_SEED, GARDEN_NAMESPACE, KUBECONFIG_NAMESPACE_MARKER, SHOOT_OWNER_KIND
from identifiers import get_secret_identifier
from os_utils import get_kubeconfig_data_key


def get_secret_namespace_name_to_secret(
        logger: logging.Logger,
        secrets: Iterable[V1Secret],
) -> Dict[str, V1Secret]:
    """Maps <namespace>/<shoot name> to the secret holding the kubeconfig of that Shoot.

    Secrets without a kubeconfig, or that cannot be associated with any Shoot,
    are skipped with a warning.
    """
    data_key = get_kubeconfig_data_key()
    shoot_name_to_secret: OverwriteIndex[V1Secret] = OverwriteIndex()

    for secret in secrets:
        namespace = secret.metadata.namespace
        name = secret.metadata.name

        if data_key not in (secret.data or {}):
            logger.warning(f'Secret {namespace}/{name} does not contain a kubeconfig. Skipping.')
            continue

        shoot_name = get_owning_shoot_name(secret)
        if shoot_name is None:
            logger.warning(f'Secret {namespace}/{name} could not be associated with any Shoot. Skipping.')
            continue

        shoot_name_to_secret.put(get_secret_identifier(namespace, shoot_name), secret)

    return shoot_name_to_secret.as_dict()


def get_owning_shoot_name(secret: V1Secret) -> Optional[str]:
    owner_references = secret.metadata.owner_references or []
    if owner_references and owner_references[0].kind == SHOOT_OWNER_KIND:
        return owner_references[0].name

    namespace = secret.metadata.namespace or ''
    if KUBECONFIG_NAMESPACE_MARKER not in namespace:
        return None
    return namespace.split(KUBECONFIG_NAMESPACE_MARKER)[0]


def build_namespace_to_project_map(projects: Iterable[Dict[str, Any]]) -> Dict[str, str]:
    """Maps each project namespace to the name of the first project claiming it
    """
    namespace_to_project_name: FirstWinsIndex[str] = FirstWinsIndex()

    for project in projects:
        namespace = (project.get('spec') or {}).get('namespace')
        if namespace is None:
            continue
        namespace_to_project_name.put(namespace, project['metadata']['name'])

    return namespace_to_project_name.as_dict()


def is_shooted_seed(shoot: Dict[str, Any]) -> bool:
    """Whether this Shoot is annotated to be used as a Seed
    """
    metadata = shoot.get('metadata') or {}
    if metadata.get('namespace') != GARDEN_NAMESPACE:
        return False

    annotations = metadata.get('annotations') or {}
    return bool(annotations.get(ANNOTATION_SHOOT_USE_AS_SEED))


def decode_kubeconfig(secret: V1Secret) -> bytes:
    return base64.b64decode(secret.data[get_kubeconfig_data_key()])
