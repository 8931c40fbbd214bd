import logging
from typing import Any, Dict, List, Optional

from kubernetes import config
from kubernetes.client import ApiClient, CoreV1Api, CustomObjectsApi, V1Secret, exceptions
from kubernetes.config import ConfigException
from pydantic import ValidationError

from consts import CLUSTER_IDENTITY_CONFIGMAP, CLUSTER_IDENTITY_KEY, CLUSTER_IDENTITY_NAMESPACE, GARDENER_GROUP, \
    GARDENER_VERSION, PROJECTS_PLURAL, SHOOTS_PLURAL
from errors import StoreConfigError
from models import KubeconfigStore, StoreConfigGardener


def get_store_config(store: KubeconfigStore) -> StoreConfigGardener:
    """Decodes the Gardener store config from the store configuration

    Raises
    ------
    StoreConfigError
        If the store carries no configuration or it does not match StoreConfigGardener.
    """
    if store.config is None:
        raise StoreConfigError(
            'providing a configuration for the Gardener store is required. '
            'Please configure your SwitchConfig file properly'
        )

    try:
        return StoreConfigGardener.model_validate(store.config)
    except ValidationError as e:
        raise StoreConfigError(f'failed to unmarshal config for the Gardener kubeconfig store: {e}') from e


def get_garden_client(store_config: StoreConfigGardener) -> ApiClient:
    """Creates an API client for the Gardener API from the configured kubeconfig
    """
    try:
        return config.new_client_from_config(config_file=store_config.gardener_api_kubeconfig_path)
    except (ConfigException, OSError) as e:
        raise StoreConfigError(f'unable to create garden client: {e}') from e


def get_landscape_identity(
        logger: logging.Logger,
        v1: CoreV1Api,
) -> str:
    """Reads the identity of the landscape from the cluster-identity configmap of the garden cluster
    """
    logger.debug(f'Reading {CLUSTER_IDENTITY_CONFIGMAP} from ns {CLUSTER_IDENTITY_NAMESPACE}')
    try:
        configmap = v1.read_namespaced_config_map(CLUSTER_IDENTITY_CONFIGMAP, CLUSTER_IDENTITY_NAMESPACE)
    except exceptions.ApiException as e:
        logger.error('Error reading the landscape identity')
        logger.debug(f'error: {e}')
        raise

    identity = (configmap.data or {}).get(CLUSTER_IDENTITY_KEY)
    if not identity:
        raise StoreConfigError(
            f'configmap {CLUSTER_IDENTITY_NAMESPACE}/{CLUSTER_IDENTITY_CONFIGMAP} does not contain '
            f'the key {CLUSTER_IDENTITY_KEY}. Please configure the landscapeName of the Gardener store'
        )
    return identity


def list_secrets(
        logger: logging.Logger,
        v1: CoreV1Api,
        namespace: str,
) -> List[V1Secret]:
    logger.debug(f'Listing secrets in ns {namespace}')
    try:
        return v1.list_namespaced_secret(namespace).items
    except exceptions.ApiException as e:
        logger.error(f'Error listing secrets in namespace {namespace}')
        logger.debug(f'error: {e}')
        raise


def list_projects(
        logger: logging.Logger,
        custom_objects_api: CustomObjectsApi,
) -> List[Dict[str, Any]]:
    logger.debug('Listing projects')
    try:
        projects = custom_objects_api.list_cluster_custom_object(
            group=GARDENER_GROUP,
            version=GARDENER_VERSION,
            plural=PROJECTS_PLURAL,
        )
    except exceptions.ApiException as e:
        logger.error('Error listing projects')
        logger.debug(f'error: {e}')
        raise
    return projects['items']


def list_shoots(
        logger: logging.Logger,
        custom_objects_api: CustomObjectsApi,
        namespace: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Lists the Shoots of one namespace, or of all namespaces when none is given
    """
    logger.debug(f'Listing shoots in ns {namespace or "<all>"}')
    try:
        if namespace is None:
            shoots = custom_objects_api.list_cluster_custom_object(
                group=GARDENER_GROUP,
                version=GARDENER_VERSION,
                plural=SHOOTS_PLURAL,
            )
        else:
            shoots = custom_objects_api.list_namespaced_custom_object(
                group=GARDENER_GROUP,
                version=GARDENER_VERSION,
                namespace=namespace,
                plural=SHOOTS_PLURAL,
            )
    except exceptions.ApiException as e:
        logger.error('Error listing shoots')
        logger.debug(f'error: {e}')
        raise
    return shoots['items']
