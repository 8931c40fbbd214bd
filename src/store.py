import logging
from pathlib import Path
from typing import List, Optional

from kubernetes.client import CoreV1Api, CustomObjectsApi

from consts import GARDEN_NAMESPACE
from identifiers import get_garden_kubeconfig_path, get_secret_identifier, get_seed_identifier, \
    get_shoot_identifier, parse_identifier
from kubernetes_utils import get_garden_client, get_landscape_identity, get_store_config, list_projects, \
    list_secrets, list_shoots
from models import GardenerResource, KubeconfigStore
from secrets_utils import build_namespace_to_project_map, decode_kubeconfig, get_secret_namespace_name_to_secret, \
    is_shooted_seed


class GardenerStore:
    """Kubeconfig store backed by the Shoot kubeconfig secrets of a Gardener landscape.

    Nothing is cached between calls apart from the landscape identity: every
    search and lookup works on a fresh listing of the garden cluster.
    """

    def __init__(
        self,
        logger: logging.Logger,
        store: KubeconfigStore,
        v1: Optional[CoreV1Api] = None,
        custom_objects_api: Optional[CustomObjectsApi] = None,
    ) -> None:
        self.logger = logger
        self.store = store
        self.config = get_store_config(store)

        if v1 is None or custom_objects_api is None:
            api_client = get_garden_client(self.config)
            v1 = v1 or CoreV1Api(api_client)
            custom_objects_api = custom_objects_api or CustomObjectsApi(api_client)

        self.v1 = v1
        self.custom_objects_api = custom_objects_api
        self._landscape: Optional[str] = self.config.landscape_name

    @property
    def landscape(self) -> str:
        if self._landscape is None:
            self._landscape = get_landscape_identity(self.logger, self.v1)
            self.logger.info(f'Using landscape identity {self._landscape}')
        return self._landscape

    def get_id(self) -> str:
        return self.store.id or f'gardener-{self.landscape}'

    def search(self) -> List[str]:
        """Returns the identifiers of all kubeconfigs reachable through this landscape
        """
        identifiers = [get_garden_kubeconfig_path(self.landscape)]

        namespace_to_project = build_namespace_to_project_map(list_projects(self.logger, self.custom_objects_api))
        shoots = list_shoots(self.logger, self.custom_objects_api)
        self.logger.info(f'Found {len(shoots)} shoots in {len(namespace_to_project)} projects.')

        for shoot in shoots:
            metadata = shoot.get('metadata') or {}
            name = metadata.get('name')
            namespace = metadata.get('namespace')

            project = namespace_to_project.get(namespace)
            if project is None:
                self.logger.warning(f'Shoot {namespace}/{name} does not belong to any project. Skipping.')
                continue

            identifiers.append(get_shoot_identifier(self.landscape, project, name))
            if is_shooted_seed(shoot):
                identifiers.append(get_seed_identifier(self.landscape, name))

        return identifiers

    def get_kubeconfig_for_path(self, path: str) -> Optional[bytes]:
        """Returns the kubeconfig addressed by an identifier returned from search

        Raises IdentifierParseError for identifiers not following the Gardener scheme.
        """
        if path == get_garden_kubeconfig_path(self.landscape):
            return Path(self.config.gardener_api_kubeconfig_path).expanduser().read_bytes()

        identifier = parse_identifier(path)
        if identifier.landscape != self.landscape:
            self.logger.warning(f'Kubeconfig {path} does not belong to landscape {self.landscape}.')
            return None

        if identifier.resource == GardenerResource.SHOOT:
            namespace = identifier.namespace
        else:
            namespace = GARDEN_NAMESPACE

        secrets = get_secret_namespace_name_to_secret(self.logger, list_secrets(self.logger, self.v1, namespace))
        secret = secrets.get(get_secret_identifier(namespace, identifier.name))
        if secret is None:
            self.logger.warning(f'No kubeconfig found for {identifier.resource.value} {namespace}/{identifier.name}.')
            return None

        self.logger.debug(f'Using secret {secret.metadata.namespace}/{secret.metadata.name} for {path}')
        return decode_kubeconfig(secret)
