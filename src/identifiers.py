from typing import List, Optional

from consts import GARDEN_KUBECONFIG_SUFFIX, IDENTIFIER_SEPARATOR, PROJECT_NAMESPACE_PREFIX
from errors import IdentifierParseError
from models import GardenerResource, Identifier
from os_utils import get_strict_identifiers

SHOOT_MARKER = 'shoot'
SEED_MARKER = 'seed'


def get_garden_kubeconfig_path(landscape_identity: str) -> str:
    """Path of the kubeconfig pointing to the Gardener API of a landscape
    """
    return f'{landscape_identity}{GARDEN_KUBECONFIG_SUFFIX}'


# <namespace>/<name>
def get_secret_identifier(namespace: str, name: str) -> str:
    return f'{namespace}/{name}'


def get_project_namespace(project: str) -> str:
    return f'{PROJECT_NAMESPACE_PREFIX}{project}'


# <landscape>--seed--<seed-name>
def get_seed_identifier(landscape: str, seed_name: str) -> str:
    return IDENTIFIER_SEPARATOR.join([landscape, SEED_MARKER, seed_name])


# <landscape>--shoot--<project-name>--<shoot-name>
def get_shoot_identifier(landscape: str, project: str, shoot: str) -> str:
    return IDENTIFIER_SEPARATOR.join([landscape, SHOOT_MARKER, project, shoot])


def parse_identifier(path: str, strict: Optional[bool] = None) -> Identifier:
    """Parse a kubeconfig identifier into its Gardener resource reference.

    Parameters
    ----------
    path: str
        Identifier built by get_shoot_identifier or get_seed_identifier.
    strict: Optional[bool]
        Require the kind segment to be exactly 'shoot' or 'seed' and all
        segments to be non-empty. When None, GARDENER_STRICT_IDENTIFIERS decides.
        Otherwise the kind is detected by a substring match on the whole path,
        so a landscape or project name containing 'shoot' or 'seed' passes.

    Returns
    -------
    Identifier
        Landscape, resource kind, resource name and, for Shoots,
        the project namespace and project name.

    Raises
    ------
    IdentifierParseError
        If the path has neither the Shoot nor the Seed form.
    """
    if strict is None:
        strict = get_strict_identifiers()

    split = path.split(IDENTIFIER_SEPARATOR)
    if strict and not all(split):
        raise IdentifierParseError(path)

    if len(split) == 4:
        if not _has_marker(path, split, SHOOT_MARKER, strict):
            raise IdentifierParseError(path)
        return Identifier(
            landscape=split[0],
            resource=GardenerResource.SHOOT,
            name=split[3],
            namespace=get_project_namespace(split[2]),
            project=split[2],
        )

    if len(split) == 3:
        if not _has_marker(path, split, SEED_MARKER, strict):
            raise IdentifierParseError(path)
        return Identifier(
            landscape=split[0],
            resource=GardenerResource.SEED,
            name=split[2],
        )

    raise IdentifierParseError(path)


def _has_marker(path: str, split: List[str], marker: str, strict: bool) -> bool:
    if strict:
        return split[1] == marker
    return marker in path
