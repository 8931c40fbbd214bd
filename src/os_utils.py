import os
from functools import cache

from consts import DATA_KEY_KUBECONFIG


@cache
def get_strict_identifiers() -> bool:
    """
    Wrapper for GARDENER_STRICT_IDENTIFIERS variable environment
    """
    strict = os.getenv('GARDENER_STRICT_IDENTIFIERS', 'false')
    return strict.lower() == 'true'


@cache
def get_kubeconfig_data_key() -> str:
    data_key = os.getenv('KUBECONFIG_DATA_KEY')

    if not data_key:
        return DATA_KEY_KUBECONFIG

    return data_key.strip()
