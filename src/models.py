from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class GardenerResource(str, Enum):
    SHOOT = 'Shoot'
    SEED = 'Seed'


class Identifier(BaseModel):
    landscape: str
    resource: GardenerResource
    name: str
    namespace: str = ''
    project: str = ''


class StoreConfigGardener(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    gardener_api_kubeconfig_path: str = Field(alias='gardenerAPIKubeconfigPath')
    landscape_name: Optional[str] = Field(default=None, alias='landscapeName')


class KubeconfigStore(BaseModel):
    kind: str
    id: Optional[str] = None
    paths: List[str] = []
    config: Optional[Dict[str, Any]] = None
