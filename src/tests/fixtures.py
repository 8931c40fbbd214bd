import base64
from typing import Any, Dict, Optional

from kubernetes.client import V1ObjectMeta, V1OwnerReference, V1Secret


KUBECONFIG = 'apiVersion: v1\nkind: Config\n'


def make_secret(
        name: str,
        namespace: str,
        owner_kind: Optional[str] = None,
        owner_name: Optional[str] = None,
        data: Optional[Dict[str, str]] = None,
) -> V1Secret:
    owner_references = None
    if owner_kind is not None:
        owner_references = [V1OwnerReference(
            api_version='core.gardener.cloud/v1beta1',
            kind=owner_kind,
            name=owner_name,
            uid=f'{owner_name}-uid',
        )]

    if data is None:
        data = {'kubeconfig': base64.b64encode(KUBECONFIG.encode()).decode()}

    return V1Secret(
        api_version='v1',
        kind='Secret',
        metadata=V1ObjectMeta(name=name, namespace=namespace, owner_references=owner_references),
        data=data,
        type='Opaque',
    )


def make_project(name: str, namespace: Optional[str]) -> Dict[str, Any]:
    spec = {} if namespace is None else {'namespace': namespace}
    return {'metadata': {'name': name}, 'spec': spec}


def make_shoot(name: str, namespace: str, annotations: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    return {'metadata': {'name': name, 'namespace': namespace, 'annotations': annotations}}

