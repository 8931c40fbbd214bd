class StoreConfigError(Exception):
    """The Gardener store configuration is missing or cannot be decoded."""


class IdentifierParseError(ValueError):
    """A kubeconfig identifier does not follow the Gardener naming scheme."""

    def __init__(self, path: str):
        super().__init__(f'cannot parse kubeconfig path: {path!r}')
        self.path = path
