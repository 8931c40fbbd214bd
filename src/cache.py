from abc import ABC, abstractmethod
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar('T')


class Index(ABC, Generic[T]):
    """String keyed container rebuilt from scratch on every scan."""

    def __init__(self) -> None:
        self.items: Dict[str, T] = {}

    @abstractmethod
    def put(self, key: str, value: T) -> bool:
        """Insert value under key, returns whether the container changed."""
        pass

    def get(self, key: str) -> Optional[T]:
        return self.items.get(key, None)

    def has(self, key: str) -> bool:
        return key in self.items

    def as_dict(self) -> Dict[str, T]:
        return dict(self.items)

    def __len__(self) -> int:
        return len(self.items)


class OverwriteIndex(Index[T]):
    """Later insertions replace earlier ones."""

    def put(self, key: str, value: T) -> bool:
        self.items[key] = value
        return True


class FirstWinsIndex(Index[T]):
    """The first insertion for a key is kept, later ones are ignored."""

    def put(self, key: str, value: T) -> bool:
        if key in self.items:
            return False
        self.items[key] = value
        return True
