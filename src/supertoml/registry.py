"""Name-keyed registry used to hold the plugin pipeline.

Plugins are addressed by name: the name selects a plugin's configuration
from a table's reserved ``_`` namespace, and the resolver walks the registry
in an explicitly configured order rather than by position.

Example:
    ```python
    from supertoml.registry import Registry

    registry = Registry[Plugin]("plugins")
    registry.register("before", BeforePlugin())
    registry.register("templating", TemplatingPlugin())

    for plugin in registry.ordered(["before", "templating"]):
        ...
    ```
"""

from typing import Dict, Generic, Iterable, List, TypeVar

from .exceptions import NotFoundError, OperationError

T = TypeVar("T")


class Registry(Generic[T]):
    """Named items kept in registration order.

    A registry belongs to a single resolver and is not shared between
    threads.

    Args:
        name: Name for this registry instance, used in error messages
    """

    def __init__(self, name: str):
        self._name = name
        self._items: Dict[str, T] = {}

    @property
    def name(self) -> str:
        return self._name

    def register(self, key: str, item: T) -> None:
        """Register an item under a unique key.

        Raises:
            OperationError: If the key is already registered
        """
        if key in self._items:
            raise OperationError(
                f"Item '{key}' already registered in {self._name}",
                context={"key": key, "registry": self._name},
            )
        self._items[key] = item

    def get(self, key: str) -> T:
        """Get an item by key.

        Raises:
            NotFoundError: If item not found
        """
        if key not in self._items:
            raise NotFoundError(
                f"Item not found: {key}",
                context={
                    "key": key,
                    "registry": self._name,
                    "available_keys": list(self._items),
                },
            )
        return self._items[key]

    def list_keys(self) -> List[str]:
        """List all registered keys in registration order."""
        return list(self._items)

    def ordered(self, keys: Iterable[str]) -> List[T]:
        """Return the items named by ``keys``, in that order.

        Raises:
            NotFoundError: If any name is not registered
        """
        return [self.get(key) for key in keys]

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: str) -> bool:
        return key in self._items

    def __repr__(self) -> str:
        return f"Registry(name={self._name!r}, keys={self.list_keys()!r})"
