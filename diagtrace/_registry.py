from typing import Dict
from typing import Generic
from typing import Iterator
from typing import Type
from typing import TypeVar

from .internal.logger import get_logger


log = get_logger(__name__)

T = TypeVar("T")


class Registry(Generic[T]):
    """Insertion ordered set of registered types.

    Each type is registered at most once: adding a type that is already
    present leaves the registry unchanged, and removing an absent type does
    nothing. Instances are created from the registered types when the
    builder is built.
    """

    def __init__(self, name):
        # type: (str) -> None
        self.name = name
        self._entries = {}  # type: Dict[Type[T], Type[T]]

    def add(self, entry_type: Type[T]) -> bool:
        """Register ``entry_type``, returning whether it was not yet registered."""
        if entry_type in self._entries:
            log.debug("%s %s already registered", self.name, entry_type.__name__)
            return False
        self._entries[entry_type] = entry_type
        log.debug("registered %s %s", self.name, entry_type.__name__)
        return True

    def remove(self, entry_type: Type[T]) -> bool:
        """Unregister ``entry_type``, returning whether it was registered."""
        if self._entries.pop(entry_type, None) is None:
            return False
        log.debug("removed %s %s", self.name, entry_type.__name__)
        return True

    def __contains__(self, entry_type: object) -> bool:
        return entry_type in self._entries

    def __iter__(self) -> Iterator[Type[T]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return "<{} {}: {}>".format(
            self.__class__.__name__, self.name, ", ".join(t.__name__ for t in self._entries)
        )
