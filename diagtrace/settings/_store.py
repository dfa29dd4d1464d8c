from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import Type
from typing import TypeVar

from ..internal._exceptions import OptionsFrozenError
from ..internal.logger import get_logger


log = get_logger(__name__)

T = TypeVar("T")


class OptionStore(object):
    """Holds one options object per options type.

    Options are created with their defaults the first time they are requested
    and the same instance is returned afterwards, so every patch applied
    through :meth:`patch` accumulates on it regardless of when the module
    itself is enabled::

        store = OptionStore()
        store.patch(GenericDiagnosticOptions, lambda o: o.ignored_listener_names.add("Npgsql"))
        assert "Npgsql" in store.get_or_create(GenericDiagnosticOptions).ignored_listener_names

    The store does not validate values; each observer checks what it reads.
    """

    def __init__(self):
        # type: () -> None
        self._options = {}  # type: Dict[type, Any]
        self._frozen = False

    def get_or_create(self, options_type: Type[T]) -> T:
        try:
            return self._options[options_type]
        except KeyError:
            options = self._options[options_type] = options_type()
            if self._frozen:
                options.freeze()  # type: ignore[attr-defined]
            log.debug("created default %s", options_type.__name__)
            return options

    def patch(self, options_type: Type[T], configure: Callable[[T], Any]) -> T:
        """Apply ``configure`` to the options of ``options_type`` and return them."""
        if self._frozen:
            raise OptionsFrozenError(f"cannot configure {options_type.__name__}, options were already consumed")
        options = self.get_or_create(options_type)
        configure(options)
        return options

    def freeze(self) -> None:
        """Make every options object read-only. Called once observers are built."""
        for options in self._options.values():
            options.freeze()
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __contains__(self, options_type: object) -> bool:
        return options_type in self._options

    def __iter__(self) -> Iterator[type]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)
