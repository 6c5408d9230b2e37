"""A base class giving each subclass one lazily created, process-wide instance."""

from __future__ import annotations

import threading
from typing import Any, ClassVar


class Singleton:
    """Subclasses get ``get_instance`` and ``exit_instance``.

    The instance is created at most once and released at most once; after
    ``exit_instance`` has run, ``get_instance`` returns ``None``.
    """

    _singleton_lock: ClassVar[threading.Lock]
    _singleton_instance: ClassVar[Any]
    _singleton_created: ClassVar[bool]
    _singleton_exited: ClassVar[bool]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        _reset_state(cls)

    @classmethod
    def get_instance(cls) -> Any:
        """Return the shared instance, creating it on first call."""
        with cls._singleton_lock:
            if not cls._singleton_created:
                cls._singleton_instance = cls()
                cls._singleton_created = True
            return cls._singleton_instance

    @classmethod
    def exit_instance(cls) -> None:
        """Release the shared instance; later calls do nothing."""
        with cls._singleton_lock:
            if cls._singleton_exited:
                return
            if cls._singleton_instance is None:
                raise RuntimeError(f"{cls.__name__} has no instance to release")
            cls._singleton_instance = None
            cls._singleton_exited = True

    def __copy__(self) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")

    def __deepcopy__(self, memo: dict) -> Any:
        raise TypeError(f"{type(self).__name__} cannot be copied")


def _reset_state(cls: type[Singleton]) -> None:
    cls._singleton_lock = threading.Lock()
    cls._singleton_instance = None
    cls._singleton_created = False
    cls._singleton_exited = False


_reset_state(Singleton)