from __future__ import annotations

from typing import Callable, Dict, Generic, List, TypeVar

from crossframe.errors import ConfigurationError

V = TypeVar("V")


class Registry(Generic[V]):
    """Case-insensitive name -> implementation table.

    Registering a name twice is a programming error. Looking up an unknown
    name is a configuration error and reports the known names.
    """

    def __init__(self, kind: str):
        self.kind = kind
        self._items: Dict[str, V] = {}

    def register(self, name: str) -> Callable[[V], V]:
        key = name.lower()

        def deco(value: V) -> V:
            if key in self._items:
                raise ValueError(f"{self.kind} {key!r} is already registered")
            self._items[key] = value
            return value

        return deco

    def lookup(self, name: str) -> V:
        try:
            return self._items[str(name).lower()]
        except KeyError:
            raise ConfigurationError(
                f"Unknown {self.kind}: {name!r} (known: {', '.join(self.names())})"
            ) from None

    def names(self) -> List[str]:
        return sorted(self._items)
