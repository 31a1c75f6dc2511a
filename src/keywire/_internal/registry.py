from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from keywire._internal.injection import WiringDeclaration
from keywire.strategies import Strategy


@dataclass(frozen=True, slots=True)
class Payload:
    """Deferred constructor arguments attached by ``Resolver.configure``.

    When ``producer`` is set it is called on every instantiation and its result
    is passed as the single positional argument.
    """

    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    producer: Callable[[], Any] | None = None

    def build(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        """Return the positional and keyword arguments for the next constructor call."""
        if self.producer is not None:
            return (self.producer(),), dict(self.kwargs)
        return self.args, dict(self.kwargs)


@dataclass(slots=True)
class WiringRecord:
    """Describe how a single key is produced.

    ``target`` is the wired value for value wirings and the user class for the
    other strategies. ``config`` holds the wiring injected on top of the
    class's own declared wiring.
    """

    key: str
    strategy: Strategy
    target: Any
    config: WiringDeclaration | None = None
    payload: Payload | None = None
    constructor: type[Any] | None = None
    """Wrapped constructor, built lazily and reused for every instantiation."""


class WiringRegistry:
    """Store wiring records indexed by key.

    Keys are unique: setting a record for an existing key replaces the
    previous record.
    """

    def __init__(self) -> None:
        self._records: dict[str, WiringRecord] = {}

    def set(self, record: WiringRecord) -> None:
        self._records[record.key] = record

    def get(self, key: str) -> WiringRecord | None:
        return self._records.get(key)

    def delete(self, key: str) -> WiringRecord | None:
        """Remove the record for ``key`` and return it, if it existed."""
        return self._records.pop(key, None)

    def has(self, key: str) -> bool:
        return key in self._records

    def keys(self) -> list[str]:
        return list(self._records)
