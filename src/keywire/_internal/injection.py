from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from keywire.defaults import DEFAULT_WIRING_ATTRIBUTE
from keywire.exceptions import KeywireInvalidWiringError

_SEQUENCE_TYPES = (list, tuple, set, frozenset)

# Classes setting this to True use their wiring attribute for something else.
NOT_INJECTABLE_ATTR = "__keywire_not_injectable__"


@dataclass(frozen=True, slots=True)
class ArrayWiring:
    """Wiring declared as a sequence of keys; each key is also the property name."""

    keys: tuple[str, ...]

    def assignments(self) -> tuple[tuple[str, str], ...]:
        return tuple((key, key) for key in self.keys)


@dataclass(frozen=True, slots=True)
class MapWiring:
    """Wiring declared as a mapping of property name to key."""

    properties: tuple[tuple[str, str], ...]

    def assignments(self) -> tuple[tuple[str, str], ...]:
        return self.properties


WiringDeclaration: TypeAlias = ArrayWiring | MapWiring


def parse_wiring(raw: Any) -> WiringDeclaration | None:
    """Normalize a user ``wiring`` declaration into its tagged form.

    ``None`` means "nothing to inject". Sequences become ``ArrayWiring``,
    mappings become ``MapWiring``. Anything else, including a bare string,
    raises ``KeywireInvalidWiringError``.
    """
    if raw is None:
        return None
    if isinstance(raw, ArrayWiring | MapWiring):
        return raw
    if isinstance(raw, Mapping):
        properties = tuple((name, key) for name, key in raw.items())
        for name, key in properties:
            _validate_name(name, raw)
            _validate_name(key, raw)
        return MapWiring(properties=properties)
    if isinstance(raw, _SEQUENCE_TYPES):
        keys = tuple(raw)
        for key in keys:
            _validate_name(key, raw)
        return ArrayWiring(keys=keys)

    msg = (
        f"Wiring must be a sequence of keys or a mapping of property names to keys, "
        f"got {raw!r}."
    )
    raise KeywireInvalidWiringError(msg)


def _validate_name(value: Any, raw: Any) -> None:
    if not isinstance(value, str) or not value:
        msg = f"Wiring entries must be non-empty strings, got {value!r} in {raw!r}."
        raise KeywireInvalidWiringError(msg)


def declared_wiring(
    target: Any,
    attribute: str = DEFAULT_WIRING_ATTRIBUTE,
) -> WiringDeclaration | None:
    """Read the wiring declared on ``target`` or inherited from its class.

    Targets whose class sets ``NOT_INJECTABLE_ATTR`` (contexts, whose
    ``wiring`` lists registrations) declare nothing.
    """
    if getattr(type(target), NOT_INJECTABLE_ATTR, False):
        return None
    return parse_wiring(getattr(target, attribute, None))


class Injector:
    """Assign resolved dependencies onto targets according to their wiring."""

    def inject(
        self,
        target: Any,
        declaration: WiringDeclaration | None,
        lookup: Callable[[str], Any],
    ) -> Any:
        """Resolve every declared key through ``lookup`` and assign it onto ``target``.

        All keys are looked up before the first assignment, so a missing key
        leaves ``target`` untouched.
        """
        if declaration is None:
            return target

        resolved = [(name, lookup(key)) for name, key in declaration.assignments()]
        for name, value in resolved:
            setattr(target, name, value)
        return target
