from keywire.strategies import Strategy

DEFAULT_WIRING_ATTRIBUTE = "wiring"
"""Attribute read from targets (instance first, then class) for dependency declarations."""

DEFAULT_VIEW_CAPABILITIES: tuple[str, ...] = ("listen", "dispatch")
"""Context methods attached to every view instance built by a context's resolver."""

CONTEXT_WIRING_SECTIONS: dict[str, Strategy] = {
    "values": Strategy.VALUE,
    "classes": Strategy.CLASS,
    "singletons": Strategy.SINGLETON,
    "views": Strategy.VIEW,
}
"""Sections accepted in a ``Context.wiring`` declaration, in registration order."""

WILDCARD_EVENT = "*"
"""Event name whose subscribers receive every published event."""
