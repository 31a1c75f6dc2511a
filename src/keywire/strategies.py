from enum import Enum


class Strategy(str, Enum):
    """Defines how the resolver produces the object wired under a key."""

    VALUE = "value"
    """The wired object itself is returned on every lookup."""

    CLASS = "class"
    """A new instance of the wired class is created on every lookup."""

    SINGLETON = "singleton"
    """A single instance is created on first lookup and shared for the resolver lifetime."""

    VIEW = "view"
    """A wrapped view class is returned; its instances receive the context's messaging."""

    @property
    def configurable(self) -> bool:
        """Whether the strategy accepts deferred constructor payloads."""
        return self in (Strategy.CLASS, Strategy.SINGLETON)
