from keywire.context import Context
from keywire.events import Event, EventBus
from keywire.exceptions import (
    KeywireContextDestroyedError,
    KeywireError,
    KeywireInvalidConfigTargetError,
    KeywireInvalidRegistrationError,
    KeywireInvalidWiringError,
    KeywireNotInstantiableError,
    KeywireUnresolvedKeyError,
)
from keywire.resolver import MessagingContext, Resolver
from keywire.strategies import Strategy

__all__ = [
    "Context",
    "Event",
    "EventBus",
    "KeywireContextDestroyedError",
    "KeywireError",
    "KeywireInvalidConfigTargetError",
    "KeywireInvalidRegistrationError",
    "KeywireInvalidWiringError",
    "KeywireNotInstantiableError",
    "KeywireUnresolvedKeyError",
    "MessagingContext",
    "Resolver",
    "Strategy",
]
