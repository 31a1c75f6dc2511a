from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from types import TracebackType
from typing import Any, ClassVar

from typing_extensions import Self

from keywire.defaults import CONTEXT_WIRING_SECTIONS, DEFAULT_WIRING_ATTRIBUTE
from keywire.events import Event, EventBus
from keywire.exceptions import KeywireContextDestroyedError, KeywireInvalidRegistrationError
from keywire.resolver import Resolver
from keywire.strategies import Strategy

logger = logging.getLogger(__name__)


class Context:
    """Own a resolver and an event bus, optionally nested under a parent context.

    The context's resolver delegates lookups to the parent context's resolver.
    The parent is referenced, not owned: destroying a child never affects its
    parent.

    Subclasses may declare their wirings::

        class AppContext(Context):
            wiring = {
                "values": {"config": settings},
                "singletons": {"store": Store},
                "classes": {"request": (Request, {"store": "store"})},
                "views": {"main": MainView},
            }

    Entries are either the wired object or a ``(class, config)`` pair. Since
    ``wiring`` lists registrations, ``resolver.resolve(context)`` treats a
    context as declaring no dependencies; pass an explicit wiring instead.
    """

    wiring: ClassVar[Mapping[str, Mapping[str, Any]] | None] = None
    __keywire_not_injectable__: ClassVar[bool] = True

    def __init__(
        self,
        parent: Context | None = None,
        *,
        wiring_attribute: str = DEFAULT_WIRING_ATTRIBUTE,
    ) -> None:
        """Initialize the context and register its declared wirings.

        Args:
            parent: Context whose resolver answers lookups this context misses.
            wiring_attribute: Attribute read from targets for their wiring
                declaration.

        """
        self._parent = parent
        self._destroyed = False
        self._bus = EventBus(name=type(self).__qualname__)
        self.resolver = Resolver(
            parent.resolver if parent is not None else None,
            context=self,
            wiring_attribute=wiring_attribute,
        )
        self._wire_declared(type(self).wiring)
        logger.debug("Created %s (parent=%r)", type(self).__qualname__, parent)

    @property
    def parent(self) -> Context | None:
        return self._parent

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def _wire_declared(self, declaration: Mapping[str, Mapping[str, Any]] | None) -> None:
        if not declaration:
            return
        unknown = set(declaration) - set(CONTEXT_WIRING_SECTIONS)
        if unknown:
            msg = (
                f"Unknown context wiring sections {sorted(unknown)!r}; "
                f"expected any of {list(CONTEXT_WIRING_SECTIONS)!r}."
            )
            raise KeywireInvalidRegistrationError(msg)

        for section, strategy in CONTEXT_WIRING_SECTIONS.items():
            for key, entry in (declaration.get(section) or {}).items():
                self._wire_entry(key, strategy, entry)

    def _wire_entry(self, key: str, strategy: Strategy, entry: Any) -> None:
        if strategy is Strategy.VALUE:
            self.resolver.wire_value(key, entry)
            return

        config = None
        if isinstance(entry, tuple) and len(entry) == 2 and inspect.isclass(entry[0]):  # noqa: PLR2004
            entry, config = entry
        if strategy is Strategy.CLASS:
            self.resolver.wire_class(key, entry, config)
        elif strategy is Strategy.SINGLETON:
            self.resolver.wire_singleton(key, entry, config)
        else:
            self.resolver.wire_view(key, entry, config)

    # region Messaging
    def listen(self, target: Any, event_name: str, callback: Callable[[Event], Any]) -> None:
        """Call ``callback`` whenever ``event_name`` is dispatched on this context.

        ``target`` owns the subscription; ``unlisten(target)`` drops it.
        """
        self._ensure_alive()
        self._bus.subscribe(target, event_name, callback)

    def unlisten(self, target: Any, event_name: str | None = None) -> int:
        """Drop the subscriptions owned by ``target``."""
        return self._bus.unsubscribe(target, event_name)

    def dispatch(self, event_name: str, payload: Any = None) -> None:
        """Deliver an event to the listeners of this context only."""
        self._ensure_alive()
        self._bus.publish(event_name, payload)

    def dispatch_to_parent(self, event_name: str, payload: Any = None) -> None:
        """Deliver an event to the parent context's listeners, if there is a parent."""
        self._ensure_alive()
        if self._parent is not None:
            self._parent.dispatch(event_name, payload)

    # endregion Messaging

    def destroy(self) -> None:
        """Drop all listeners and wirings. Repeated calls are no-ops."""
        if self._destroyed:
            return
        self._bus.clear()
        for key in self.resolver.wired_keys():
            self.resolver.release(key)
        self._destroyed = True
        logger.debug("Destroyed %s", type(self).__qualname__)

    def _ensure_alive(self) -> None:
        if self._destroyed:
            msg = f"{type(self).__qualname__} has been destroyed."
            raise KeywireContextDestroyedError(msg)

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.destroy()
