"""In-process publish/subscribe used by contexts for ``listen``/``dispatch``."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from keywire.defaults import WILDCARD_EVENT

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Event:
    """An event delivered to subscribers."""

    name: str
    payload: Any = None


@dataclass(frozen=True, slots=True)
class Subscription:
    owner: Any
    event_name: str
    callback: Callable[[Event], Any]


class EventBus:
    """Synchronous event bus keyed by event name.

    Subscriptions are grouped by an owner object so everything an owner
    listens to can be dropped at once. Callbacks run in subscription order;
    exceptions raised by a callback propagate to the publisher.
    """

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._subscriptions: dict[str, list[Subscription]] = defaultdict(list)

    def subscribe(self, owner: Any, event_name: str, callback: Callable[[Event], Any]) -> Subscription:
        """Register ``callback`` for ``event_name`` on behalf of ``owner``.

        Use ``"*"`` as the event name to receive every event.
        """
        if not callable(callback):
            msg = f"Event callbacks must be callable, got {callback!r}."
            raise TypeError(msg)
        subscription = Subscription(owner=owner, event_name=event_name, callback=callback)
        self._subscriptions[event_name].append(subscription)
        logger.debug("EventBus %r: %r subscribed to %r", self.name, owner, event_name)
        return subscription

    def unsubscribe(self, owner: Any, event_name: str | None = None) -> int:
        """Drop subscriptions of ``owner``, optionally only for ``event_name``.

        Returns:
            The number of removed subscriptions.

        """
        names = [event_name] if event_name is not None else list(self._subscriptions)
        removed = 0
        for name in names:
            subscriptions = self._subscriptions.get(name)
            if not subscriptions:
                continue
            kept = [subscription for subscription in subscriptions if subscription.owner is not owner]
            removed += len(subscriptions) - len(kept)
            if kept:
                self._subscriptions[name] = kept
            else:
                del self._subscriptions[name]
        return removed

    def publish(self, event_name: str, payload: Any = None) -> Event:
        """Deliver an event to its subscribers and the wildcard subscribers."""
        event = Event(name=event_name, payload=payload)
        subscriptions = list(self._subscriptions.get(event_name, ()))
        if event_name != WILDCARD_EVENT:
            subscriptions.extend(self._subscriptions.get(WILDCARD_EVENT, ()))
        for subscription in subscriptions:
            subscription.callback(event)
        return event

    def has_subscribers(self, event_name: str) -> bool:
        return bool(self._subscriptions.get(event_name))

    def clear(self) -> None:
        self._subscriptions.clear()
