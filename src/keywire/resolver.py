from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Iterator
from typing import Any, Protocol

from typing_extensions import Self

from keywire._internal.injection import Injector, WiringDeclaration, declared_wiring, parse_wiring
from keywire._internal.registry import Payload, WiringRecord, WiringRegistry
from keywire._internal.wrapping import unwrap_constructor, wrap_constructor
from keywire.defaults import DEFAULT_VIEW_CAPABILITIES, DEFAULT_WIRING_ATTRIBUTE
from keywire.exceptions import (
    KeywireInvalidConfigTargetError,
    KeywireInvalidRegistrationError,
    KeywireNotInstantiableError,
    KeywireUnresolvedKeyError,
)
from keywire.strategies import Strategy

logger = logging.getLogger(__name__)


class MessagingContext(Protocol):
    """Protocol for the context whose messaging is attached to view instances."""

    def listen(self, target: Any, event_name: str, callback: Callable[..., Any]) -> None: ...

    def dispatch(self, event_name: str, payload: Any = None) -> None: ...


class Resolver:
    """Map string keys to wirings and build the object graph on demand.

    Four strategies are supported: values are returned as-is, classes are
    instantiated on every lookup, singletons are instantiated once and cached
    for the resolver lifetime, and views are returned as a wrapped class whose
    instances receive the owning context's ``listen``/``dispatch``.

    Instances built by the resolver get their declared dependencies assigned
    before their own ``__init__`` runs, exactly once per instance. Lookups that
    miss locally fall through to the parent resolver, then its parent, and so
    on; the resolver that owns the wiring produces the object.

    Resolution is synchronous and unchecked for cycles: a singleton whose
    dependency graph leads back to itself recurses until ``RecursionError``.
    """

    def __init__(
        self,
        parent: Resolver | None = None,
        *,
        context: MessagingContext | None = None,
        wiring_attribute: str = DEFAULT_WIRING_ATTRIBUTE,
        view_capabilities: tuple[str, ...] = DEFAULT_VIEW_CAPABILITIES,
    ) -> None:
        """Initialize an empty resolver.

        Args:
            parent: Resolver consulted when a key is not wired locally. It is
                only read from, never mutated.
            context: Context whose messaging methods are attached to view
                instances. Views built without a context only get dependencies.
            wiring_attribute: Attribute read from targets for their wiring
                declaration.
            view_capabilities: Names of the context methods attached to view
                instances.

        """
        self._parent = parent
        self._context = context
        self._wiring_attribute = wiring_attribute
        self._view_capabilities = view_capabilities

        self._registry = WiringRegistry()
        self._singletons: dict[str, Any] = {}
        self._injector = Injector()

    @property
    def parent(self) -> Resolver | None:
        return self._parent

    @property
    def context(self) -> MessagingContext | None:
        return self._context

    def ancestors(self) -> Iterator[Resolver]:
        """Yield the parent chain, nearest first."""
        resolver = self._parent
        while resolver is not None:
            yield resolver
            resolver = resolver._parent

    # region Registration Methods
    def wire_value(self, key: str, value: Any) -> Self:
        """Wire a shared value; every lookup returns this exact object."""
        return self._wire(key, Strategy.VALUE, value, None)

    def wire_class(self, key: str, cls: type[Any], config: Any = None) -> Self:
        """Wire a class; every lookup returns a new instance.

        Args:
            key: Key to wire.
            cls: Class to instantiate.
            config: Optional wiring (mapping of property name to key, or a
                sequence of keys) injected in addition to the class's own
                declaration.

        """
        return self._wire(key, Strategy.CLASS, cls, config)

    def wire_singleton(self, key: str, cls: type[Any], config: Any = None) -> Self:
        """Wire a class instantiated once, on first lookup, and shared afterwards.

        Args:
            key: Key to wire.
            cls: Class to instantiate.
            config: Optional wiring injected in addition to the class's own
                declaration.

        """
        return self._wire(key, Strategy.SINGLETON, cls, config)

    def wire_view(self, key: str, view_cls: type[Any], config: Any = None) -> Self:
        """Wire a view class; lookups return a wrapped class, not an instance.

        Instances of the returned class get their dependencies and the owning
        context's messaging methods before the original ``__init__`` runs.

        Args:
            key: Key to wire.
            view_cls: View class to wrap.
            config: Optional wiring injected in addition to the class's own
                declaration.

        """
        return self._wire(key, Strategy.VIEW, view_cls, config)

    def _wire(self, key: str, strategy: Strategy, target: Any, config: Any) -> Self:
        if not isinstance(key, str) or not key:
            msg = f"Wiring keys must be non-empty strings, got {key!r}."
            raise KeywireInvalidRegistrationError(msg)

        declaration: WiringDeclaration | None = None
        if strategy is not Strategy.VALUE:
            if not inspect.isclass(target):
                msg = f"Cannot wire {key!r} as {strategy.value}: expected a class, got {target!r}."
                raise KeywireInvalidRegistrationError(msg)
            target = unwrap_constructor(target)
            declaration = parse_wiring(config)

        self._singletons.pop(key, None)
        self._registry.set(
            WiringRecord(key=key, strategy=strategy, target=target, config=declaration),
        )
        logger.debug("Wired %r as %s", key, strategy.value)
        return self

    # endregion Registration Methods

    # region Lookup Methods
    def has_wiring(self, key: str) -> bool:
        """Return whether ``key`` is wired on this resolver, ignoring ancestors."""
        return self._registry.has(key)

    def wired_keys(self) -> list[str]:
        """Return the keys wired on this resolver, ignoring ancestors."""
        return self._registry.keys()

    def get_object(self, key: str) -> Any:
        """Return the object wired under ``key`` according to its strategy.

        Raises:
            KeywireUnresolvedKeyError: If neither this resolver nor any ancestor
                wires ``key``.

        """
        owner, record = self._find(key)
        return owner._produce(record)

    def instantiate(self, key: str) -> Any:
        """Build a new instance for ``key``, bypassing the singleton cache.

        View wirings produce a new view instance built without arguments.

        Raises:
            KeywireUnresolvedKeyError: If no resolver in the chain wires ``key``.
            KeywireNotInstantiableError: If ``key`` is wired as a value.

        """
        owner, record = self._find(key)
        if record.strategy is Strategy.VALUE:
            raise KeywireNotInstantiableError(key)
        if record.strategy is Strategy.VIEW:
            return owner._constructor(record)()
        return owner._construct(record)

    def resolve(self, target: Any, wiring: Any = None) -> Any:
        """Inject the dependencies declared by ``target`` and return it.

        ``target`` can be any object; its wiring is read from the instance and
        then its class. An explicit ``wiring`` replaces the declared one. A
        target without wiring is left untouched.
        """
        if wiring is not None:
            declaration = parse_wiring(wiring)
        else:
            declaration = declared_wiring(target, self._wiring_attribute)
        return self._injector.inject(target, declaration, self.get_object)

    def _find(self, key: str) -> tuple[Resolver, WiringRecord]:
        resolver: Resolver | None = self
        while resolver is not None:
            record = resolver._registry.get(key)
            if record is not None:
                return resolver, record
            resolver = resolver._parent
        raise KeywireUnresolvedKeyError(key)

    # endregion Lookup Methods

    # region Configuration Methods
    def configure(self, key: str, *args: Any, **kwargs: Any) -> Self:
        """Attach constructor arguments to a local class or singleton wiring.

        The arguments are passed to the constructor on the next instantiation.
        A single callable (that is not a class) is treated as a producer: it is
        called on every instantiation and its result becomes the first
        positional argument. This includes ``functools.partial`` objects, bound
        methods and instances defining ``__call__``; to pass such a callable as
        the argument itself, wrap it in a producer (``lambda: handler``).
        Calling ``configure`` again replaces the payload.
        An already cached singleton is not rebuilt.

        Raises:
            KeywireUnresolvedKeyError: If ``key`` is not wired on this resolver.
            KeywireInvalidConfigTargetError: If ``key`` is wired as a value or view.

        """
        record = self._registry.get(key)
        if record is None:
            raise KeywireUnresolvedKeyError(key)
        if not record.strategy.configurable:
            raise KeywireInvalidConfigTargetError(key, record.strategy)

        if len(args) == 1 and not kwargs and callable(args[0]) and not inspect.isclass(args[0]):
            record.payload = Payload(producer=args[0])
        else:
            record.payload = Payload(args=args, kwargs=kwargs)
        logger.debug("Configured %r with a constructor payload", key)
        return self

    def release(self, key: str) -> None:
        """Remove the wiring for ``key`` and its cached singleton, if any."""
        record = self._registry.delete(key)
        self._singletons.pop(key, None)
        if record is not None:
            logger.debug("Released %r", key)

    # endregion Configuration Methods

    # region Construction
    def _produce(self, record: WiringRecord) -> Any:
        if record.strategy is Strategy.VALUE:
            return record.target
        if record.strategy is Strategy.VIEW:
            return self._constructor(record)
        if record.strategy is Strategy.CLASS:
            return self._construct(record)

        if record.key in self._singletons:
            return self._singletons[record.key]
        instance = self._construct(record)
        self._singletons[record.key] = instance
        logger.debug("Cached singleton %r", record.key)
        return instance

    def _construct(self, record: WiringRecord) -> Any:
        constructor = self._constructor(record)
        if record.payload is None:
            return constructor()
        args, kwargs = record.payload.build()
        return constructor(*args, **kwargs)

    def _constructor(self, record: WiringRecord) -> type[Any]:
        if record.constructor is None:
            record.constructor = wrap_constructor(
                record.target,
                lambda instance: self._setup_instance(record, instance),
            )
        return record.constructor

    def _setup_instance(self, record: WiringRecord, instance: Any) -> None:
        self.resolve(instance)
        self._injector.inject(instance, record.config, self.get_object)
        if record.strategy is Strategy.VIEW:
            self._attach_view_capabilities(instance)

    def _attach_view_capabilities(self, instance: Any) -> None:
        context = self._context
        if context is None:
            return
        for name in self._view_capabilities:
            setattr(instance, name, _route_to(context, name))

    # endregion Construction

    def __repr__(self) -> str:
        return f"{type(self).__name__}(keys={self._registry.keys()!r}, parent={self._parent!r})"


def _route_to(context: Any, name: str) -> Callable[..., Any]:
    """Build a callable forwarding to ``context.<name>``, looked up at call time."""

    def route(*args: Any, **kwargs: Any) -> Any:
        return getattr(context, name)(*args, **kwargs)

    route.__name__ = name
    route.__qualname__ = f"{type(context).__qualname__}.{name}"
    return route
