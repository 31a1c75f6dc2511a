from __future__ import annotations

from typing import Any


class KeywireError(Exception):
    """Represent a base class for all keywire-specific failures.

    Catch this type when you want to handle any keywire error path without
    matching each concrete exception class individually.
    """


class KeywireUnresolvedKeyError(KeywireError, LookupError):
    """Signal that a key has no wiring in the resolver or any of its ancestors.

    Raised by ``Resolver.get_object``, ``Resolver.instantiate``,
    ``Resolver.configure`` and, transitively, by dependency injection when a
    declared dependency cannot be found anywhere in the lookup chain.

    Typical fixes include wiring the key on the resolver (or on a parent
    context's resolver) before resolution, or correcting a typo in a
    ``wiring`` declaration.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"no mapping found for key {key!r}")


class KeywireInvalidConfigTargetError(KeywireError):
    """Signal deferred payload configuration of a value or view wiring.

    Raised by ``Resolver.configure``. Only singleton and class wirings are
    instantiated by the resolver itself, so only they accept constructor
    payloads. The wiring is left unchanged.
    """

    def __init__(self, key: str, strategy: Any) -> None:
        self.key = key
        self.strategy = strategy
        super().__init__(
            f"configuring {key!r} failed: configuration is only possible for wirings of type "
            f"singleton or class, got {strategy.value}",
        )


class KeywireNotInstantiableError(KeywireError):
    """Signal brute-force instantiation of a wiring without a constructor.

    Raised by ``Resolver.instantiate`` for value wirings. Use
    ``Resolver.get_object`` to retrieve values.
    """

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"cannot instantiate {key!r}: instantiation is only possible for wirings of type "
            "singleton, class or view",
        )


class KeywireInvalidWiringError(KeywireError):
    """Signal a malformed ``wiring`` declaration.

    Raised during dependency injection when the declaration is neither a
    sequence of keys nor a mapping of property names to keys, or when it
    contains non-string keys. A bare string is rejected as well; wrap a single
    key in a list.
    """


class KeywireInvalidRegistrationError(KeywireError):
    """Signal invalid arguments to a ``wire_*`` registration method.

    Typical triggers are wiring a non-class as a class, singleton or view, an
    empty key, or a dependency config that is not a mapping.
    """


class KeywireContextDestroyedError(KeywireError):
    """Signal use of a context after ``Context.destroy`` was called."""
