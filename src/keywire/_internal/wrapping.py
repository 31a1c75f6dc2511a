from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from keywire.exceptions import KeywireInvalidRegistrationError

C = TypeVar("C", bound=type[Any])

WRAPPED_CONSTRUCTOR_ATTR = "__keywire_wrapped__"

PostConstructHook = Callable[[Any], None]


def wrap_constructor(constructor: C, post_construct_hook: PostConstructHook | None = None) -> C:
    """Build a subclass of ``constructor`` that runs a hook before ``__init__``.

    The returned class forwards every positional and keyword argument to the
    original ``__init__`` unchanged, so argument-dependent initialization
    behaves as if ``constructor`` was called directly. Classes without an
    ``__init__`` of their own (``NamedTuple``, ``str`` subclasses) receive
    their arguments in ``__new__`` only, as they would when called directly.
    The hook receives the
    freshly allocated instance after ``__new__`` and before the original
    ``__init__`` body runs, which lets the resolver inject dependencies that
    the body may already read.

    ``isinstance(obj, constructor)`` holds for produced instances, and the
    class name, qualified name, module, docstring and ``__init__`` signature
    of the original are preserved.
    """
    if not inspect.isclass(constructor):
        msg = f"Only classes can be wrapped, got {constructor!r}."
        raise KeywireInvalidRegistrationError(msg)

    wrapped: type[Any]

    @functools.wraps(constructor.__init__)
    def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
        if post_construct_hook is not None:
            post_construct_hook(self)
        # Resolved at call time so later patches of the original class are honoured.
        if constructor.__init__ is object.__init__:
            # Arguments were consumed by ``__new__`` (tuples, str subclasses, ...).
            super(wrapped, self).__init__()
        else:
            super(wrapped, self).__init__(*args, **kwargs)

    namespace: dict[str, Any] = {
        "__init__": __init__,
        "__module__": constructor.__module__,
        "__qualname__": constructor.__qualname__,
        "__doc__": constructor.__doc__,
        WRAPPED_CONSTRUCTOR_ATTR: constructor,
    }
    wrapped = type(constructor)(constructor.__name__, (constructor,), namespace)
    return wrapped  # type: ignore[return-value]


def unwrap_constructor(constructor: type[Any]) -> type[Any]:
    """Return the user class behind a wrapped constructor, or the class itself."""
    return constructor.__dict__.get(WRAPPED_CONSTRUCTOR_ATTR, constructor)
