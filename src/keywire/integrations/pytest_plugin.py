from __future__ import annotations

from collections.abc import Iterator

import pytest

from keywire.context import Context
from keywire.resolver import Resolver


@pytest.fixture()
def keywire_context() -> Iterator[Context]:
    """Create a per-test context and destroy it after the test.

    Override this fixture to return a ``Context`` subclass with declared
    wirings; the ``keywire_resolver`` fixture follows the override.

    Yields:
        A fresh ``Context`` instance.

    """
    context = Context()
    try:
        yield context
    finally:
        context.destroy()


@pytest.fixture()
def keywire_resolver(keywire_context: Context) -> Resolver:
    """Return the resolver owned by ``keywire_context``."""
    return keywire_context.resolver
