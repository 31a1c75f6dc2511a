"""Shared pytest fixtures for keywire tests."""

from collections.abc import Iterator

import pytest

from keywire.context import Context
from keywire.resolver import Resolver


@pytest.fixture()
def context() -> Iterator[Context]:
    """Context destroyed after the test."""
    context = Context()
    yield context
    context.destroy()


@pytest.fixture()
def resolver(context: Context) -> Resolver:
    """Resolver owned by the ``context`` fixture."""
    return context.resolver


@pytest.fixture()
def bare_resolver() -> Resolver:
    """Resolver without a context or parent."""
    return Resolver()
