"""Tests for the exception hierarchy."""

import pytest

from keywire.exceptions import (
    KeywireContextDestroyedError,
    KeywireError,
    KeywireInvalidConfigTargetError,
    KeywireInvalidRegistrationError,
    KeywireInvalidWiringError,
    KeywireNotInstantiableError,
    KeywireUnresolvedKeyError,
)
from keywire.resolver import Resolver
from keywire.strategies import Strategy


@pytest.mark.parametrize(
    "error_type",
    [
        KeywireContextDestroyedError,
        KeywireInvalidConfigTargetError,
        KeywireInvalidRegistrationError,
        KeywireInvalidWiringError,
        KeywireNotInstantiableError,
        KeywireUnresolvedKeyError,
    ],
)
def test_all_errors_derive_from_base(error_type: type[Exception]) -> None:
    assert issubclass(error_type, KeywireError)


class TestKeywireUnresolvedKeyError:
    def test_carries_the_key(self) -> None:
        error = KeywireUnresolvedKeyError("missing")

        assert error.key == "missing"
        assert "no mapping found" in str(error)

    def test_is_a_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            Resolver().get_object("missing")

    def test_raised_for_missing_dependencies(self) -> None:
        resolver = Resolver()

        class Consumer:
            wiring = {"dep": "missing"}

        resolver.wire_class("consumer", Consumer)

        with pytest.raises(KeywireUnresolvedKeyError) as exc_info:
            resolver.get_object("consumer")

        assert exc_info.value.key == "missing"


class TestKeywireInvalidConfigTargetError:
    def test_carries_key_and_strategy(self) -> None:
        resolver = Resolver()
        resolver.wire_value("value", 1)

        with pytest.raises(KeywireInvalidConfigTargetError) as exc_info:
            resolver.configure("value", 2)

        assert exc_info.value.key == "value"
        assert exc_info.value.strategy is Strategy.VALUE
        assert "got value" in str(exc_info.value)

    def test_wiring_is_left_unchanged(self) -> None:
        resolver = Resolver()
        resolver.wire_value("value", 1)

        with pytest.raises(KeywireInvalidConfigTargetError):
            resolver.configure("value", 2)

        assert resolver.get_object("value") == 1


class TestKeywireInvalidWiringError:
    def test_raised_for_bare_string_declarations(self) -> None:
        resolver = Resolver()

        class Consumer:
            wiring = "foo"

        resolver.wire_value("foo", 1)

        with pytest.raises(KeywireInvalidWiringError):
            resolver.resolve(Consumer())

    def test_raised_at_registration_for_bad_config(self) -> None:
        class Consumer:
            pass

        with pytest.raises(KeywireInvalidWiringError):
            Resolver().wire_class("consumer", Consumer, 42)
