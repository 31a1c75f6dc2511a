from __future__ import annotations

from keywire._internal.registry import Payload, WiringRecord, WiringRegistry
from keywire.strategies import Strategy


def _record(key: str, target: object = None) -> WiringRecord:
    return WiringRecord(key=key, strategy=Strategy.VALUE, target=target)


def test_set_and_get_record() -> None:
    registry = WiringRegistry()
    record = _record("a")

    registry.set(record)

    assert registry.get("a") is record
    assert registry.has("a")
    assert registry.get("b") is None


def test_set_overwrites_existing_key() -> None:
    registry = WiringRegistry()
    registry.set(_record("a", 1))
    replacement = _record("a", 2)

    registry.set(replacement)

    assert registry.get("a") is replacement
    assert registry.keys() == ["a"]


def test_delete_returns_removed_record() -> None:
    registry = WiringRegistry()
    record = _record("a")
    registry.set(record)

    assert registry.delete("a") is record
    assert registry.delete("a") is None
    assert not registry.has("a")


def test_payload_passes_arguments_verbatim() -> None:
    payload = Payload(args=(1, 2), kwargs={"name": "x"})

    assert payload.build() == ((1, 2), {"name": "x"})


def test_payload_producer_result_is_the_first_argument() -> None:
    produced = object()
    payload = Payload(producer=lambda: produced)

    args, kwargs = payload.build()

    assert args[0] is produced
    assert kwargs == {}


def test_configurable_strategies() -> None:
    assert Strategy.CLASS.configurable
    assert Strategy.SINGLETON.configurable
    assert not Strategy.VALUE.configurable
    assert not Strategy.VIEW.configurable
