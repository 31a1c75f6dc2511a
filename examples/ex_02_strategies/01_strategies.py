"""Strategies: values, classes, singletons, and brute-force instantiation."""

from __future__ import annotations

from keywire import Resolver


class Counter:
    created = 0

    def __init__(self) -> None:
        Counter.created += 1


def main() -> None:
    resolver = Resolver()
    settings = {"debug": True}
    resolver.wire_value("settings", settings)
    resolver.wire_class("transient", Counter)
    resolver.wire_singleton("shared", Counter)

    print(f"value_identity={resolver.get_object('settings') is settings}")  # => value_identity=True
    print(f"class_fresh={resolver.get_object('transient') is not resolver.get_object('transient')}")  # => class_fresh=True
    print(f"singleton_shared={resolver.get_object('shared') is resolver.get_object('shared')}")  # => singleton_shared=True
    print(f"instantiate_fresh={resolver.instantiate('shared') is not resolver.get_object('shared')}")  # => instantiate_fresh=True
    print(f"created={Counter.created}")  # => created=4


if __name__ == "__main__":
    main()
