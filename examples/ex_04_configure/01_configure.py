"""Configure: pass constructor arguments to class and singleton wirings."""

from __future__ import annotations

from keywire import KeywireInvalidConfigTargetError, Resolver


class Connection:
    def __init__(self, url: str, *, timeout: int = 5) -> None:
        self.url = url
        self.timeout = timeout


def main() -> None:
    resolver = Resolver()
    resolver.wire_singleton("connection", Connection)
    resolver.configure("connection", "postgres://db", timeout=30)

    connection = resolver.get_object("connection")
    print(f"url={connection.url} timeout={connection.timeout}")  # => url=postgres://db timeout=30

    resolver.wire_class("lazy", Connection)
    resolver.configure("lazy", lambda: "sqlite://memory")
    print(f"produced={resolver.get_object('lazy').url}")  # => produced=sqlite://memory

    resolver.wire_value("static", object())
    try:
        resolver.configure("static", 1)
    except KeywireInvalidConfigTargetError as error:
        print(f"rejected={error.strategy.value}")  # => rejected=value


if __name__ == "__main__":
    main()
