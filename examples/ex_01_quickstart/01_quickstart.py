"""Quickstart: declare dependencies by key and let the resolver assign them.

Classes list the keys they need in a ``wiring`` attribute. The resolver
assigns each dependency before ``__init__`` runs, so the constructor can
already use them.
"""

from __future__ import annotations

from keywire import Resolver


class Database:
    def __init__(self) -> None:
        self.host = "localhost"


class UserRepository:
    wiring = ["database"]

    def __init__(self) -> None:
        self.table = f"{self.database.host}/users"


class UserService:
    wiring = {"repository": "users"}


def main() -> None:
    resolver = Resolver()
    resolver.wire_singleton("database", Database)
    resolver.wire_class("users", UserRepository)
    resolver.wire_class("service", UserService)

    service = resolver.get_object("service")

    print(f"table={service.repository.table}")  # => table=localhost/users
    print(f"shared_db={service.repository.database is resolver.get_object('database')}")  # => shared_db=True


if __name__ == "__main__":
    main()
