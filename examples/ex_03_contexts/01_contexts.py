"""Contexts: child contexts fall back to their parent for lookups."""

from __future__ import annotations

from keywire import Context, KeywireUnresolvedKeyError


class AppContext(Context):
    wiring = {
        "values": {"app_name": "shop"},
    }


def main() -> None:
    with AppContext() as app, Context(parent=app) as page:
        page.resolver.wire_value("page_name", "checkout")

        print(f"from_parent={page.resolver.get_object('app_name')}")  # => from_parent=shop
        print(f"owned_by_child={page.resolver.has_wiring('app_name')}")  # => owned_by_child=False

        try:
            app.resolver.get_object("page_name")
        except KeywireUnresolvedKeyError as error:
            print(f"parent_miss={error.key}")  # => parent_miss=page_name


if __name__ == "__main__":
    main()
