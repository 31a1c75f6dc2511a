"""Views: wrapped classes that talk through their own context."""

from __future__ import annotations

from keywire import Context, Event


class Cart:
    def __init__(self) -> None:
        self.items: list[str] = []


class CartView:
    wiring = ["cart"]

    def __init__(self, title: str) -> None:
        self.title = title
        self.listen(self, "item_added", self.on_item_added)

    def on_item_added(self, event: Event) -> None:
        self.cart.items.append(event.payload)


def main() -> None:
    with Context() as context:
        context.resolver.wire_singleton("cart", Cart)
        context.resolver.wire_view("cart_view", CartView)

        view_class = context.resolver.get_object("cart_view")
        view = view_class("My cart")
        context.dispatch("item_added", "apple")

        print(f"title={view.title}")  # => title=My cart
        print(f"items={view.cart.items}")  # => items=['apple']
        print(f"is_cart_view={isinstance(view, CartView)}")  # => is_cart_view=True


if __name__ == "__main__":
    main()
