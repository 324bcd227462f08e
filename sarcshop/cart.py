"""Shopping cart and the shop-wide ledger of units sold."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, replace
from pathlib import Path


def _fmt_number(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class CartItem:
    """A product placed in a cart."""

    name: str
    quantity: int
    price: float


class Cart:
    """The items a customer intends to buy."""

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def add_item(self, name: str, qty: int, price: float) -> None:
        """Add an item; if it is already in the cart only its quantity grows."""
        for item in self._items:
            if item.name == name:
                item.quantity += qty
                return
        self._items.append(CartItem(name, qty, price))

    def remove_item(self, name: str) -> None:
        """Drop every entry with this name."""
        self._items = [item for item in self._items if item.name != name]

    def update_quantity(self, name: str, new_qty: int) -> bool:
        """Set the quantity of an item in the cart; unknown names are ignored."""
        for item in self._items:
            if item.name == name:
                item.quantity = new_qty
                return True
        return False

    def total(self) -> float:
        """Sum of price times quantity over all items."""
        return sum((item.price * item.quantity for item in self._items), 0.0)

    def items(self) -> list[CartItem]:
        """Copies of the items, in the order they were first added."""
        return [replace(item) for item in self._items]

    def render(self) -> str:
        """A printable table of the cart and its total."""
        lines = ["\n🛒 Cart Contents:\n", "Item\tQty\tPrice\tTotal\n"]
        lines.extend(
            f"{item.name}\t{item.quantity}\t₹{_fmt_number(item.price)}"
            f"\t₹{_fmt_number(item.price * item.quantity)}\n"
            for item in self._items
        )
        lines.append("----------------------------\n")
        lines.append(f"Total: ₹{_fmt_number(self.total())}\n")
        return "".join(lines)


class SalesLedger:
    """Units sold per product, persisted as 'name quantity' lines."""

    def __init__(self, path: str | Path = "data/global_sales.dat") -> None:
        self.path = Path(path)
        self.sales: dict[str, int] = {}
        self.load()

    def load(self) -> None:
        """Merge the file's counts into memory; a missing file changes nothing.

        Reading stops at the first malformed record.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        tokens = iter(text.split())
        for name, qty in zip(tokens, tokens):
            try:
                self.sales[name] = int(qty)
            except ValueError:
                break

    def save(self) -> None:
        """Write every count, replacing the file's contents."""
        with open(self.path, "w", encoding="utf-8") as out:
            for name, qty in self.sales.items():
                out.write(f"{name} {qty}\n")

    def record_sale(self, name: str, qty: int) -> None:
        """Add sold units to a product's count and persist the ledger."""
        self.sales[name] = self.sales.get(name, 0) + qty
        self.save()

    def top_selling(self, limit: int = 5) -> list[tuple[str, int]]:
        """Best sellers as (name, units), most units first; ties by name, descending."""
        ranked = heapq.nlargest(limit, ((qty, name) for name, qty in self.sales.items()))
        return [(name, qty) for qty, name in ranked]

    def render_top_selling(self) -> str:
        """Reload the ledger and describe the five best sellers."""
        self.load()
        if not self.sales:
            return "\n📦 No top sellers yet. Start selling to see insights!\n"
        lines = ["\n🔥 Top Selling Items:\n"]
        lines.extend(f"{name} - {qty} units sold\n" for name, qty in self.top_selling(5))
        return "".join(lines)