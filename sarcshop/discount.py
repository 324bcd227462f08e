"""Discount coupon codes and the admin menu that manages them."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

_MENU = "\n==== Discount Code Admin ====\n1. Add Coupon Code\n2. View All Coupons\n3. Back\n"


class DiscountManager:
    """Coupon codes mapped to a percentage off, persisted as 'code percent' lines."""

    def __init__(self, path: str | Path = "data/discounts.dat") -> None:
        self.path = Path(path)
        self.discounts: dict[str, int] = {}
        self.load_discounts()

    def add_discount_code(self, code: str, percentage: int) -> None:
        """Add or replace a coupon and persist all coupons."""
        self.discounts[code] = int(percentage)
        self.save_discounts()

    def get_discount(self, code: str) -> int:
        """Percentage off for a code; 0 for an unknown code."""
        return self.discounts.get(code, 0)

    def load_discounts(self) -> None:
        """Replace the coupons in memory with those in the file.

        A missing file leaves none; reading stops at the first malformed record.
        """
        self.discounts.clear()
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        tokens = iter(text.split())
        for code, percent in zip(tokens, tokens):
            try:
                self.discounts[code] = int(percent)
            except ValueError:
                break

    def save_discounts(self) -> None:
        """Write every coupon, replacing the file's contents."""
        with open(self.path, "w", encoding="utf-8") as out:
            for code, percent in self.discounts.items():
                out.write(f"{code} {percent}\n")

    def render(self) -> str:
        """A listing of every coupon."""
        return "\n🎟️ Available Coupons:\n" + "".join(
            f"🔸 {code:>10} : {percent}% off\n" for code, percent in self.discounts.items()
        )


def _read_token(input_fn: Callable[[str], str], prompt: str) -> str:
    """First whitespace-separated word of the next non-blank answer."""
    while True:
        words = input_fn(prompt).split()
        if words:
            return words[0]


def discount_admin_menu(
    manager: DiscountManager | None = None,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """Interactive menu to add and list coupons; ends on 'Back' or end of input."""
    if manager is None:
        manager = DiscountManager()
    out = sys.stdout if output is None else output
    try:
        while True:
            out.write(_MENU)
            try:
                choice = int(_read_token(input_fn, "Choose: "))
            except ValueError:
                out.write("❌ Invalid input. Please enter a number: ")
                continue

            if choice == 1:
                code = _read_token(input_fn, "Enter coupon code (no spaces): ")
                try:
                    percent = float(_read_token(input_fn, "Enter discount %: "))
                except ValueError:
                    out.write("❌ Invalid input. Please enter a number: ")
                    continue
                if 1 <= percent <= 90:
                    whole = int(percent)
                    manager.add_discount_code(code, whole)
                    out.write(f"✅ Coupon added: {code} - {whole}% off\n")
                else:
                    out.write("❌ Invalid discount percentage.\n")
            elif choice == 2:
                out.write(manager.render())
            elif choice == 3:
                return
            else:
                out.write("Invalid input!\n")
    except EOFError:
        return