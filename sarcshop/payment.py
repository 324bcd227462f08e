"""UPI payment: which account receives which amount, and QR codes to pay it."""

from __future__ import annotations

import subprocess
import sys
import time
from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TextIO

DEFAULT_UPI = "default@ybl"

_RULE = "-----------------------------------------------------\n"
_MENU = "\n==== ADMIN UPI MANAGER ====\n1. Add UPI\n2. Remove UPI\n3. View All\n4. Exit\n"


def _fmt_number(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class UPIInfo:
    """A UPI account and the range of amounts it receives."""

    upi_id: str
    min_amount: float
    max_amount: float

    def covers(self, amount: float) -> bool:
        """Whether the amount falls inside this account's range, ends included."""
        return self.min_amount <= amount <= self.max_amount

    def record(self) -> str:
        return f"{self.upi_id} {_fmt_number(self.min_amount)} {_fmt_number(self.max_amount)}\n"


class UPIRegistry:
    """UPI accounts persisted as 'id min max' lines."""

    def __init__(self, path: str | Path = "data/upi_ids.dat") -> None:
        self.path = Path(path)
        self._entries: list[UPIInfo] = []
        self.load()

    def load(self) -> None:
        """Replace the accounts in memory with those in the file.

        A missing file leaves none; reading stops at the first malformed record.
        """
        self._entries = []
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        tokens = iter(text.split())
        for upi_id, low, high in zip(tokens, tokens, tokens):
            try:
                entry = UPIInfo(upi_id, float(low), float(high))
            except ValueError:
                break
            self._entries.append(entry)

    def entries(self) -> list[UPIInfo]:
        """Copies of the accounts, in file order."""
        return [replace(entry) for entry in self._entries]

    def upi_for_amount(self, amount: float) -> str:
        """The first account whose range covers the amount, else the default one."""
        self.load()
        return next(
            (entry.upi_id for entry in self._entries if entry.covers(amount)),
            DEFAULT_UPI,
        )

    def add(self, upi_id: str, min_amount: float, max_amount: float) -> UPIInfo:
        """Append an account to the file."""
        entry = UPIInfo(upi_id, float(min_amount), float(max_amount))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "a", encoding="utf-8") as out:
            out.write(entry.record())
        self._entries.append(entry)
        return entry

    def remove(self, upi_id: str) -> bool:
        """Drop every account with this id and rewrite the file."""
        self.load()
        kept = [entry for entry in self._entries if entry.upi_id != upi_id]
        removed = len(kept) != len(self._entries)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as out:
            out.writelines(entry.record() for entry in kept)
        self._entries = kept
        return removed

    def render(self) -> str:
        """Reload and list every account with its range."""
        self.load()
        return "\n📋 UPI Ranges:\n" + "".join(
            f"- {entry.upi_id} : ₹{_fmt_number(entry.min_amount)}"
            f" - ₹{_fmt_number(entry.max_amount)}\n"
            for entry in self._entries
        )


def build_upi_url(upi_id: str, amount: float) -> str:
    """The UPI payment link encoded in the QR code."""
    return f"upi://pay?pa={upi_id}&pn=SARCShop&am={amount:f}&cu=INR"


def generate_qr(
    upi_id: str,
    amount: float,
    log_path: str | Path = "data/temp_qr_data.txt",
    output: TextIO | None = None,
) -> str:
    """Log the payment link and draw it as a QR code with the qrencode tool.

    Returns the payment link.
    """
    out = sys.stdout if output is None else output
    url = build_upi_url(upi_id, amount)

    out.write(_RULE)
    out.write(f"||       💰 Scan QR to pay ₹{_fmt_number(amount)}./             ||\n")
    out.write(_RULE)

    log = Path(log_path)
    log.parent.mkdir(parents=True, exist_ok=True)
    with open(log, "a", encoding="utf-8") as handle:
        handle.write(f"{url}\n")

    try:
        result = subprocess.run(
            ["qrencode", "-t", "ANSIUTF8"],
            input=f"{url}\n",
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError:
        out.write(f"qrencode is not installed; pay using: {url}\n")
    else:
        out.write(result.stdout)
    out.write(_RULE)
    return url


def qr_with_timer(
    upi_id: str,
    amount: float,
    log_path: str | Path = "data/temp_qr_data.txt",
    timeout_secs: int = 10,
    output: TextIO | None = None,
    sleep: Callable[[float], object] = time.sleep,
) -> None:
    """Show the payment QR code, wait for it to expire, then say so."""
    out = sys.stdout if output is None else output
    generate_qr(upi_id, amount, log_path, out)
    out.write(f"\n⏳ QR Code will expire in {timeout_secs} seconds...\n")
    for second in range(timeout_secs):
        sleep(1)
        if second % 2 == 0:
            out.write(".")
            out.flush()
    out.write("\n🚫 QR Code expired! Please retry checkout.\n")


def _read_token(input_fn: Callable[[str], str], prompt: str) -> str:
    """First whitespace-separated word of the next non-blank answer."""
    while True:
        words = input_fn(prompt).split()
        if words:
            return words[0]


def _prompt_new_upi(input_fn: Callable[[str], str], out: TextIO) -> tuple[str, float, float]:
    while True:
        upi_id = _read_token(input_fn, "Enter new UPI ID: ")
        try:
            low = float(_read_token(input_fn, "Enter min amount: "))
            high = float(_read_token(input_fn, "Enter max amount: "))
        except ValueError:
            out.write("❌ Invalid input. Please enter a number: ")
            continue
        return upi_id, low, high


def admin_upi_manager(
    registry: UPIRegistry | None = None,
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """Interactive menu to add, remove and list UPI accounts."""
    if registry is None:
        registry = UPIRegistry()
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
                registry.add(*_prompt_new_upi(input_fn, out))
                out.write("✅ UPI added successfully.\n")
            elif choice == 2:
                registry.remove(_read_token(input_fn, "Enter UPI ID to remove: "))
                out.write("✅ UPI removed if it existed.\n")
            elif choice == 3:
                out.write(registry.render())
            elif choice == 4:
                return
            else:
                out.write("❌ Invalid choice.\n")
    except EOFError:
        return