"""Small helpers: customer ids, timestamps, names and purchase history."""

from __future__ import annotations

import os
import re
from datetime import datetime
from pathlib import Path

_SEPARATOR = "---------------------------\n"


def generate_customer_id(counter_path: str | Path = "data/user_count.dat") -> str:
    """Next customer id such as USR001, advancing the stored counter."""
    path = Path(counter_path)
    count = 1
    if path.exists():
        match = re.match(r"\s*([+-]?\d+)", path.read_text(encoding="utf-8"))
        count = int(match.group(1)) if match else 0
    path.write_text(str(count + 1), encoding="utf-8")
    return f"USR{count:03d}"


def current_datetime(now: datetime | None = None) -> str:
    """A timestamp in the form YYYY-MM-DD_HH-MM-SS, local time by default."""
    moment = datetime.now() if now is None else now
    return moment.strftime("%Y-%m-%d_%H-%M-%S")


def sanitize_string(text: str) -> str:
    """Replace spaces with underscores."""
    return text.replace(" ", "_")


def file_exists(path: str | Path) -> bool:
    """Whether something exists at path."""
    return os.path.exists(path)


def format_purchase_history(path: str | Path = "data/purchase_history.dat") -> str:
    """The purchase history file laid out for reading."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return "No purchase history found.\n"
    parts: list[str] = []
    for line in text.splitlines():
        if "UserID:" in line:
            parts.append(_SEPARATOR)
            parts.append(f"{line}\n")
        elif "Discount:" in line or "Total:" in line:
            parts.append(f"{line}\n")
            parts.append(_SEPARATOR)
        elif line:
            parts.append(f"  {line}\n")
    return "".join(parts)