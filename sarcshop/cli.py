"""Command-line entry point of the shop."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from sarcshop.admin import admin_login, admin_menu

_MAIN_MENU = (
    "\n========== 🛒 Welcome to SARC Shop ==========\n"
    "1. Login as Admin\n"
    "2. Customer Login/Signup\n"
    "3. Exit\n"
    "============================================\n"
)


def show_main_menu(output: TextIO | None = None) -> None:
    """Print the main menu."""
    out = sys.stdout if output is None else output
    out.write(_MAIN_MENU)


def _read_token(prompt: str) -> str:
    while True:
        words = input(prompt).split()
        if words:
            return words[0]


def main(argv: list[str] | None = None) -> int:
    """Run the shop's main menu until the user exits."""
    parser = argparse.ArgumentParser(prog="sarcshop", description="Run the shop.")
    parser.add_argument("--data-dir", default="data", help="directory holding the shop's data files")
    args = parser.parse_args(argv)
    out = sys.stdout

    try:
        while True:
            show_main_menu(out)
            try:
                choice = int(_read_token("Enter your choice: "))
            except ValueError:
                out.write("❌ Invalid input. Please enter a number: ")
                continue

            if choice == 1:
                if admin_login(input, out):
                    admin_menu(args.data_dir, input, out)
                else:
                    out.write("❌ Invalid credentials! Try again.\n")
            elif choice == 2:
                out.write("⚠️ The customer area is not available.\n")
            elif choice == 3:
                out.write("\n<-------------Thank you for visiting!----------------------------->\n")
                return 0
            else:
                out.write("⚠️ Invalid choice. Please try again.\n")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())