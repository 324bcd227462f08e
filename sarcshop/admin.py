"""Admin login and the admin panel: stock, coupons, payments, sales and routes."""

from __future__ import annotations

import sys
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from sarcshop.cart import SalesLedger
from sarcshop.delivery import DeliveryGraph
from sarcshop.discount import DiscountManager, discount_admin_menu
from sarcshop.inventory import SECTIONS, Catalog, InventoryAVL, Item
from sarcshop.payment import UPIRegistry, admin_upi_manager
from sarcshop.utils import format_purchase_history

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "password"

_ADMIN_MENU = (
    "\n========= 🧑‍💼 Admin PANEL =========\n"
    "1. Manage Fruits\n"
    "2. Manage Stationery\n"
    "3. Manage Snacks\n"
    "4. Manage Clothes\n"
    "5. Manage Shop Items\n"
    "6. Manage More Items\n"
    "7. Manage Discount Coupons\n"
    "8. View Purchase History\n"
    "9. Manage UPI IDs\n"
    "10. View Top Selling Items\n"
    "11. Add Delivery Routes\n"
    "0. Go to Main Menu\n"
    "========================================\n"
)
_NOT_A_NUMBER = "❌ Invalid input. Please enter a number! "
_SECOND_PROMPT = "Password: "


def _read_token(input_fn: Callable[[str], str], prompt: str) -> str:
    """First whitespace-separated word of the next non-blank answer."""
    while True:
        words = input_fn(prompt).split()
        if words:
            return words[0]


def check_credentials(username: str, password: str) -> bool:
    """Whether these are the admin's credentials."""
    return username == ADMIN_USERNAME and password == ADMIN_PASSWORD


def admin_login(
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> bool:
    """Ask for admin credentials and check them."""
    out = sys.stdout if output is None else output
    out.write("\n🛡️ Admin Login\n")
    username = _read_token(input_fn, "Username: ")
    answer = _read_token(input_fn, _SECOND_PROMPT)
    return check_credentials(username, answer)


def manage_section(
    section_id: int,
    data_dir: str | Path = "data",
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """Edit one section's stock; changes are saved when leaving with 'Back'.

    Raises ValueError for a section number outside 1..6.
    """
    path = Catalog(data_dir).section_path(section_id)
    section_name = SECTIONS[section_id - 1][0]
    out = sys.stdout if output is None else output
    inventory = InventoryAVL()
    inventory.load_inventory(path)
    menu = (
        f"\n===== Managing {section_name} =====\n"
        "1. Add Item\n2. Remove Item\n3. Update Item\n4. Display Items\n5. Back\n"
    )
    try:
        while True:
            out.write(menu)
            try:
                choice = int(_read_token(input_fn, "Choose: "))
            except ValueError:
                out.write(_NOT_A_NUMBER)
                continue

            if choice in (1, 3):
                label = "Enter item name: " if choice == 1 else "Enter item name to update: "
                name = _read_token(input_fn, label)
                try:
                    quantity = int(
                        _read_token(input_fn, "Quantity: " if choice == 1 else "New Quantity: ")
                    )
                    price = float(
                        _read_token(input_fn, "Price: " if choice == 1 else "New Price: ")
                    )
                except ValueError:
                    out.write(_NOT_A_NUMBER)
                    continue
                if choice == 1:
                    inventory.add_item(Item(name, quantity, price))
                else:
                    inventory.update_item(name, quantity, price)
            elif choice == 2:
                inventory.remove_item(_read_token(input_fn, "Enter item name to remove: "))
            elif choice == 4:
                out.write(inventory.format_items())
            elif choice == 5:
                path.parent.mkdir(parents=True, exist_ok=True)
                inventory.save_inventory(path)
                return
            else:
                out.write("Invalid input.\n")
    except EOFError:
        return


def manage_routes(
    data_dir: str | Path = "data",
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """View the delivery routes or add one and save them."""
    out = sys.stdout if output is None else output
    path = Path(data_dir) / "routes.dat"
    graph = DeliveryGraph()
    try:
        graph.load_graph(path)
    except FileNotFoundError:
        sys.stderr.write(f"❌ Error opening file: {path}\nError loading delivery routes.\n")

    try:
        while True:
            try:
                option = int(_read_token(input_fn, "\n1. View Routes\n2. Add Route\nChoice: "))
            except ValueError:
                out.write("❌ Invalid input. Please enter a number: ")
                continue
            break

        if option == 1:
            out.write(graph.render())
        elif option == 2:
            while True:
                source = _read_token(input_fn, "Enter source: ")
                destination = _read_token(input_fn, "Enter destination: ")
                try:
                    distance = int(_read_token(input_fn, "Enter distance: "))
                except ValueError:
                    out.write("❌ Invalid input. Please enter a number: ")
                    continue
                break
            graph.add_edge(source, destination, distance)
            path.parent.mkdir(parents=True, exist_ok=True)
            graph.save_graph(path)
            out.write("✅ Route added and saved.\n")
    except EOFError:
        return


def admin_menu(
    data_dir: str | Path = "data",
    input_fn: Callable[[str], str] = input,
    output: TextIO | None = None,
) -> None:
    """The admin panel; returns on '0' or end of input."""
    base = Path(data_dir)
    out = sys.stdout if output is None else output
    try:
        while True:
            out.write(_ADMIN_MENU)
            try:
                choice = int(_read_token(input_fn, "Enter your choice: "))
            except ValueError:
                out.write("❌ Invalid input. Please enter a string: ")
                continue

            if 1 <= choice <= len(SECTIONS):
                manage_section(choice, base, input_fn, out)
            elif choice == 7:
                discount_admin_menu(DiscountManager(base / "discounts.dat"), input_fn, out)
            elif choice == 8:
                out.write(format_purchase_history(base / "purchase_history.dat"))
            elif choice == 9:
                admin_upi_manager(UPIRegistry(base / "upi_ids.dat"), input_fn, out)
            elif choice == 10:
                out.write(SalesLedger(base / "global_sales.dat").render_top_selling())
            elif choice == 11:
                manage_routes(base, input_fn, out)
            elif choice == 0:
                return
            else:
                out.write("⚠️ Invalid choice! Try again.\n")
    except EOFError:
        return