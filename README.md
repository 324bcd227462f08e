# sarcshop

A small terminal shop. Stock is kept per section in AVL trees, coupons
give a percentage off, UPI accounts are picked by payment amount and
payment links are drawn as QR codes, and delivery distances come from a
route graph searched with Dijkstra's algorithm. Item search uses
case-insensitive KMP matching.

## Installing

```
pip install .
```

Python 3.10 or later is needed. The package has no third-party
dependencies. `sarcshop.payment.generate_qr` draws QR codes with the
external `qrencode` program; if it is not installed, the payment link is
printed instead. Either way the link is appended to a log file.

## Running the shop

```
sarcshop
sarcshop --data-dir path/to/data
```

The main menu offers admin login, customer login and exit. Input ends
cleanly at end of file in every menu.

Admin login accepts the username `admin` with the password `password`
(see `sarcshop.admin.check_credentials`). The admin panel lets you:

- manage the six stock sections: Fruits, Stationery, Snacks, Clothes, Shop
  and More — add, remove, update and list items; changes are written to
  the section's file when you choose "Back"
- add and list discount coupons; the percentage must be from 1 to 90 and
  is stored as a whole number
- view the purchase history
- add, remove and list UPI IDs together with the payment amounts each one
  accepts
- see the five best-selling items
- view the delivery routes, or add one and save it

## What it does not do

There is no customer area: choosing "Customer Login/Signup" only prints a
notice that it is not available. So there is no signup or login for
customers, no browsing, cart or checkout from the menus, and nothing in the
package writes the purchase history file — the admin panel only reads it.
The cart, coupon, payment and route pieces can be used from Python, as
shown below.

## Data files

State is kept in plain whitespace-separated text files under the data
directory (`data/` in the working directory unless `--data-dir` is given):

| File | Contents |
| --- | --- |
| `inventory/<section>.dat` | `name quantity price` per line |
| `global_sales.dat` | `name units_sold` per line |
| `discounts.dat` | `CODE percent` per line |
| `upi_ids.dat` | `upi_id min_amount max_amount` per line |
| `routes.dat` | `from to distance` per line; routes run both ways |
| `purchase_history.dat` | receipts, read by the admin panel |

Used only by library calls, with defaults under `data/`:
`data/user_count.dat` holds the counter behind `generate_customer_id`
(ids such as `USR001`), and `data/temp_qr_data.txt` logs every payment
link that `generate_qr` produces.

Reading a file stops at its first malformed record. Item and place names
cannot contain spaces; `sarcshop.utils.sanitize_string` replaces spaces
with underscores.

## Using the pieces as a library

```python
from sarcshop.inventory import Catalog, InventoryAVL, Item
from sarcshop.search import kmp_search, search_items
from sarcshop.delivery import DeliveryGraph
from sarcshop.cart import Cart, SalesLedger
from sarcshop.discount import DiscountManager
from sarcshop.payment import UPIRegistry, build_upi_url

fruits = InventoryAVL()
fruits.add_item(Item("apple", 10, 30.0))
fruits.add_item(Item("banana", 24, 5.0))
fruits.update_item("apple", 8, 32.0)
print(fruits.format_items())          # items in name order

kmp_search("Banana", "nan")           # True; matching ignores ASCII case

catalog = Catalog("data")
catalog.load_all()
matches = search_items("app", catalog.all_items())

graph = DeliveryGraph()
graph.add_edge("Shop", "Market", 4)
graph.add_edge("Market", "Campus", 3)
graph.shortest_path("Shop", "Campus")  # (["Shop", "Market", "Campus"], 7)
print(graph.render_route("Shop", "Campus"))

cart = Cart()
cart.add_item("apple", 2, 32.0)
cart.add_item("apple", 1, 32.0)       # the existing line's quantity grows
print(cart.render())
```

- `InventoryAVL` ignores an item whose name is already present;
  `save_inventory` writes items in pre-order.
- `search_items(keyword, items)` returns every item whose name contains
  the keyword, or that the keyword contains.
- `SalesLedger.record_sale` adds units and saves; `top_selling(limit)`
  ranks by units, ties by name in descending order.
- `DiscountManager.get_discount` returns 0 for an unknown code.
- `UPIRegistry.upi_for_amount` returns the first account whose range
  covers the amount, or `default@ybl`.
- `build_upi_url`, `generate_qr` and `qr_with_timer` build, show and
  time out a payment link.
- `sarcshop.utils` also offers `current_datetime` (`YYYY-MM-DD_HH-MM-SS`),
  `file_exists` and `format_purchase_history`.

## Tests

```
pip install .[test]
pytest
```