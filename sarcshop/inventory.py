"""Shop inventory kept in height-balanced (AVL) trees, one tree per section."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

# Sections in the order the admin panel numbers them (1-based).
SECTIONS: tuple[tuple[str, str], ...] = (
    ("Fruits", "fruits.dat"),
    ("Stationery", "stationery.dat"),
    ("Snacks", "snacks.dat"),
    ("Clothes", "clothes.dat"),
    ("Shop", "shop.dat"),
    ("More", "more.dat"),
)

# Order in which sections are listed when collecting every item for search.
LISTING_ORDER: tuple[str, ...] = ("Fruits", "Snacks", "Clothes", "Stationery", "More", "Shop")

_FILES = dict(SECTIONS)


def _fmt_number(value: float) -> str:
    """Format a number the way a default-precision stream would."""
    return f"{value:g}"


@dataclass
class Item:
    """A stocked product."""

    name: str
    quantity: int
    price: float


@dataclass
class ItemInfo:
    """A product together with the section it belongs to."""

    name: str
    section: str
    price: float
    stock: int


class _Node:
    __slots__ = ("item", "left", "right", "height")

    def __init__(self, item: Item) -> None:
        self.item = item
        self.left: _Node | None = None
        self.right: _Node | None = None
        self.height = 1


def _height(node: _Node | None) -> int:
    return node.height if node else 0


def _balance(node: _Node | None) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _fix_height(node: _Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    assert x is not None
    y.left = x.right
    x.right = y
    _fix_height(y)
    _fix_height(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    assert y is not None
    x.right = y.left
    y.left = x
    _fix_height(x)
    _fix_height(y)
    return y


def _insert(node: _Node | None, item: Item) -> tuple[_Node, bool]:
    if node is None:
        return _Node(item), True
    name = item.name
    if name < node.item.name:
        node.left, inserted = _insert(node.left, item)
    elif name > node.item.name:
        node.right, inserted = _insert(node.right, item)
    else:
        return node, False

    _fix_height(node)
    balance = _balance(node)
    if balance > 1 and name < node.left.item.name:
        return _rotate_right(node), inserted
    if balance < -1 and name > node.right.item.name:
        return _rotate_left(node), inserted
    if balance > 1 and name > node.left.item.name:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), inserted
    if balance < -1 and name < node.right.item.name:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), inserted
    return node, inserted


def _min_node(node: _Node) -> _Node:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: _Node | None, name: str) -> tuple[_Node | None, bool]:
    if node is None:
        return None, False
    if name < node.item.name:
        node.left, removed = _remove(node.left, name)
    elif name > node.item.name:
        node.right, removed = _remove(node.right, name)
    else:
        removed = True
        if node.left is None or node.right is None:
            child = node.left or node.right
            if child is None:
                return None, True
            node = child
        else:
            successor = _min_node(node.right)
            node.item = successor.item
            node.right, _ = _remove(node.right, successor.item.name)

    _fix_height(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node), removed
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), removed
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node), removed
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), removed
    return node, removed


def _find(node: _Node | None, name: str) -> _Node | None:
    while node is not None and node.item.name != name:
        node = node.left if name < node.item.name else node.right
    return node


def _inorder(node: _Node | None) -> Iterator[Item]:
    if node is None:
        return
    yield from _inorder(node.left)
    yield node.item
    yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[Item]:
    if node is None:
        return
    yield node.item
    yield from _preorder(node.left)
    yield from _preorder(node.right)


class InventoryAVL:
    """Items of one section, keyed by name and kept balanced."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Item]:
        return _inorder(self._root)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _find(self._root, name) is not None

    def add_item(self, item: Item) -> bool:
        """Insert an item; an item whose name is already present is ignored."""
        self._root, inserted = _insert(self._root, item)
        if inserted:
            self._size += 1
        return inserted

    def remove_item(self, name: str) -> bool:
        """Remove the item with this name, if any."""
        self._root, removed = _remove(self._root, name)
        if removed:
            self._size -= 1
        return removed

    def update_item(self, name: str, quantity: int, price: float) -> bool:
        """Set quantity and price of an existing item; unknown names are ignored."""
        node = _find(self._root, name)
        if node is None:
            return False
        node.item.quantity = quantity
        node.item.price = price
        return True

    def search_item(self, name: str) -> Item | None:
        """Return the stored item with this name, or None."""
        node = _find(self._root, name)
        return node.item if node else None

    def items(self) -> list[Item]:
        """All items in name order."""
        return list(_inorder(self._root))

    def height(self) -> int:
        """Height of the tree; 0 when empty."""
        return _height(self._root)

    def format_items(self) -> str:
        """A listing of every item in name order, one line each."""
        return "".join(
            f"🔸 {item.name} | Qty: {item.quantity} | Price: ₹{_fmt_number(item.price)}\n"
            for item in _inorder(self._root)
        )

    def load_inventory(self, path: str | Path) -> None:
        """Add items read from a whitespace-separated 'name quantity price' file.

        A missing file adds nothing; reading stops at the first malformed record.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except FileNotFoundError:
            return
        tokens = iter(text.split())
        for name, quantity, price in zip(tokens, tokens, tokens):
            try:
                item = Item(name, int(quantity), float(price))
            except ValueError:
                break
            self.add_item(item)

    def save_inventory(self, path: str | Path) -> None:
        """Write all items, in pre-order, replacing the file's contents."""
        with open(path, "w", encoding="utf-8") as out:
            for item in _preorder(self._root):
                out.write(f"{item.name} {item.quantity} {_fmt_number(item.price)}\n")


class Catalog:
    """The inventories of every shop section, stored under a data directory."""

    def __init__(self, data_dir: str | Path = "data") -> None:
        self.data_dir = Path(data_dir)
        self.trees: dict[str, InventoryAVL] = {name: InventoryAVL() for name, _ in SECTIONS}

    def _file_for(self, section: str) -> Path:
        return self.data_dir / "inventory" / _FILES[section]

    def load_all(self) -> None:
        """Load every section from its file."""
        for section in LISTING_ORDER:
            self.trees[section].load_inventory(self._file_for(section))

    def section_path(self, section_id: int) -> Path:
        """File of the section with this 1-based admin number."""
        if not 1 <= section_id <= len(SECTIONS):
            raise ValueError(f"no section numbered {section_id}")
        return self._file_for(SECTIONS[section_id - 1][0])

    def all_items(self) -> list[ItemInfo]:
        """Every item of every section, sections in listing order, names sorted within."""
        return [
            ItemInfo(item.name, section, item.price, item.quantity)
            for section in LISTING_ORDER
            for item in self.trees[section]
        ]