"""Terminal shop admin panel: AVL-tree inventory, search, cart, coupons, UPI payment and delivery routes."""

__version__ = "0.1.0"