# cart.py
import logging
import threading
from typing import Any, Dict, List, Optional

from models import CartItem, Category, Product
from power_budget import summarize_build
from storage import CartStore

logger = logging.getLogger("pcbuilder.cart")


def require_quantity(qty: Any, name: str = "quantity") -> int:
    if isinstance(qty, bool) or not isinstance(qty, int):
        raise ValueError(f"{name} must be an integer")
    if qty < 1:
        raise ValueError(f"{name} must be >= 1")
    return qty


# --------------------------
# Pure cart mutations: each returns a new list
# --------------------------


def add_item(cart: List[CartItem], product: Product, qty: int = 1) -> List[CartItem]:
    """Merge by product id: an existing entry grows, otherwise append."""
    require_quantity(qty)
    out = list(cart)
    for i, item in enumerate(out):
        if item.id == product.id:
            out[i] = item.with_quantity(item.quantity + qty)
            return out
    out.append(CartItem(product=product, quantity=qty))
    return out


def remove_item(cart: List[CartItem], item_id: str) -> List[CartItem]:
    return [item for item in cart if item.id != item_id]


def change_quantity(cart: List[CartItem], item_id: str, delta: int) -> List[CartItem]:
    """Shift a quantity by delta, never below 1 (use remove_item to drop it)."""
    return [item.with_quantity(max(1, item.quantity + delta)) if item.id == item_id else item
            for item in cart]


def decrement_or_remove(cart: List[CartItem], item_id: str, step: int = 1) -> List[CartItem]:
    """A decrement that would go below 1 removes the item instead."""
    for item in cart:
        if item.id == item_id:
            if item.quantity - step < 1:
                return remove_item(cart, item_id)
            return change_quantity(cart, item_id, -step)
    return list(cart)


def set_quantity(cart: List[CartItem], item_id: str, qty: int) -> List[CartItem]:
    require_quantity(qty)
    return [item.with_quantity(qty) if item.id == item_id else item for item in cart]


def replace_item(cart: List[CartItem], old_id: str, product: Product, qty: int = 1) -> List[CartItem]:
    """Drop old_id, then add product; an entry already holding product merges."""
    require_quantity(qty)
    return add_item(remove_item(cart, old_id), product, qty)


def clear_category(cart: List[CartItem], category) -> List[CartItem]:
    cat = Category.parse(category)
    return [item for item in cart if item.category != cat]


def reset_cart() -> List[CartItem]:
    return []


def find_item(cart: List[CartItem], item_id: str) -> Optional[CartItem]:
    return next((item for item in cart if item.id == item_id), None)


# --------------------------
# Session: canonical cart + persistence
# --------------------------


class BuildSession:
    """
    Holds the one canonical cart list. Every mutation swaps in a new list,
    saves it and hands back a freshly derived summary; nothing derived is kept.
    """

    def __init__(self, store: CartStore):
        self.store = store
        self._lock = threading.RLock()
        self._cart = store.load()
        logger.info("Loaded saved build with %d item(s)", len(self._cart))

    @property
    def cart(self) -> List[CartItem]:
        with self._lock:
            return list(self._cart)

    def summary(self) -> Dict[str, Any]:
        return summarize_build(self.cart)

    def apply(self, new_cart: List[CartItem]) -> Dict[str, Any]:
        with self._lock:
            self.store.save(new_cart)
            self._cart = list(new_cart)
            return summarize_build(self._cart)

    def add(self, product: Product, qty: int = 1) -> Dict[str, Any]:
        with self._lock:
            return self.apply(add_item(self._cart, product, qty))

    def remove(self, item_id: str) -> Dict[str, Any]:
        with self._lock:
            return self.apply(remove_item(self._cart, item_id))

    def change_quantity(self, item_id: str, delta: int) -> Dict[str, Any]:
        with self._lock:
            return self.apply(change_quantity(self._cart, item_id, delta))

    def decrement(self, item_id: str, step: int = 1) -> Dict[str, Any]:
        with self._lock:
            return self.apply(decrement_or_remove(self._cart, item_id, step))

    def set_quantity(self, item_id: str, qty: int) -> Dict[str, Any]:
        with self._lock:
            return self.apply(set_quantity(self._cart, item_id, qty))

    def replace(self, old_id: str, product: Product, qty: int = 1) -> Dict[str, Any]:
        with self._lock:
            return self.apply(replace_item(self._cart, old_id, product, qty))

    def clear_category(self, category) -> Dict[str, Any]:
        with self._lock:
            return self.apply(clear_category(self._cart, category))

    def reset(self) -> Dict[str, Any]:
        with self._lock:
            return self.apply(reset_cart())
