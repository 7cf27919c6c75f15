import json
import logging
import threading
from typing import Callable, List, Optional

from .database import LocalStorage
from .models import CartBadge, CartLineItem
from .notifications import NotificationCenter

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "shoppingCart"


class CartStore:
    """Owns the cart lines and their persistence slot.

    Every mutation is written back to storage as a whole; the badge is
    recomputed and handed to `on_badge` whenever the item count may change.
    Routes run on a threadpool, so every read-modify-write holds `_lock`.
    """

    def __init__(self, storage: LocalStorage, notifier: NotificationCenter,
                 on_badge: Optional[Callable[[CartBadge], None]] = None):
        self.storage = storage
        self.notifier = notifier
        self.on_badge = on_badge
        self.badge = CartBadge()
        self._items: List[CartLineItem] = []
        self._lock = threading.RLock()

    def init(self):
        with self._lock:
            saved = self.storage.get_item(CART_STORAGE_KEY)
            if not saved:
                return
            try:
                self._items = [CartLineItem.model_validate(raw) for raw in json.loads(saved)]
            except (ValueError, TypeError) as e:
                logger.warning("Discarding unreadable saved cart: %s", e)
                self._items = []
            self._refresh_badge()

    def add_item(self, item: CartLineItem):
        with self._lock:
            existing = next((line for line in self._items
                             if line.id == item.id and line.size == item.size), None)
            if existing:
                existing.quantity += item.quantity
            else:
                self._items.append(item.model_copy())
            logger.info("Added %s x%d (size %s)", item.id, item.quantity, item.size)

            self._save()
            self._refresh_badge()
        self.notifier.show(f"{item.name} added to cart!")

    def remove_item(self, index: int) -> bool:
        with self._lock:
            if not 0 <= index < len(self._items):
                return False
            removed = self._items.pop(index)
            logger.info("Removed line %d (%s)", index, removed.id)

            self._save()
            self._refresh_badge()
        self.notifier.show(f"{removed.name} removed from cart")
        return True

    def update_quantity(self, index: int, quantity: int) -> bool:
        with self._lock:
            if not 0 <= index < len(self._items) or quantity <= 0:
                return False
            self._items[index].quantity = quantity
            self._save()
            self._refresh_badge()
            return True

    def step_quantity(self, index: int, delta: int) -> bool:
        """Move a line's quantity by `delta`; a line stepped below 1 is removed."""
        with self._lock:
            if not 0 <= index < len(self._items):
                return False
            quantity = self._items[index].quantity + delta
            if quantity < 1:
                return self.remove_item(index)
            return self.update_quantity(index, quantity)

    def get_cart(self) -> List[CartLineItem]:
        with self._lock:
            return [line.model_copy() for line in self._items]

    def get_total(self) -> float:
        with self._lock:
            return sum((line.price * line.quantity for line in self._items), 0.0)

    def clear_cart(self):
        with self._lock:
            self._items = []
            self._save()
            self._refresh_badge()

    # callers hold _lock
    def _save(self):
        self.storage.set_item(CART_STORAGE_KEY, json.dumps([line.model_dump() for line in self._items]))

    def _refresh_badge(self):
        count = sum(line.quantity for line in self._items)
        self.badge = CartBadge(count=count, visible=count > 0)
        if self.on_badge:
            self.on_badge(self.badge)
