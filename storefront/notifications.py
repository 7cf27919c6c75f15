import time
from dataclasses import dataclass, field
from typing import Callable, List

@dataclass
class Notification:
    message: str
    created_at: float = field(default_factory=time.monotonic)

class NotificationCenter:
    """Short-lived confirmation messages; each one expires `ttl` seconds after it is shown."""

    def __init__(self, ttl: float = 3.0, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.clock = clock
        self._items: List[Notification] = []

    def show(self, message: str) -> Notification:
        note = Notification(message, self.clock())
        self._items.append(note)
        return note

    def active(self) -> List[Notification]:
        now = self.clock()
        self._items = [n for n in self._items if now - n.created_at < self.ttl]
        return list(self._items)

    def clear(self):
        self._items.clear()
