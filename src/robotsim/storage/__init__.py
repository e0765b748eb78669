"""Registry backends."""

from robotsim.storage.allocator import SlotAllocator
from robotsim.storage.local import LocalStorage
from robotsim.storage.protocol import Storage

__all__ = [
    "Storage",
    "LocalStorage",
    "SlotAllocator",
]
