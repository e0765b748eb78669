"""Arena slot allocation service.

SlotAllocator is a stateful service that manages the lifecycle of arena slots.
"""

from __future__ import annotations

from robotsim.core.identity import SlotId


class SlotAllocator:
    """Allocates arena slots with generation tracking for recycling.

    Maintains a free list of released slot indices with incremented generations
    so a stale SlotId never resolves to the robot that reused its slot.
    """

    def __init__(self) -> None:
        self._next_index = 0
        self._free_list: list[tuple[int, int]] = []  # (index, generation)
        self._generations: dict[int, int] = {}

    def allocate(self) -> SlotId:
        """Allocate a slot, reusing released slots when available.

        Returns:
            Newly allocated SlotId. Reused slots carry an incremented generation.
        """
        if self._free_list:
            index, gen = self._free_list.pop()
            return SlotId(index=index, generation=gen)

        index = self._next_index
        self._next_index += 1
        self._generations[index] = 0
        return SlotId(index=index, generation=0)

    def deallocate(self, slot: SlotId) -> None:
        """Release a slot for reuse with incremented generation.

        Args:
            slot: Slot to release.

        Raises:
            ValueError: If the slot is not currently allocated.
        """
        if not self.is_alive(slot):
            raise ValueError(
                f"Cannot release slot {slot.index}: not allocated at generation {slot.generation}"
            )

        new_gen = slot.generation + 1
        self._generations[slot.index] = new_gen
        self._free_list.append((slot.index, new_gen))

    def is_alive(self, slot: SlotId) -> bool:
        """Check if a slot handle is still valid (not released or recycled)."""
        return self._generations.get(slot.index, -1) == slot.generation

    @property
    def capacity(self) -> int:
        """Number of slot indices ever handed out."""
        return self._next_index
