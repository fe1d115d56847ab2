"""Fixed-capacity FIFO of recently created archive paths."""


class ArchiveQueue:
    """Ring buffer over a preallocated list; push at the back, evict at the front.

    Only bookkeeping: evicting a name never touches the file on disk.
    """

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._slots: list[str | None] = [None] * capacity
        self._head = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return self._size

    def full(self) -> bool:
        return self._size == len(self._slots)

    def push_back(self, item: str) -> str | None:
        """Append *item*, evicting and returning the oldest entry if full."""
        if not self._slots:
            return None
        evicted = None
        if self.full():
            evicted = self.pop_front()
        tail = (self._head + self._size) % len(self._slots)
        self._slots[tail] = item
        self._size += 1
        return evicted

    def pop_front(self) -> str:
        if self._size == 0:
            raise IndexError("pop from empty ArchiveQueue")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = (self._head + 1) % len(self._slots)
        self._size -= 1
        return item

    def front(self) -> str:
        if self._size == 0:
            raise IndexError("front of empty ArchiveQueue")
        return self._slots[self._head]

    def __iter__(self):
        for i in range(self._size):
            yield self._slots[(self._head + i) % len(self._slots)]

    def to_list(self) -> list[str]:
        return list(self)
