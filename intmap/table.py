import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

from .shared import printf_err, trace


T = TypeVar("T")

INIT_CAP = 1024

KEY_MIN = -(2**63)
KEY_MAX = 2**63 - 1

_MASK64 = 2**64 - 1


@dataclass(frozen=True)
class Ok:
    pass


@dataclass(frozen=True)
class OutOfMemory:
    pass


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class Full:
    pass


InsertResult = Ok | OutOfMemory
RemoveResult = Ok | NotFound


@dataclass
class Slot(Generic[T]):
    in_use: bool = False
    key: int = 0
    value: T | None = None

    def clear(self):
        self.in_use = False
        self.key = 0
        self.value = None


def new_slots(capacity: int) -> list[Slot]:
    return [Slot() for _ in range(capacity)]


def check_key(key: int) -> int:
    if not isinstance(key, int) or isinstance(key, bool):
        raise TypeError(f"key must be an int, not {type(key).__name__}")
    if key < KEY_MIN or key > KEY_MAX:
        raise ValueError(f"key {key} does not fit in 64 bits")
    return key


def hash_int(key: int, capacity: int) -> int:
    key &= _MASK64

    # Robert Jenkins' 32 bit mix, wrapped at 64 bits
    key = (key + (key << 12)) & _MASK64
    key ^= key >> 22
    key = (key + (key << 4)) & _MASK64
    key ^= key >> 9
    key = (key + (key << 10)) & _MASK64
    key ^= key >> 2
    key = (key + (key << 7)) & _MASK64
    key ^= key >> 12

    # Knuth's multiplicative method
    key = ((key >> 3) * 2654435761) & _MASK64

    return key % capacity


@dataclass
class Table(Generic[T]):
    count: int
    capacity: int
    initial_capacity: int
    holes: int
    entries: list[Slot[T]]

    def __init__(self, capacity: int = INIT_CAP) -> None:
        if capacity < 2:
            raise ValueError("capacity must be at least 2")
        self.initial_capacity = capacity
        self.free()

    def insert(self, key: int, value: T) -> InsertResult:
        check_key(key)

        index = self.probe(key)
        if isinstance(index, Full):
            if isinstance(self._rehash(), OutOfMemory):
                return OutOfMemory()
            index = self.probe(key)
            assert not isinstance(index, Full)

        entry = self.entries[index]
        if not entry.in_use:
            self.count += 1

        entry.in_use = True
        entry.key = key
        entry.value = value
        return Ok()

    def lookup(self, key: int) -> T | NotFound:
        index = self._find(check_key(key))
        if index is None:
            return NotFound()

        return copy.copy(self.entries[index].value)

    def extract_any(self, remove: bool) -> T | NotFound:
        if self.count == 0:
            return NotFound()

        for entry in self.entries:
            if not entry.in_use:
                continue
            if not remove:
                return copy.copy(entry.value)

            value = entry.value
            self._clear(entry)
            return value

        raise AssertionError(f"count is {self.count} but no slot is in use")

    def remove(self, key: int) -> RemoveResult:
        index = self._find(check_key(key))
        if index is None:
            return NotFound()

        self._clear(self.entries[index])
        return Ok()

    def add_all(self, from_t: "Table[T]") -> InsertResult:
        for entry in from_t.entries:
            if not entry.in_use:
                continue
            result = self.insert(entry.key, entry.value)
            if isinstance(result, OutOfMemory):
                return result
        return Ok()

    def probe(self, key: int) -> int | Full:
        """Slot for an insert of `key`: the slot already holding it, else the
        first empty slot on its probe path.

        Until something is removed every probe path is unbroken, so the walk
        stops at the first empty slot. After a removal the key may sit past a
        hole, so the walk covers the whole table.

        Reports Full when no slot is empty or when filling one would leave the
        table without any empty slot.
        """
        home = hash_int(key, self.capacity)
        empty: int | None = None
        index = home

        for _ in range(self.capacity):
            entry = self.entries[index]
            if not entry.in_use:
                if empty is None:
                    empty = index
                if self.holes == 0:
                    break
            elif entry.key == key:
                trace("probe {0:d}: home {1:d}, found at {2:d}\n", key, home, index)
                return index

            index = (index + 1) % self.capacity

        if empty is None or self.count + 1 >= self.capacity:
            trace("probe {0:d}: home {1:d}, full\n", key, home)
            return Full()

        trace("probe {0:d}: home {1:d}, empty at {2:d}\n", key, home, empty)
        return empty

    def free(self):
        self.count = 0
        self.holes = 0
        self.capacity = self.initial_capacity
        self.entries = new_slots(self.capacity)

    def _find(self, key: int) -> int | None:
        index = hash_int(key, self.capacity)
        for _ in range(self.capacity):
            entry = self.entries[index]
            if entry.in_use:
                if entry.key == key:
                    return index
            elif self.holes == 0:
                return None
            index = (index + 1) % self.capacity
        return None

    def _clear(self, entry: Slot[T]):
        entry.clear()
        self.count -= 1
        if self.count == 0:
            self.holes = 0
        else:
            self.holes += 1

    def _rehash(self) -> Ok | OutOfMemory:
        capacity = self.capacity * 2
        try:
            entries = new_slots(capacity)
        except MemoryError:
            printf_err("Out of memory growing table to {0:d} slots.\n", capacity)
            return OutOfMemory()

        trace("grow {0:d} -> {1:d}\n", self.capacity, capacity)

        old_entries = self.entries
        self.entries = entries
        self.capacity = capacity
        self.count = 0
        self.holes = 0

        for entry in old_entries:
            if not entry.in_use:
                continue
            result = self.insert(entry.key, entry.value)
            assert result == Ok()

        return Ok()

    def __len__(self) -> int:
        return self.count

    def __contains__(self, key: int) -> bool:
        return self._find(check_key(key)) is not None
