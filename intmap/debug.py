from .shared import printf
from .table import Table, hash_int


def dump_table(table: Table, name: str, show_empty: bool = False):
    printf("== {0:s} ==\n", name)
    printf("count {0:d} / capacity {1:d}\n", table.count, table.capacity)

    for index in range(table.capacity):
        if table.entries[index].in_use or show_empty:
            dump_slot(table, index)


def dump_slot(table: Table, index: int):
    printf("{0:04d} ", index)

    entry = table.entries[index]
    if not entry.in_use:
        printf("<empty>\n")
        return

    home = hash_int(entry.key, table.capacity)
    printf("{0:d} = {1!r}", entry.key, entry.value)
    if home != index:
        printf(" (home {0:04d})", home)
    printf("\n")
