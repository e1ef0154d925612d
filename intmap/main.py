import sys

from .debug import dump_table
from .shared import printf, set_debug_trace_probe
from .table import Table


def demo(table: Table[int]):
    table.insert(1, 4)
    printf("Getting random (first?) element: {0}\n", table.extract_any(False))
    printf("Getting random (first?) element: {0}\n", table.extract_any(False))

    table.insert(2, 365)
    printf("Getting random (first?) element: {0}\n", table.extract_any(False))
    printf("Getting element with key 2: {0}\n", table.lookup(2))

    table.remove(2)
    printf("Getting random (first?) element: {0}\n", table.extract_any(False))
    printf("Length: {0:d}\n", len(table))


def main():
    flags = sys.argv[1:]
    if any(flag not in ("--trace", "--dump") for flag in flags):
        printf("Usage: intmap [--trace] [--dump]\n")
        sys.exit(64)

    set_debug_trace_probe("--trace" in flags)

    table: Table[int] = Table()
    demo(table)

    if "--dump" in flags:
        dump_table(table, "table")


if __name__ == "__main__":
    main()
