import sys
from typing import Any


_debug_trace_probe = False


def set_debug_trace_probe(b: bool):
    global _debug_trace_probe
    _debug_trace_probe = b


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def trace(format: str, *args: Any):
    if _debug_trace_probe:
        printf(format, *args)
