"""Exception types for the host-panicking fixed-point family.

The checked family never raises for arithmetic failure (it returns ``None``),
so nothing here is shared with it.
"""

from __future__ import annotations


class HostPanic(Exception):
    """Raised when a host-family computation aborts.

    Mirrors a host runtime that traps on any arithmetic fault: division by
    zero, overflow of the wide type, or a result that cannot be narrowed back
    to its native width. Ledger code is not expected to recover from it.
    """


def overflow(op: str) -> HostPanic:
    return HostPanic(f"attempt to {op} with overflow")


def divide_by_zero() -> HostPanic:
    return HostPanic("attempt to divide by zero")


def remainder_by_zero() -> HostPanic:
    return HostPanic("attempt to calculate the remainder with a divisor of zero")


def does_not_fit(type_name: str) -> HostPanic:
    return HostPanic(f"result does not fit in {type_name}")
