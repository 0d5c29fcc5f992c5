"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable
from itertools import pairwise


class Operation(str, enum.Enum):
    """An instruction as it is written to the output."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, with the log of operations performed.

    An operation that changes nothing on a single stack is not logged; the
    combined operations ``ss``, ``rr`` and ``rrr`` are always logged.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.operations: list[Operation] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _log(self, operation: Operation, changed: bool, record: bool) -> None:
        if changed and record:
            self.operations.append(operation)

    def sa(self, record: bool = True) -> None:
        """Swap the two top values of ``a``."""
        self._log(Operation.SA, _swap(self.a), record)

    def sb(self, record: bool = True) -> None:
        """Swap the two top values of ``b``."""
        self._log(Operation.SB, _swap(self.b), record)

    def ss(self) -> None:
        """Swap the top values of both stacks."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append(Operation.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self.operations.append(Operation.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self.operations.append(Operation.PB)

    def ra(self, record: bool = True) -> None:
        """Move the top of ``a`` to its bottom."""
        self._log(Operation.RA, _rotate(self.a), record)

    def rb(self, record: bool = True) -> None:
        """Move the top of ``b`` to its bottom."""
        self._log(Operation.RB, _rotate(self.b), record)

    def rr(self) -> None:
        """Rotate both stacks."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append(Operation.RR)

    def rra(self, record: bool = True) -> None:
        """Move the bottom of ``a`` to its top."""
        self._log(Operation.RRA, _reverse_rotate(self.a), record)

    def rrb(self, record: bool = True) -> None:
        """Move the bottom of ``b`` to its top."""
        self._log(Operation.RRB, _reverse_rotate(self.b), record)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append(Operation.RRR)

    def apply(self, operation: Operation | str) -> None:
        """Perform an operation given as an ``Operation`` or its name.

        Raises ``ValueError`` for an unknown name.
        """
        op = Operation(operation)
        getattr(self, op.value)()


def is_sorted(values: Iterable[int]) -> bool:
    """Return True if the values never decrease."""
    return all(first <= second for first, second in pairwise(values))