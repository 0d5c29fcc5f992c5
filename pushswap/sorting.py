"""Choosing the operations that sort stack ``a``."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.parsing import INT_MAX
from pushswap.stack import Operation, Stacks, is_sorted


@dataclass(frozen=True)
class Move:
    """The cost of bringing one value of ``b`` into place on ``a``.

    Positive costs count rotations, negative costs reverse rotations.
    """

    value: int
    position: int
    target_pos: int
    cost_a: int
    cost_b: int

    @property
    def total(self) -> int:
        """Number of single-stack rotations the move needs."""
        return abs(self.cost_a) + abs(self.cost_b)


def assign_index(values: Iterable[int]) -> list[int]:
    """Return, for each value, how many values are smaller than it."""
    items = list(values)
    return [sum(1 for other in items if value > other) for value in items]


def find_target_pos(a: Sequence[int], b_value: int) -> int:
    """Position in ``a`` above which ``b_value`` belongs.

    That is the position of the smallest value greater than ``b_value``, or,
    when there is none, the position of the smallest value. ``INT_MAX`` serves
    as the "not found" mark, so a value equal to it is never chosen.
    """
    best_pos: int | None = None
    best_val = INT_MAX
    for pos, value in enumerate(a):
        if b_value < value < best_val:
            best_val, best_pos = value, pos
    if best_pos is not None:
        return best_pos
    min_pos = 0
    best_val = INT_MAX
    for pos, value in enumerate(a):
        if value < best_val:
            best_val, min_pos = value, pos
    return min_pos


def _signed_distance(pos: int, size: int) -> int:
    return pos - size if pos > size // 2 else pos


def calculate_costs(a: Iterable[int], b: Iterable[int]) -> list[Move]:
    """Compute a ``Move`` for every value of ``b``, in stack order."""
    a_values = list(a)
    b_values = list(b)
    moves = []
    for position, value in enumerate(b_values):
        target = find_target_pos(a_values, value)
        moves.append(
            Move(
                value=value,
                position=position,
                target_pos=target,
                cost_a=_signed_distance(target, len(a_values)),
                cost_b=_signed_distance(position, len(b_values)),
            )
        )
    return moves


def sort_three(stacks: Stacks) -> None:
    """Order the three values on top of ``a`` with at most two operations."""
    if len(stacks.a) < 3:
        raise ValueError("sort_three needs at least three values on stack a")
    top, mid, bot = stacks.a[0], stacks.a[1], stacks.a[2]
    if top > mid and mid < bot and top < bot:
        stacks.sa()
    elif top > mid and mid > bot:
        stacks.sa()
        stacks.rra()
    elif top > mid and mid < bot:
        stacks.ra()
    elif top < mid and mid > bot and top < bot:
        stacks.sa()
        stacks.ra()
    elif top < mid and mid > bot:
        stacks.rra()


def _rotate(stacks: Stacks, cost: int, forward, backward) -> None:
    for _ in range(max(cost, 0)):
        forward()
    for _ in range(max(-cost, 0)):
        backward()


def execute_cheapest_move(stacks: Stacks) -> Move:
    """Push the cheapest value of ``b`` onto its place in ``a`` and return its move."""
    if not stacks.b:
        raise ValueError("stack b is empty")
    cheapest = min(calculate_costs(stacks.a, stacks.b), key=lambda move: move.total)
    cost_a, cost_b = cheapest.cost_a, cheapest.cost_b
    while cost_a > 0 and cost_b > 0:
        stacks.rr()
        cost_a -= 1
        cost_b -= 1
    while cost_a < 0 and cost_b < 0:
        stacks.rrr()
        cost_a += 1
        cost_b += 1
    _rotate(stacks, cost_a, stacks.ra, stacks.rra)
    _rotate(stacks, cost_b, stacks.rb, stacks.rrb)
    stacks.pa()
    return cheapest


def final_rotation(stacks: Stacks) -> None:
    """Rotate ``a`` the short way until its smallest value is on top."""
    if not stacks.a:
        return
    values = list(stacks.a)
    min_pos = _signed_distance(values.index(min(values)), len(values))
    _rotate(stacks, min_pos, stacks.ra, stacks.rra)


def sort_large(stacks: Stacks) -> None:
    """Sort ``a`` of more than three values, using ``b`` as scratch space."""
    ranks = dict(zip(stacks.a, assign_index(stacks.a)))
    cutoff = len(stacks.a) - 3
    while len(stacks.a) > 3:
        if ranks[stacks.a[0]] < cutoff:
            stacks.pb()
        else:
            stacks.ra()
    sort_three(stacks)
    while stacks.b:
        execute_cheapest_move(stacks)
    final_rotation(stacks)


def push_swap(values: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``values`` with the top of ``a`` first."""
    stacks = Stacks(values)
    if is_sorted(stacks.a):
        return []
    if len(stacks.a) == 2:
        stacks.sa()
    elif len(stacks.a) == 3:
        sort_three(stacks)
    else:
        sort_large(stacks)
    return list(stacks.operations)