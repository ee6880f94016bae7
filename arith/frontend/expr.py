from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

I64_MIN = -2**63
I64_MAX = 2**63 - 1

class BinaryOp(Enum):
    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = '*'
    DIVIDE = '/'

class Expr:
    """Base of the two tree node kinds, `Scalar` and `Binary`."""

@dataclass(frozen=True)
class Scalar(Expr):
    value: int

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError(f"Scalar value must be an int, got {self.value!r}")
        if not I64_MIN <= self.value <= I64_MAX:
            raise ValueError(f"Scalar value {self.value} does not fit in 64 bits")

@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    op: BinaryOp
    right: Expr

    def __post_init__(self) -> None:
        if not (isinstance(self.left, Expr) and isinstance(self.right, Expr)):
            raise TypeError(f"Binary children must be Expr, got {self.left!r} and {self.right!r}")
        if not isinstance(self.op, BinaryOp):
            raise TypeError(f"Binary operator must be a BinaryOp, got {self.op!r}")

def binary(left: Expr|int, op: BinaryOp|str, right: Expr|int) -> Binary:
    """Shorthand for building trees by hand: ints become scalars and
    operators may be given as their character.
    """
    left = Scalar(left) if isinstance(left, int) else left
    right = Scalar(right) if isinstance(right, int) else right
    return Binary(left, BinaryOp(op), right)
