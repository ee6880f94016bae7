from __future__ import annotations
from typing import Callable, Dict, List
from arith.frontend.expr import Expr, Scalar, Binary, BinaryOp, I64_MIN, I64_MAX
from arith.frontend.errors import DivisionByZero, IntegerOverflow
from arith.frontend.parser import parse

def divide(x: int, y: int) -> int:
    """Integer division truncating toward zero, unlike Python's `//`."""
    if y == 0:
        raise DivisionByZero(f"division of {x} by zero")
    quotient = abs(x) // abs(y)
    return quotient if (x < 0) == (y < 0) else -quotient

op_map: Dict[BinaryOp, Callable[[int, int], int]] = {
    BinaryOp.ADD: lambda x, y: x + y,
    BinaryOp.SUBTRACT: lambda x, y: x - y,
    BinaryOp.MULTIPLY: lambda x, y: x * y,
    BinaryOp.DIVIDE: divide
}

def apply(op: BinaryOp, x: int, y: int) -> int:
    result = op_map[op](x, y)
    if not I64_MIN <= result <= I64_MAX:
        raise IntegerOverflow(f"{x} {op.value} {y} does not fit in 64 bits")
    return result

def evaluate(tree: Expr) -> int:
    """Reduces `tree` to its value, left operands first.

    Walks the tree with an explicit stack so that long operator chains, which
    parse into very deep left-leaning trees, don't exhaust Python's recursion
    limit.
    """
    values: List[int] = []
    stack: List[Expr|BinaryOp] = [tree]

    while stack:
        node = stack.pop()
        if isinstance(node, BinaryOp): # Both operands are on `values`
            y = values.pop()
            x = values.pop()
            values.append(apply(node, x, y))
        elif isinstance(node, Scalar):
            values.append(node.value)
        elif isinstance(node, Binary):
            stack.extend([node.op, node.right, node.left])
        else:
            raise TypeError(f"Cannot evaluate {node!r}")

    return values.pop()

def calculate(src: str) -> int:
    return evaluate(parse(src))
