from __future__ import annotations
from typing import List, Tuple
from arith.frontend.errors import *
from arith.frontend.expr import BinaryOp, Scalar, I64_MAX
import re

number_pattern = re.compile(r'[0-9]+')

add_ops = [BinaryOp.ADD, BinaryOp.SUBTRACT]
mul_ops = [BinaryOp.MULTIPLY, BinaryOp.DIVIDE]

def look(src: str, pos: int) -> str|None:
    return src[pos] if pos < len(src) else None

def match(src: str, pos: int, chars: str|List[str], expected: str|None=None) -> Tuple[int, str]:
    """Consumes one of `chars` at `pos`, returning the new position and the
    character. Raises if anything else (or nothing) is found.
    """
    chars = list(chars)
    expected = expected or ' or '.join(f"'{c}'" for c in chars)
    char = look(src, pos)
    if char is None:
        raise UnexpectedEndOfInput(pos, expected)
    if not char in chars:
        raise UnexpectedCharacter(pos, char, expected)
    return pos + 1, char

def match_op(src: str, pos: int, ops: List[BinaryOp]) -> Tuple[int, BinaryOp|None]:
    """Consumes an operator from `ops` if there is one at `pos`. Finding none
    is not an error: the position is returned unchanged with no operator.
    """
    char = look(src, pos)
    if char is None or not char in [op.value for op in ops]:
        return pos, None
    return pos + 1, BinaryOp(char)

def scalar_expr(src: str, pos: int) -> Tuple[int, Scalar]:
    if (m := number_pattern.match(src, pos)):
        # Strip zeros before int(): it refuses very long digit strings
        digits = m[0].lstrip('0') or '0'
        if len(digits) > len(str(I64_MAX)) or int(digits) > I64_MAX:
            raise InvalidNumberLiteral(pos, m[0])
        return m.end(), Scalar(int(digits))
    if pos >= len(src):
        raise UnexpectedEndOfInput(pos, 'number')
    raise UnexpectedCharacter(pos, src[pos], 'number')
