from __future__ import annotations
from typing import Tuple
from arith.frontend.utils import *
from arith.frontend.expr import Expr, Binary

# Grammar:
# expression = term, { add_op, term } ;
# term       = factor, { mul_op, factor } ;
# factor     = "(", expression, ")" | number ;
# add_op     = "+" | "-" ;
# mul_op     = "*" | "/" ;
# number     = digit, { digit } ;
# digit      = ? regex [0-9] ? ;
#
# Every rule takes the source and a position, and returns the position
# following what it consumed along with the tree it built.

MAX_NESTING = 200

Parsed = Tuple[int, Expr]

def parens_expr(src: str, pos: int, depth: int=0, max_nesting: int=MAX_NESTING) -> Parsed:
    start = pos
    pos, _ = match(src, pos, '(')
    if depth >= max_nesting:
        raise NestingTooDeep(start, max_nesting)
    try:
        pos, tree = expression(src, pos, depth + 1, max_nesting)
    except RecursionError:
        # The interpreter ran out of stack before `max_nesting` was reached
        raise NestingTooDeep(start, depth) from None
    pos, _ = match(src, pos, ')')
    return pos, tree

def factor(src: str, pos: int, depth: int=0, max_nesting: int=MAX_NESTING) -> Parsed:
    # Past an opening paren we are committed: errors must not fall back to
    # the number branch
    if look(src, pos) == '(':
        return parens_expr(src, pos, depth, max_nesting)
    return scalar_expr(src, pos)

def term(src: str, pos: int, depth: int=0, max_nesting: int=MAX_NESTING) -> Parsed:
    pos, tree = factor(src, pos, depth, max_nesting)
    while True:
        pos, op = match_op(src, pos, mul_ops)
        if not op:
            return pos, tree
        pos, rhs = factor(src, pos, depth, max_nesting)
        tree = Binary(tree, op, rhs) # LHS of '*' in (a/b)*c is (a/b)

def expression(src: str, pos: int, depth: int=0, max_nesting: int=MAX_NESTING) -> Parsed:
    pos, tree = term(src, pos, depth, max_nesting)
    while True:
        pos, op = match_op(src, pos, add_ops)
        if not op:
            return pos, tree
        pos, rhs = term(src, pos, depth, max_nesting)
        tree = Binary(tree, op, rhs)

def parse_expression(src: str, max_nesting: int=MAX_NESTING) -> Tuple[str, Expr]:
    """Parses the longest expression at the start of `src`.

    Returns the unconsumed rest of `src` along with the tree. Callers wanting
    the whole input to be an expression must check that the rest is empty,
    or use `parse`.
    """
    pos, tree = expression(src, 0, 0, max_nesting)
    return src[pos:], tree

def parse(src: str, max_nesting: int=MAX_NESTING) -> Expr:
    rest, tree = parse_expression(src, max_nesting)
    if rest:
        pos = len(src) - len(rest)
        raise UnexpectedCharacter(pos, rest[0], 'operator or end of input')
    return tree
