from __future__ import annotations
from typing import List, Tuple
from arith.frontend.expr import Expr, Scalar, Binary, BinaryOp

def to_infix(tree: Expr) -> str:
    """Renders `tree` back to source, one pair of parentheses per operator,
    e.g. `((1*2)+3)`. Parsing the output gives back an equal tree.
    """
    parts: List[str] = []
    stack: List[Expr|BinaryOp] = [tree]

    while stack:
        node = stack.pop()
        if isinstance(node, BinaryOp):
            rhs = parts.pop()
            lhs = parts.pop()
            parts.append(f'({lhs}{node.value}{rhs})')
        elif isinstance(node, Scalar):
            parts.append(str(node.value))
        else:
            stack.extend([node.op, node.right, node.left])

    return parts.pop()

def print_ast_as_dot(tree: Expr) -> str:
    dot = "digraph G {\n"
    todo: List[Tuple[int|None, Expr]] = [(None, tree)] # (parent id, node)
    next_id = 0

    while todo:
        parent, node = todo.pop()
        label = str(node.value) if isinstance(node, Scalar) else node.op.value
        shape = 'box' if isinstance(node, Scalar) else 'circle'
        dot += f'\t{next_id} [label="{label}",shape={shape}]\n'
        if parent is not None:
            dot += f'\t{parent} -> {next_id}\n'
        if isinstance(node, Binary):
            todo.extend([(next_id, node.right), (next_id, node.left)])
        next_id += 1

    return dot + "}\n"
