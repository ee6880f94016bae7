#!/usr/bin/env python3

from __future__ import annotations
import argparse as arg
import sys
from pathlib import Path
from typing import List
import arith.frontend.parser as parser
import arith.backend.evaluator as evaluator
import arith.misc.presentation as presentation
from arith.frontend.errors import ParseError, EvaluationError

def run(src: str, args) -> int:
    """Parses, prints and evaluates `src` as asked by `args`. Returns the
    exit status.
    """
    try:
        if args.partial:
            rest, tree = parser.parse_expression(src)
            if rest:
                print(f"Ignoring unparsed input '{rest}'", file=sys.stderr)
        else:
            tree = parser.parse(src)

        if args.dot:
            print(presentation.print_ast_as_dot(tree), end='')
            return 0
        if args.tree:
            print(presentation.to_infix(tree))

        print(evaluator.evaluate(tree))
    except (ParseError, EvaluationError) as e:
        print(f"Error, {e}", file=sys.stderr)
        return 1
    return 0

def repl(args) -> int:
    try:
        import readline # Line editing for input(), where available
    except ImportError:
        pass
    try:
        while (src := input("expr: ")):
            run(src, args)
    except EOFError:
        print()
    return 0

def main(argv: List[str]|None=None) -> int:
    parser = arg.ArgumentParser(
        prog='arithc',
        description='Evaluates integer arithmetic expressions such as (1+2)*3',
        epilog='Without an expression or file, reads expressions interactively')

    parser.add_argument('expression', nargs='?')
    parser.add_argument('-f', '--file', dest='file', type=Path)
    parser.add_argument('-p', '--partial', dest='partial', action='store_true', default=False)
    parser.add_argument('-T', '--tree', dest='tree', action='store_true', default=False)
    parser.add_argument('-D', '--dot', dest='dot', action='store_true', default=False)
    args = parser.parse_args(argv)

    if args.file and args.expression:
        parser.error('give either an expression or --file, not both')

    if args.file:
        try:
            src = args.file.read_text(encoding='utf-8').rstrip('\n')
        except OSError as e:
            print(f"Error, cannot read {args.file}: {e.strerror}", file=sys.stderr)
            return 1
        except UnicodeDecodeError:
            print(f"Error, {args.file} is not UTF-8 text", file=sys.stderr)
            return 1
        return run(src, args)
    if args.expression is not None:
        return run(args.expression, args)
    return repl(args)

if __name__ == '__main__':
    sys.exit(main())
