from __future__ import annotations

class ParseError(Exception):
    def __init__(self, position: int, message: str) -> None:
        super().__init__(message)
        self.position = position

class UnexpectedCharacter(ParseError):
    def __init__(self, position: int, found: str, expected: str) -> None:
        super().__init__(position, f"expected {expected}, got '{found}' at position {position}")
        self.found = found
        self.expected = expected

class UnexpectedEndOfInput(ParseError):
    def __init__(self, position: int, expected: str) -> None:
        super().__init__(position, f"expected {expected}, got end of input at position {position}")
        self.expected = expected

class InvalidNumberLiteral(ParseError):
    def __init__(self, position: int, literal: str) -> None:
        super().__init__(position, f"number {literal} at position {position} does not fit in 64 bits")
        self.literal = literal

class NestingTooDeep(ParseError):
    def __init__(self, position: int, limit: int) -> None:
        super().__init__(position, f"more than {limit} nested parentheses at position {position}")
        self.limit = limit

class EvaluationError(Exception):
    pass

class DivisionByZero(EvaluationError, ZeroDivisionError):
    pass

class IntegerOverflow(EvaluationError, OverflowError):
    pass
