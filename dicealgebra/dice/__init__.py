"""
Dice algebra pipeline: text → tokens → tree → result.

Provides:
- Lexing of integers, dice markers (d, h, l), operators and parentheses
- Recursive-descent parsing with * / binding tighter than + -
- Single dice (d20), dice pools (3d6), keep highest (4d6h3), keep lowest (2d20l1)
- Roll narration alongside every result
- Seeded random for determinism

Usage:
    tokens = tokenize("4d6h3 + 2")
    tree = parse(tokens)
    evaluation = execute(tree, RandomSource(seed=42))
    print(evaluation.result, evaluation.description)
"""

from .cursor import Cursor
from .errors import (
    DiceError,
    DivisionByZeroError,
    EmptyInputError,
    InvalidExpressionError,
    NumericOverflowError,
    UnbalancedParenthesisError,
    UnexpectedCharacterError,
)
from .lexer import Token, TokenType, tokenize
from .parser import Parser, parse, validate
from .random_source import RandomSource, get_random_source
from .roller import DiceRoller, RollResult
from .tree import (
    BinaryOpNode,
    EvaluationResult,
    IntegerNode,
    LongRollNode,
    Operator,
    ShortRollNode,
    execute,
)

__all__ = [
    'Cursor',
    'DiceError',
    'DivisionByZeroError',
    'EmptyInputError',
    'InvalidExpressionError',
    'NumericOverflowError',
    'UnbalancedParenthesisError',
    'UnexpectedCharacterError',
    'Token',
    'TokenType',
    'tokenize',
    'Parser',
    'parse',
    'validate',
    'RandomSource',
    'get_random_source',
    'DiceRoller',
    'RollResult',
    'BinaryOpNode',
    'EvaluationResult',
    'IntegerNode',
    'LongRollNode',
    'Operator',
    'ShortRollNode',
    'execute',
]
