"""
Text-in, result-out facade over the lexer, parser and evaluator.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dicealgebra.core.result import Result
from .errors import DiceError
from .lexer import tokenize
from .parser import parse
from .random_source import RandomSource
from .tree import Node, execute

logger = logging.getLogger(__name__)


@dataclass
class RollResult:
    """Complete result of evaluating one expression."""
    expression: str       # Original text
    total: int            # Final result
    description: str      # Narration of every die rolled
    tree: Node            # Parsed expression

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {
            'expression': self.expression,
            'parsed': str(self.tree),
            'total': self.total,
            'description': self.description,
        }


class DiceRoller:
    """
    Evaluates dice algebra expressions.

    Supports:
    - Integer arithmetic with + - * / and parentheses
    - Single dice (d20) and dice pools (4d6)
    - Keep highest (4d6h3) and keep lowest (2d20l1)
    - Seeded random for determinism
    """

    def __init__(self, seed: Optional[int] = None, source=None):
        """
        Initialize roller.

        Args:
            seed: Random seed for deterministic rolls (testing/replay)
            source: Object with get(min, max) to draw dice from; overrides seed
        """
        self.source = source if source is not None else RandomSource(seed)

    def roll(self, expression: str) -> RollResult:
        """
        Tokenize, parse and evaluate an expression.

        Args:
            expression: Dice algebra text (e.g., "4d6h3", "(d8 + 2) * 2")

        Returns:
            RollResult with total and narration

        Raises:
            DiceError: If the expression is invalid or divides by zero
            NumericOverflowError: If a literal is too large
        """
        tree = parse(tokenize(expression))
        evaluation = execute(tree, self.source)
        logger.debug(f"{expression!r} → {evaluation.result}")

        return RollResult(
            expression=expression,
            total=evaluation.result,
            description=evaluation.description,
            tree=tree,
        )

    def evaluate(self, expression: str) -> Result:
        """
        Like roll(), but reports dice errors as a failed Result.

        Exceptions that are not DiceError still propagate.

        Args:
            expression: Dice algebra text

        Returns:
            Result whose data is a RollResult on success
        """
        try:
            return Result.ok(self.roll(expression))
        except DiceError as e:
            logger.debug(f"Rejected {expression!r}: {e}")
            return Result.fail(str(e), e.error_code)


__all__ = ['DiceRoller', 'RollResult']
