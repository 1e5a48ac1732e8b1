"""
Abstract syntax tree for dice algebra and its evaluator.

The tree is built from four immutable node types:
- IntegerNode: a literal ("5")
- ShortRollNode: one die ("d20")
- LongRollNode: several dice, optionally keeping the highest/lowest ("4d6h3")
- BinaryOpNode: + - * / over two subtrees

execute() walks the tree left to right, drawing dice values from a random
source and collecting a narration of every roll alongside the total.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from .errors import DivisionByZeroError
from .random_source import get_random_source

logger = logging.getLogger(__name__)


class Operator(Enum):
    """Arithmetic operators available in BinaryOpNode."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class EvaluationResult:
    """Numeric result of evaluating a tree plus the roll narration."""
    result: int
    description: str = ""

    def __str__(self) -> str:
        return str(self.result)


class _Executable:
    """Mixin giving every node a node.execute(source) shortcut."""

    def execute(self, source=None) -> EvaluationResult:
        return execute(self, source)


@dataclass(frozen=True)
class IntegerNode(_Executable):
    """Integer literal."""
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ShortRollNode(_Executable):
    """A single die: dN."""
    faces: int

    def __str__(self) -> str:
        return f"d{self.faces}"


@dataclass(frozen=True)
class LongRollNode(_Executable):
    """
    Several dice: NdM, optionally with hK (keep highest K) or lK (keep lowest K).

    A keep count that is not smaller than the number of dice keeps every die.
    """
    die_count: int
    faces: int
    keep_high: Optional[int] = None
    keep_low: Optional[int] = None

    def __post_init__(self):
        if self.keep_high is not None and self.keep_low is not None:
            raise ValueError("A roll cannot keep both highest and lowest dice")

    def __str__(self) -> str:
        if self.keep_high is not None:
            return f"{self.die_count}d{self.faces}h{self.keep_high}"
        elif self.keep_low is not None:
            return f"{self.die_count}d{self.faces}l{self.keep_low}"
        else:
            return f"{self.die_count}d{self.faces}"


@dataclass(frozen=True)
class BinaryOpNode(_Executable):
    """Arithmetic over two subtrees."""
    left: 'Node'
    right: 'Node'
    operator: Operator

    def __str__(self) -> str:
        # Explicit stack: left-leaning chains can be thousands of levels deep
        parts: List[str] = []
        pending: List[Union[str, 'Node']] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, BinaryOpNode):
                pending.extend([")", item.right, f" {item.operator} ", item.left, "("])
            else:
                parts.append(str(item))
        return "".join(parts)


Node = Union[IntegerNode, ShortRollNode, LongRollNode, BinaryOpNode]


def execute(node: Node, source=None) -> EvaluationResult:
    """
    Evaluate a tree.

    Args:
        node: Root of the tree to evaluate
        source: Object with get(min, max) supplying die values. Defaults to
                the process-wide RandomSource.

    Returns:
        EvaluationResult with the total and the narration of every roll

    Raises:
        DivisionByZeroError: If any division has a zero right operand
    """
    if source is None:
        source = get_random_source()

    # Post-order walk on an explicit stack so depth is not bounded by the
    # interpreter's recursion limit. Left subtrees are visited first, which
    # keeps random draws and narration in source order.
    results: List[EvaluationResult] = []
    pending: List[Tuple[Node, bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if isinstance(current, IntegerNode):
            results.append(EvaluationResult(current.value))
        elif isinstance(current, ShortRollNode):
            results.append(_execute_short_roll(current, source))
        elif isinstance(current, LongRollNode):
            results.append(_execute_long_roll(current, source))
        elif isinstance(current, BinaryOpNode):
            if children_done:
                right = results.pop()
                left = results.pop()
                results.append(_combine(current.operator, left, right))
            else:
                pending.append((current, True))
                pending.append((current.right, False))
                pending.append((current.left, False))
        else:
            raise TypeError(f"Cannot execute {type(current).__name__}")

    return results.pop()


def _execute_short_roll(node: ShortRollNode, source) -> EvaluationResult:
    if node.faces < 1:
        return EvaluationResult(0, f"\nRolling d{node.faces}...\nYou rolled: 0\n")

    roll = source.get(1, node.faces)
    logger.debug(f"{node} → {roll}")
    return EvaluationResult(roll, f"\nRolling d{node.faces}...\nYou rolled: {roll}\n")


def _execute_long_roll(node: LongRollNode, source) -> EvaluationResult:
    header = f"\nRolling {node.die_count}d{node.faces}...\n"
    if node.faces < 1 or node.die_count < 1:
        return EvaluationResult(0, header + "You rolled: 0\n")

    rolls: List[int] = []
    description = header
    for _ in range(node.die_count):
        roll = source.get(1, node.faces)
        description += f"You rolled: {roll}\n"
        rolls.append(roll)

    if node.keep_low is not None and node.keep_low < len(rolls):
        total = sum(sorted(rolls)[:node.keep_low])
    elif node.keep_high is not None and node.keep_high < len(rolls):
        total = sum(sorted(rolls, reverse=True)[:node.keep_high])
    else:
        total = sum(rolls)

    logger.debug(f"{node} → {rolls} = {total}")
    return EvaluationResult(total, description)


def _combine(operator: Operator, left: EvaluationResult,
             right: EvaluationResult) -> EvaluationResult:
    if operator is Operator.ADD:
        result = left.result + right.result
    elif operator is Operator.SUBTRACT:
        result = left.result - right.result
    elif operator is Operator.MULTIPLY:
        result = left.result * right.result
    elif operator is Operator.DIVIDE:
        if right.result == 0:
            raise DivisionByZeroError()
        result = truncating_divide(left.result, right.result)
    else:
        raise TypeError(f"Unknown operator: {operator!r}")

    return EvaluationResult(result, left.description + right.description)


def truncating_divide(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero (-7 / 2 == -3), unlike Python's //."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient


__all__ = [
    'Operator',
    'EvaluationResult',
    'IntegerNode',
    'ShortRollNode',
    'LongRollNode',
    'BinaryOpNode',
    'Node',
    'execute',
    'truncating_divide',
]
