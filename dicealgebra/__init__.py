"""
dice-algebra - evaluate dice expressions such as "4d6h3 + (d8 * 2)".

Usage:
    from dicealgebra import DiceRoller

    result = DiceRoller().roll("2d20h1 + 5")
    print(result.description)  # "\nRolling 2d20...\nYou rolled: 7\n..."
    print(result.total)
"""

from .dice import (
    DiceError,
    DiceRoller,
    RollResult,
    execute,
    parse,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    'DiceError',
    'DiceRoller',
    'RollResult',
    'execute',
    'parse',
    'tokenize',
]
