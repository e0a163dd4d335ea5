"""monkeys.py - Monkey in the middle (2022 day 11).

Each monkey block reads:

    Monkey 0:
      Starting items: 79, 98
      Operation: new = old * 19
      Test: divisible by 23
        If true: throw to monkey 2
        If false: throw to monkey 3

Monkeys take turns in order. On its turn a monkey inspects each item it
holds (applies its operation, then divides by WORRY_RELIEF) and throws it
by the divisibility test. Monkey business is the product of the two
largest inspection counts after MONKEY_ROUNDS rounds.
"""
from __future__ import annotations
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Iterable, List, Optional, Tuple
from .config import BUSIEST_MONKEYS, MONKEY_ROUNDS, WORRY_RELIEF
from .types import MalformedInputError
from .utils.lines import parse_int, split_blocks

OPERATORS = ("+", "*")


@dataclass
class Monkey:
    """Mutable monkey state.

    Attributes:
        items: Worry levels, in throwing order
        operator: '+' or '*'
        operand: Right-hand operand, or None for 'old'
        divisor: Divisibility test
        catchers: (monkey if divisible, monkey otherwise)
        inspected: Items inspected so far
    """

    items: Deque[int]
    operator: str
    operand: Optional[int]
    divisor: int
    catchers: Tuple[int, int]
    inspected: int = field(default=0)

    def inspect(self, worry: int) -> int:
        operand = worry if self.operand is None else self.operand
        if self.operator == "+":
            return worry + operand
        return worry * operand

    def throw_item(self) -> Optional[Tuple[int, int]]:
        """Inspect the next item and return (catcher, new worry), or None."""
        if not self.items:
            return None
        worry = self.inspect(self.items.popleft()) // WORRY_RELIEF
        self.inspected += 1
        catcher = self.catchers[0] if worry % self.divisor == 0 else self.catchers[1]
        return catcher, worry


def _field(line: str, label: str) -> str:
    line = line.strip()
    if not line.startswith(label):
        raise MalformedInputError(f"expected {label!r}: {line!r}")
    return line[len(label):].strip()


def _last_word_int(text: str, what: str) -> int:
    return parse_int(text.split(" ")[-1], what)


def parse_monkey(block: List[str]) -> Monkey:
    """Parse one six-line monkey block."""
    if len(block) != 6:
        raise MalformedInputError(f"monkey block has {len(block)} lines, expected 6")
    _field(block[0], "Monkey")

    items_text = _field(block[1], "Starting items:")
    items = deque(
        parse_int(token, "worry level") for token in items_text.split(", ") if items_text
    )

    words = _field(block[2], "Operation:").split(" ")
    if len(words) != 5 or words[:3] != ["new", "=", "old"] or words[3] not in OPERATORS:
        raise MalformedInputError(f"unsupported operation: {block[2].strip()!r}")
    operand = None if words[4] == "old" else parse_int(words[4], "operand")

    divisor = _last_word_int(_field(block[3], "Test: divisible by"), "divisor")
    if divisor == 0:
        raise MalformedInputError("divisor must be positive")
    if_true = _last_word_int(_field(block[4], "If true: throw to monkey"), "monkey")
    if_false = _last_word_int(_field(block[5], "If false: throw to monkey"), "monkey")
    return Monkey(items, words[3], operand, divisor, (if_true, if_false))


def parse_monkeys(lines: Iterable[str]) -> List[Monkey]:
    monkeys = [parse_monkey(block) for block in split_blocks(lines)]
    if not monkeys:
        raise MalformedInputError("no monkeys in input")
    for monkey in monkeys:
        for catcher in monkey.catchers:
            if catcher >= len(monkeys):
                raise MalformedInputError(f"no monkey {catcher} to throw to")
    return monkeys


def play_rounds(monkeys: List[Monkey], rounds: int = MONKEY_ROUNDS) -> None:
    for _ in range(rounds):
        for monkey in monkeys:
            while True:
                thrown = monkey.throw_item()
                if thrown is None:
                    break
                catcher, worry = thrown
                monkeys[catcher].items.append(worry)


def monkey_business(lines: Iterable[str]) -> int:
    monkeys = parse_monkeys(lines)
    play_rounds(monkeys)
    busiest = sorted((m.inspected for m in monkeys), reverse=True)[:BUSIEST_MONKEYS]
    product = 1
    for count in busiest:
        product *= count
    return product
