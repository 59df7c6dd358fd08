"""Answer small arithmetic questions written in English.

    $ python examples/calculator/chatty_math.py "what is twenty-one times 2"
    The answer is 42

The grammar only collects operands and an operator into a payload;
the arithmetic happens after parsing.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from enum import Enum

from parsecomb import all_, and_, apply, digit, lit, opt, or_, parse, whitespace


class MathOp(Enum):
    NOT_SET = 0
    ADD = 1
    SUBTRACT = 2
    MULTIPLY = 3
    DIVIDE = 4


OPERATOR_WORDS = {
    "+": MathOp.ADD,
    "plus": MathOp.ADD,
    "-": MathOp.SUBTRACT,
    "minus": MathOp.SUBTRACT,
    "*": MathOp.MULTIPLY,
    "times": MathOp.MULTIPLY,
    "/": MathOp.DIVIDE,
    "divided by": MathOp.DIVIDE,
}

ONES = ["one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
TEENS = ["ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
         "seventeen", "eighteen", "nineteen"]
TENS = ["twenty", "thirty", "forty", "fifty", "sixty", "seventy", "eighty", "ninety"]

NUMBER_WORDS = {
    **{word: value for value, word in enumerate(ONES, start=1)},
    **{word: value for value, word in enumerate(TEENS, start=10)},
    **dict(zip(TENS, range(20, 100, 10))),
}


@dataclass
class Question:
    left: int | None = None
    right: int | None = None
    operator: MathOp = MathOp.NOT_SET
    accumulator: int = 0

    def copy(self) -> Question:
        return replace(self)


def set_operator(matched, payload: Question) -> Question:
    payload.operator = OPERATOR_WORDS[matched.lower()]
    return payload


def set_number(matched, payload: Question) -> Question:
    if payload.left is None:
        payload.left = int(matched)
    else:
        payload.right = int(matched)
    return payload


def add_word(matched, payload: Question) -> Question:
    payload.accumulator += NUMBER_WORDS[matched.lower()]
    return payload


def save_word_number(matched, payload: Question) -> Question:
    total, payload.accumulator = payload.accumulator, 0
    return set_number(str(total), payload)


def words(choices):
    return or_([lit(word) for word in choices], add_word)


space = opt(all_(whitespace()))
operator = or_([lit(word, set_operator) for word in OPERATOR_WORDS])
ones, teens, tens = words(ONES), words(TEENS), words(TENS)

number = or_([
    all_(digit(), set_number),
    apply(teens, save_word_number),
    apply(and_([tens, or_([lit("-"), whitespace()]), ones]), save_word_number),
    apply(tens, save_word_number),
    apply(ones, save_word_number),
])

formula = and_([
    space,
    opt(or_([lit("what does"), lit("what is")])),
    space,
    number,
    space,
    operator,
    space,
    number,
    space,
    opt(or_([lit("="), lit("equal")])),
])


def ask(text: str) -> str:
    result = parse(formula, text, Question())
    if not result.success:
        return "sorry, but I couldn't understand that"

    question = result.payload
    left, right = question.left, question.right
    if question.operator is MathOp.ADD:
        answer = left + right
    elif question.operator is MathOp.SUBTRACT:
        answer = left - right
    elif question.operator is MathOp.MULTIPLY:
        answer = left * right
    elif right == 0:
        return "sorry, I can't divide by zero"
    else:
        answer = left / right
    return f"The answer is {answer}"


DEFAULT_QUESTIONS = [
    "what is two plus two",
    "What does 12 divided by four equal",
    "twenty-one times 2",
    "ninety nine minus 100",
    "how are you",
]


if __name__ == "__main__":
    questions = sys.argv[1:] or DEFAULT_QUESTIONS
    for q in questions:
        print(f"{q!r}: {ask(q)}")
