from __future__ import annotations

import re
from dataclasses import dataclass

from guessing_game.core.phases import Outcome

# Guesses are unsigned 32-bit integers.
GUESS_MAX = 2**32 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")

OUTCOME_MESSAGES: dict[Outcome, str] = {
    Outcome.too_small: "Too small!",
    Outcome.too_big: "Too big!",
    Outcome.win: "You win!",
}


@dataclass(frozen=True, slots=True)
class ParsedGuess:
    value: int


@dataclass(frozen=True, slots=True)
class ParseFailure:
    """Input that is not an unsigned integer. Callers re-prompt without comment."""

    text: str


ParseResult = ParsedGuess | ParseFailure


def parse_guess(text: str) -> ParseResult:
    """Parse one raw input line.

    Accepts an optional leading `+` and ASCII digits only; `int()` alone would
    also take underscores, signs and non-ASCII digits.
    """

    trimmed = text.strip()
    if not _UNSIGNED_RE.fullmatch(trimmed):
        return ParseFailure(text=text)

    value = int(trimmed)
    if value > GUESS_MAX:
        return ParseFailure(text=text)
    return ParsedGuess(value=value)


def compare_guess(guess: int, secret: int) -> Outcome:
    if guess < secret:
        return Outcome.too_small
    if guess > secret:
        return Outcome.too_big
    return Outcome.win
