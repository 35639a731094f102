"""50/50 lifeline helpers for the player views."""

from __future__ import annotations

from collections.abc import Sequence
import random


def is_fifty_fifty_available(round_wins: int) -> bool:
    """The lifeline unlocks once a player has won at least one round."""
    return round_wins > 0


def fifty_fifty(
    options: Sequence[str],
    correct_answer: str,
    rng: random.Random | None = None,
) -> list[str]:
    """Keep the correct option plus one random wrong option, in shuffled order.

    If the correct answer is not among the options, the last option stands in
    for it.
    """
    if not options:
        return []
    rng = rng or random.Random()
    try:
        correct_index = list(options).index(correct_answer)
    except ValueError:
        correct_index = len(options) - 1

    remaining = [options[correct_index]]
    wrong_indices = [i for i in range(len(options)) if i != correct_index]
    if wrong_indices:
        remaining.append(options[rng.choice(wrong_indices)])

    rng.shuffle(remaining)
    return remaining
