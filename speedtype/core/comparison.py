from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class CharState(str, Enum):
    UNTYPED = "untyped"
    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True)
class Comparison:
    """Per-character classification of the target passage."""

    states: Tuple[CharState, ...]
    correct_count: int


def classify(target: str, typed: str) -> Comparison:
    """Classify every character of *target* against *typed* at the same index.

    Characters typed past the end of the target are ignored, so the result
    always has exactly ``len(target)`` states.
    """
    overlap = min(len(target), len(typed))
    states = []
    correct = 0
    for i in range(overlap):
        if typed[i] == target[i]:
            states.append(CharState.CORRECT)
            correct += 1
        else:
            states.append(CharState.INCORRECT)
    states.extend([CharState.UNTYPED] * (len(target) - overlap))
    return Comparison(states=tuple(states), correct_count=correct)
