"""Strategies that choose where to place the falling pair."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .field import Field


@dataclass(frozen=True)
class Move:
    """A placement decision: target column and number of rotations."""

    target_x: int
    rotation: int


class AI(ABC):
    """A player that picks a move for the current field."""

    @abstractmethod
    def decide(self, field: Field) -> Move:
        """Choose a move for the given field."""


class RandomAI(AI):
    """Picks a uniformly random column and rotation count (0 to 3)."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else random.Random()

    def decide(self, field: Field) -> Move:
        return Move(self.rng.randrange(field.width), self.rng.randrange(4))


def create_random_ai(rng: random.Random | None = None) -> RandomAI:
    """A new AI that places pairs at random."""
    return RandomAI(rng)