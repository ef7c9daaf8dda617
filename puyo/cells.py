"""Cell kinds on a board and the summary of one chain step."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CellType(Enum):
    """What occupies a single cell of the board."""

    EMPTY = 0
    WALL = 1
    RED = 2
    GREEN = 3
    YELLOW = 4
    BLUE = 5
    PURPLE = 6
    GARBAGE = 7


@dataclass
class ChainInfo:
    """Result of one erase pass: which groups vanished and how large they were."""

    chain_count: int = 0
    group_sizes: list[int] = field(default_factory=list)
    colors: set[CellType] = field(default_factory=set)
    total_erased: int = 0
    erased: bool = False

    @property
    def color_count(self) -> int:
        """Number of distinct colours erased in this step."""
        return len(self.colors)