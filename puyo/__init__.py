"""Puyo Puyo field simulation: tsumo placement, chains, gravity, scoring and a random AI."""

__version__ = "0.1.0"
__all__ = ["cells", "field", "ai"]