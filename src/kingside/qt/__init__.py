"""PyQt6 adapter for front ends built on Qt."""

from kingside.qt.bridge import GameBridge

__all__ = ["GameBridge"]
