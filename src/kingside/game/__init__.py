"""Game layer - turn tracking, guarded move submission, status events.

Quick start::

    from kingside.game import GameSession
    from kingside.core import square_from_algebraic as sq

    session = GameSession()
    pawn = session.piece_at(sq("e2"))
    session.submit_move(pawn, sq("e2"), sq("e4"))
"""

from kingside.game.config import RulesConfig
from kingside.game.session import GameEvents, GameSession

__all__ = [
    "GameEvents",
    "GameSession",
    "RulesConfig",
]
