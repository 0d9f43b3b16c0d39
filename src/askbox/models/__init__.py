"""
Data models for the askbox application.
"""
from .turn import ConversationTurn, TurnKind

__all__ = ["ConversationTurn", "TurnKind"]
