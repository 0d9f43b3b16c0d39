"""
Append-only log of conversation turns rendered by the chat view.
"""
from askbox.models import ConversationTurn


class ConversationLog:
    def __init__(self) -> None:
        self._turns: list[ConversationTurn] = []

    def append(self, turn: ConversationTurn) -> None:
        self._turns.append(turn)

    def all(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    def clear(self) -> None:
        """Reset the log to empty. History is not affected."""
        self._turns = []

    def __len__(self) -> int:
        return len(self._turns)
