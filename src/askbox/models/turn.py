"""
Data models for the askbox conversation view.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class TurnKind(str, Enum):
    QUESTION = "question"
    ANSWER = "answer"
    ERROR = "error"


@dataclass(frozen=True)
class ConversationTurn:
    """
    A single entry of the conversation log.

    Question and error turns carry ``text``; answer turns carry ``segments``
    (possibly empty when the reply had no content).
    """
    kind: TurnKind
    text: Optional[str] = None
    segments: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def question(cls, text: str) -> "ConversationTurn":
        return cls(kind=TurnKind.QUESTION, text=text)

    @classmethod
    def answer(cls, segments) -> "ConversationTurn":
        return cls(kind=TurnKind.ANSWER, segments=tuple(segments))

    @classmethod
    def error(cls, message: str) -> "ConversationTurn":
        return cls(kind=TurnKind.ERROR, text=message)
