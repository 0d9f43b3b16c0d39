"""
Events emitted by the query pipeline and consumed by the UI pump.
"""

from enum import Enum
from typing import Literal, TypedDict, Union


class QueryState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    FULFILLED = "fulfilled"
    FAILED = "failed"


class QuestionEvent(TypedDict):
    type: Literal['question']
    text: str


class AnswerEvent(TypedDict):
    type: Literal['answer']
    segments: list[str]


class ErrorEvent(TypedDict):
    type: Literal['error']
    message: str


class HistoryEvent(TypedDict):
    type: Literal['history']
    entries: list[str]


QueryOutcome = Union[AnswerEvent, ErrorEvent]

DomainEvent = Union[
    QuestionEvent, AnswerEvent, ErrorEvent, HistoryEvent,
]
