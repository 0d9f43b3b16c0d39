import asyncio
import logging
from typing import Optional

from askbox.models import ConversationTurn

from .client import GenerateClient
from .conversation import ConversationLog
from .domain import AnswerEvent, DomainEvent, ErrorEvent, QueryOutcome, QueryState
from .errors import AskboxError
from .history import HistoryStore
from .parser import parse_answer
from .response_adapter import extract_reply_text

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Kuch problem hua - dobara try karo."


class QueryPipeline:
    """
    Runs one question at a time: record it in history, show it, ask the
    endpoint and turn the reply into answer segments.

    When ``events_q`` is given, every log append and history change is also
    pushed onto it for the UI pump.
    """

    def __init__(
        self,
        history: HistoryStore,
        client: GenerateClient,
        log: Optional[ConversationLog] = None,
        events_q: Optional[asyncio.Queue] = None,
    ):
        self.history = history
        self.client = client
        self.log = log if log is not None else ConversationLog()
        self.events_q = events_q
        self.state = QueryState.IDLE
        self.draft = ""

    async def _emit(self, ev: DomainEvent):
        if self.events_q is not None:
            await self.events_q.put(ev)

    async def submit(self, text: Optional[str] = None) -> Optional[QueryOutcome]:
        """
        Submit ``text``, or the current draft when no text is given.

        Returns ``None`` without side effects when the input is blank or a
        previous submission is still pending. A rejected submission leaves
        the draft in place.
        """
        if self.state is QueryState.PENDING:
            logger.warning("Rejected submission while another query is pending")
            return None

        if text is None:
            text = self.draft
            self.draft = ""
        text = (text or "").strip()
        if not text:
            return None

        self.state = QueryState.PENDING
        try:
            return await self._run(text)
        finally:
            if self.state is QueryState.PENDING:
                self.state = QueryState.FAILED

    async def _run(self, text: str) -> QueryOutcome:
        try:
            entries = self.history.record(text)
        except OSError:
            logger.exception("Could not persist history")
            entries = self.history.entries
        await self._emit({'type': 'history', 'entries': entries})

        self.log.append(ConversationTurn.question(text))
        await self._emit({'type': 'question', 'text': text})

        try:
            document = await self.client.generate(text)
            segments = parse_answer(extract_reply_text(document))
        except AskboxError as exc:
            logger.error("Query failed: %s", exc)
            return await self._fail()
        except Exception:
            logger.exception("Unexpected failure while querying")
            return await self._fail()

        self.log.append(ConversationTurn.answer(segments))
        self.state = QueryState.FULFILLED
        outcome: AnswerEvent = {'type': 'answer', 'segments': segments}
        await self._emit(outcome)
        return outcome

    async def _fail(self) -> ErrorEvent:
        self.log.append(ConversationTurn.error(ERROR_MESSAGE))
        self.state = QueryState.FAILED
        outcome: ErrorEvent = {'type': 'error', 'message': ERROR_MESSAGE}
        await self._emit(outcome)
        return outcome

    async def clear_history(self) -> None:
        self.history.clear()
        await self._emit({'type': 'history', 'entries': []})

    def clear_conversation(self) -> None:
        self.log.clear()
