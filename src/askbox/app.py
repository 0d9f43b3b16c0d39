"""
askbox terminal UI
"""

import argparse
import asyncio
import logging
from typing import Optional

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, Input, Static

from askbox.config import Settings, get_settings, setup_logging
from askbox.core import GenerateClient, HistoryStore, JsonFileStore, QueryPipeline
from askbox.core.domain import DomainEvent, QueryState
from askbox.screens import ConfirmClearScreen
from askbox.widgets import ChatLog, HistoryList, HistoryPicked, InputArea

logger = logging.getLogger(__name__)

WAITING_NOTICE = "Still waiting for the previous answer..."


class AskApp(App):
    CSS = """
#sidebar {
    width: 30;
    background: $panel;
    padding: 0 1;
}
#sidebar_header {
    height: 3;
}
#sidebar_title {
    width: 1fr;
    content-align: left middle;
}
#history_list {
    height: 1fr;
}
#chat_log {
    height: 1fr;
}
#input_row {
    height: 3;
}
#input_text {
    width: 1fr;
}
    """
    BINDINGS = [
        # priority so the focused Input does not swallow them
        Binding('ctrl+l', 'clear_chat', 'Clear chat', priority=True),
        Binding('ctrl+k', 'clear_history', 'Clear history', priority=True),
    ]

    def __init__(self, pipeline: QueryPipeline, events_q: asyncio.Queue):
        """Initialize the chat application around an already wired pipeline."""
        super().__init__()
        self.pipeline = pipeline
        self.event_q = events_q

    def compose(self) -> ComposeResult:
        with Horizontal():
            with Vertical(id="sidebar"):
                with Horizontal(id="sidebar_header"):
                    yield Static("Recent Search", id="sidebar_title")
                    yield Button("Clear", id="clear_history", variant="error")
                yield HistoryList(id="history_list", entries=self.pipeline.history.entries)
            with Vertical(id="main"):
                yield ChatLog(id="chat_log")
                with Horizontal(id="input_row"):
                    yield InputArea(id="input_text", placeholder="Ask me anything")
                    yield Button("Ask", id="ask", variant="primary")

    def on_mount(self) -> None:
        self.set_focus(self.query_one('#input_text', InputArea))
        self._pump()

    async def on_input_area_submit(self, message: InputArea.Submit) -> None:
        if self._busy():
            # InputArea already emptied itself; give the text back
            self._restore_input(message.value)
            return
        self.run_query(message.value)

    def on_input_changed(self, message: Input.Changed) -> None:
        if message.input.id == "input_text":
            self.pipeline.draft = message.value

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "ask":
            if self._busy():
                return
            # submit(None) takes the typed draft, so clearing must not reset it
            self.run_query(None)
            self._clear_input()
        elif event.button.id == "clear_history":
            self.action_clear_history()

    async def on_history_picked(self, message: HistoryPicked) -> None:
        if self._busy():
            return
        self.run_query(message.text)
        self._clear_input()
        self.pipeline.draft = ""

    def _busy(self) -> bool:
        if self.pipeline.state is not QueryState.PENDING:
            return False
        self.query_one("#chat_log", ChatLog).render_notice(WAITING_NOTICE)
        return True

    def _restore_input(self, value: str) -> None:
        input_text = self.query_one('#input_text', InputArea)
        input_text.value = value
        input_text.cursor_position = len(value)

    def _clear_input(self) -> None:
        input_text = self.query_one('#input_text', InputArea)
        with input_text.prevent(Input.Changed):
            input_text.value = ""

    def action_clear_chat(self) -> None:
        self.pipeline.clear_conversation()
        self.query_one("#chat_log", ChatLog).render_all(self.pipeline.log.all())

    def action_clear_history(self) -> None:
        if self.pipeline.history.entries:
            self._confirm_clear_history()

    @work(exclusive=True, group='confirm')
    async def _confirm_clear_history(self) -> None:
        count = len(self.pipeline.history.entries)
        if await self.push_screen_wait(ConfirmClearScreen(count)):
            await self.pipeline.clear_history()

    @work(group='infer')
    async def run_query(self, text: Optional[str]):
        await self.pipeline.submit(text)

    @work(exclusive=True, group='pump')
    async def _pump(self):
        """
        Event processing loop.

        Event types handled:
        - 'history': the saved history changed, refresh the sidebar
        - 'question': the user's question was appended to the log
        - 'answer': reply segments were appended
        - 'error': the query failed
        """
        chat_log = self.query_one("#chat_log", ChatLog)
        history_list = self.query_one("#history_list", HistoryList)

        while True:
            ev: DomainEvent = await self.event_q.get()
            type = ev.get("type", '')

            if type == 'history':
                history_list.set_entries(ev.get('entries', []))
            elif type == 'question':
                chat_log.render_question(ev.get('text', ''))
            elif type == 'answer':
                chat_log.render_answer(ev.get('segments', []))
            elif type == 'error':
                chat_log.render_error(ev.get('message', ''))


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ask a text-generation endpoint from the terminal")
    parser.add_argument("--url", help="endpoint URL (overrides ASKBOX_API_URL)")
    parser.add_argument("--storage", help="history file (overrides ASKBOX_STORAGE_PATH)")
    parser.add_argument("--log-file")
    parser.add_argument("--log-level")
    return parser.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    if args.url:
        settings.api_url = args.url
    if args.storage:
        settings.storage_path = args.storage
    if args.log_file:
        settings.log_file = args.log_file
    if args.log_level:
        settings.log_level = args.log_level
    return settings


def build_pipeline(settings: Settings, events_q: Optional[asyncio.Queue] = None) -> QueryPipeline:
    history = HistoryStore(
        JsonFileStore(settings.storage_path),
        key=settings.history_key,
        limit=settings.history_limit,
    )
    client = GenerateClient(settings.api_url, timeout=settings.request_timeout)
    return QueryPipeline(history, client, events_q=events_q)


def main(argv: Optional[list[str]] = None):
    settings = apply_overrides(get_settings(), parse_args(argv))
    setup_logging(settings)
    if not settings.api_url:
        logger.warning("ASKBOX_API_URL is not set; every question will fail")

    events_q: asyncio.Queue = asyncio.Queue()
    app = AskApp(build_pipeline(settings, events_q), events_q)
    app.run()


if __name__ == "__main__":
    main()
