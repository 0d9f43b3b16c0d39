"""
Scrolling view of the conversation, one bubble per turn.
"""
from rich.markup import escape
from textual.widgets import RichLog

from askbox.models import ConversationTurn, TurnKind

PLACEHOLDER = "What are you working on?"


class ChatLog(RichLog):
    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("markup", True)
        kwargs.setdefault("wrap", True)
        super().__init__(**kwargs)
        self._placeholder_shown = False

    def on_mount(self) -> None:
        self.show_placeholder()

    def show_placeholder(self) -> None:
        self.clear()
        self.write(f"[dim]{PLACEHOLDER}[/dim]")
        self._placeholder_shown = True

    def _drop_placeholder(self) -> None:
        if self._placeholder_shown:
            self.clear()
            self._placeholder_shown = False

    def render_question(self, text: str) -> None:
        self._drop_placeholder()
        self.write(f"[bold cyan]you:[/bold cyan] {escape(text)}")

    def render_answer(self, segments: list[str]) -> None:
        self._drop_placeholder()
        if not segments:
            self.write("[dim](empty reply)[/dim]")
        for segment in segments:
            self.write(f"  • {escape(segment)}")
        self.write("")

    def render_error(self, message: str) -> None:
        self._drop_placeholder()
        self.write(f"[bold red]{escape(message)}[/bold red]")
        self.write("")

    def render_notice(self, text: str) -> None:
        self._drop_placeholder()
        self.write(f"[dim]{escape(text)}[/dim]")

    def render_turn(self, turn: ConversationTurn) -> None:
        if turn.kind is TurnKind.QUESTION:
            self.render_question(turn.text or "")
        elif turn.kind is TurnKind.ANSWER:
            self.render_answer(list(turn.segments))
        else:
            self.render_error(turn.text or "")

    def render_all(self, turns) -> None:
        if not turns:
            self.show_placeholder()
            return
        self.clear()
        for turn in turns:
            self.render_turn(turn)
