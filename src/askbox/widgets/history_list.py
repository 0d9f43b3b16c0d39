from rich.text import Text
from textual import on
from textual.widgets import OptionList
from textual.widgets.option_list import Option
from textual.message import Message

EMPTY_LABEL = "No recent searches"


class HistoryPicked(Message):
    def __init__(self, text: str) -> None:
        super().__init__()
        self.text = text


class HistoryList(OptionList):
    """Sidebar list of recent questions, most recent first."""

    def __init__(self, id: str, entries: list[str] | None = None) -> None:
        self.entries: list[str] = list(entries or [])
        super().__init__(*self._history_options(self.entries), id=id)

    @staticmethod
    def _history_options(entries: list[str]) -> list[Option]:
        if not entries:
            return [Option(EMPTY_LABEL, disabled=True)]
        return [Option(Text(entry)) for entry in entries]

    def set_entries(self, entries: list[str]) -> None:
        self.entries = list(entries)
        self.clear_options()
        self.add_options(self._history_options(self.entries))

    @on(OptionList.OptionSelected)
    def on_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        if not self.entries:
            return
        self.post_message(HistoryPicked(self.entries[event.option_index]))
