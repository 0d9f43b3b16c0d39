"""
Modal screens for the askbox application.
"""

from textual import on
from textual.widgets import Static, OptionList
from textual.widgets.option_list import Option
from textual.containers import Center, Vertical
from textual.screen import ModalScreen


class ConfirmClearScreen(ModalScreen[bool]):
    """Asks before wiping the saved question history."""
    CSS = """
#panel {
    width: 60%;
    max-width: 80;
    border: round $error;
    padding: 1 2;
}
#clear_options {
    margin-top: 1;
}
#panel OptionList {
    border: none;
    background: transparent;
}
    """
    BINDINGS = [
        ('1', 'choose_yes', 'yes'),
        ('2', 'choose_no', 'no'),
        ('escape', 'choose_no', 'cancel'),
    ]

    def __init__(self, count: int) -> None:
        """
        Args:
            count (int): number of saved entries that would be removed
        """
        super().__init__()
        self.count = count

    def compose(self):
        yield Center(
                Vertical(
                    Static("[bold]Clear recent searches?[/bold]\n", markup=True, classes="title"),
                    Static(f"{self.count} saved question(s) will be removed. The current chat stays on screen.\n"),
                    OptionList(
                        Option("1. Yes, clear", id="yes"),
                        Option("2. No, keep",   id="no"),
                        id="clear_options",
                    ),
                ),
                id="panel",
        )

    def on_mount(self) -> None:
        ol = self.query_one(OptionList)
        ol.focus()
        ol.index = 1

    @on(OptionList.OptionSelected)
    def on_option_selected(self, event: OptionList.OptionSelected) -> None:
        self.dismiss(event.option_id == 'yes')

    def action_choose_yes(self) -> None:
        self.dismiss(True)

    def action_choose_no(self) -> None:
        self.dismiss(False)
