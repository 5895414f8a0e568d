"""Dialog screens for the task browser."""

from textual.app import ComposeResult
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Label, Static

from todo_app.models import Task


class ConfirmDeleteDialog(ModalScreen[bool]):
    """Modal dialog asking the user to confirm deleting a task."""

    CSS = """
    ConfirmDeleteDialog {
        align: center middle;
    }

    ConfirmDeleteDialog > Vertical {
        width: 60;
        height: auto;
        border: thick $error;
        background: $surface;
        padding: 1 2;
    }

    ConfirmDeleteDialog #title {
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
    }

    ConfirmDeleteDialog Center {
        margin-top: 1;
    }

    ConfirmDeleteDialog Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        ("y", "confirm", "Delete"),
        ("n", "cancel", "Keep"),
        ("escape", "cancel", "Keep"),
    ]

    def __init__(self, task: Task) -> None:
        """Initialize dialog with the task about to be deleted."""
        super().__init__()
        self.task_to_delete = task

    def compose(self) -> ComposeResult:
        """Create dialog widgets."""
        with Vertical():
            yield Static("Delete Task", id="title")
            yield Label(
                f"Delete task {self.task_to_delete.id} '{self.task_to_delete.name}'?",
                id="message",
            )
            with Center():
                yield Button("Delete", variant="error", id="delete")
                yield Button("Keep", variant="default", id="keep")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        self.dismiss(event.button.id == "delete")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)
