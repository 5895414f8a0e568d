"""Interactive task browser."""

from textual.app import App, ComposeResult
from textual.widgets import DataTable, Footer, Header, Static

from todo_app.errors import TodoError
from todo_app.formatting import format_cell
from todo_app.models import TASK_COLUMNS, TaskStatus
from todo_app.screens import ConfirmDeleteDialog
from todo_app.service import TodoService

# Status filters cycled with "f"; None shows every task.
FILTERS: tuple[TaskStatus | None, ...] = (
    None,
    TaskStatus.TODO,
    TaskStatus.IN_PROGRESS,
    TaskStatus.COMPLETE,
)


class TaskBrowserApp(App):
    """A Textual app listing tasks, with shortcuts to complete or delete them."""

    TITLE = "TodoApp"

    BINDINGS = [
        ("c", "complete_task", "Complete"),
        ("d", "delete_task", "Delete"),
        ("f", "cycle_filter", "Filter"),
        ("q", "quit", "Quit"),
    ]

    CSS = """
    #status-bar {
        height: 1;
        width: 100%;
        background: $surface;
        color: $warning;
        padding: 0 1;
    }
    """

    def __init__(self, service: TodoService) -> None:
        """Initialize the browser on an already loaded service."""
        super().__init__()
        self.service = service
        self._filter_index = 0
        self._row_task_ids: list[int] = []

    @property
    def status_filter(self) -> TaskStatus | None:
        return FILTERS[self._filter_index]

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()
        yield DataTable(id="task-table", cursor_type="row", zebra_stripes=True)
        yield Static("", id="status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Set up the table columns and show the tasks."""
        table = self.query_one("#task-table", DataTable)
        for column in TASK_COLUMNS:
            table.add_column(column.header, width=column.width, key=column.attr)
        self._load_tasks()
        table.focus()

    def _load_tasks(self, select_task_id: int | None = None) -> None:
        """Refill the table from the service, keeping the cursor on a task if possible."""
        status = self.status_filter
        tasks = self.service.list_tasks(status.value if status else None)

        table = self.query_one("#task-table", DataTable)
        table.clear()
        self._row_task_ids = []
        for task in tasks:
            table.add_row(*(format_cell(task, column) for column in TASK_COLUMNS))
            self._row_task_ids.append(task.id)

        if select_task_id in self._row_task_ids:
            table.move_cursor(row=self._row_task_ids.index(select_task_id))

        label = status.label if status else "All"
        self.query_one("#status-bar", Static).update(f"Filter: {label} ({len(tasks)} task(s))")

    def _selected_task_id(self) -> int | None:
        table = self.query_one("#task-table", DataTable)
        row = table.cursor_row
        if not self._row_task_ids or row < 0 or row >= len(self._row_task_ids):
            return None
        return self._row_task_ids[row]

    def action_complete_task(self) -> None:
        """Mark the highlighted task as complete."""
        task_id = self._selected_task_id()
        if task_id is None:
            return
        try:
            task = self.service.complete_task(task_id)
        except TodoError as exc:
            self.notify(exc.message, severity="error")
            return
        self.notify(f"Task '{task.name}' marked as complete")
        self._load_tasks(select_task_id=task_id)

    def action_delete_task(self) -> None:
        """Ask for confirmation, then delete the highlighted task."""
        task_id = self._selected_task_id()
        if task_id is None:
            return
        task = next((t for t in self.service.list_tasks() if t.id == task_id), None)
        if task is None:
            return

        def on_confirm(confirmed: bool | None) -> None:
            if confirmed:
                self._delete(task_id)

        self.push_screen(ConfirmDeleteDialog(task), on_confirm)

    def _delete(self, task_id: int) -> None:
        try:
            task = self.service.delete_task(task_id)
        except TodoError as exc:
            self.notify(exc.message, severity="error")
            return
        self.notify(f"Task '{task.name}' deleted")
        self._load_tasks()

    def action_cycle_filter(self) -> None:
        """Show the next status filter."""
        self._filter_index = (self._filter_index + 1) % len(FILTERS)
        self._load_tasks()
