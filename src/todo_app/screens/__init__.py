"""Screen modules for the task browser."""

from todo_app.screens.dialogs import ConfirmDeleteDialog

__all__ = ["ConfirmDeleteDialog"]
