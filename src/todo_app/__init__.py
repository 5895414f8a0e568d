"""todo-app: a small command-line task tracker."""

__version__ = "1.0.0"
