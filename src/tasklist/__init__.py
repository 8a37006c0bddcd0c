"""TaskList: project/task tracker with a console REPL and a small HTTP API."""

__version__ = "0.1.0"
