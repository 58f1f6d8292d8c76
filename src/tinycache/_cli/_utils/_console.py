from enum import Enum
from typing import Optional

import click


class LogLevel(str, Enum):
    """Console message levels and their styling."""

    INFO = ""
    SUCCESS = "green"
    WARNING = "yellow"
    ERROR = "red"
    HINT = "cyan"


class ConsoleLogger:
    """Singleton writing user-facing messages to the terminal.

    Plain output (the cache service response) goes to stdout untouched.
    Warnings and errors go to stderr.
    """

    _instance: Optional["ConsoleLogger"] = None

    def __new__(cls) -> "ConsoleLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @classmethod
    def get_instance(cls) -> "ConsoleLogger":
        return cls()

    def log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        err = level in (LogLevel.WARNING, LogLevel.ERROR)
        if level.value:
            click.secho(message, fg=level.value, err=err)
        else:
            click.echo(message, err=err)

    def raw(self, text: str) -> None:
        click.echo(text, nl=False)

    def info(self, message: str) -> None:
        self.log(message, LogLevel.INFO)

    def success(self, message: str) -> None:
        self.log(message, LogLevel.SUCCESS)

    def warning(self, message: str) -> None:
        self.log(f"Warning: {message}", LogLevel.WARNING)

    def hint(self, message: str) -> None:
        self.log(message, LogLevel.HINT)

    def error(self, message: str) -> None:
        self.log(f"Error: {message}", LogLevel.ERROR)
