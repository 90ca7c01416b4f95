"""CLI display implementation using Rich library."""

import json
import sys
from datetime import datetime
from typing import Any

import yaml
from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer, YamlLexer
from rich.console import Console
from rich.markup import escape

from .Display import Display


class CLIDisplay(Display):
    """CLI display using Rich library.

    Every line on stderr starts with a bracketed level tag.
    """

    def __init__(self):
        self.stderr_console = Console(file=sys.stderr, highlight=False, soft_wrap=True)

    def _line(self, tag: str, style: str, message: str) -> None:
        timestamp = datetime.now().strftime("%H:%M:%S")
        self.stderr_console.print(f"[dim]{timestamp}[/dim] [{style}]{escape(tag)}[/{style}] {escape(message)}")

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[INFO]", "blue", message)

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[OK]", "green", message)

    def error(self, message: str, **kwargs) -> None:
        self._line("[ERROR]", "red", message)
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[WARN]", "yellow", message)

    def info(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self._line("[INFO]", "blue", message)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "yaml")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
            lexer = YamlLexer()
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
            lexer = JsonLexer()

        if sys.stdout.isatty():
            text = highlight(text, lexer, Terminal256Formatter(style="monokai"))
        print(text, end="")
