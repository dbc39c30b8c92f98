from rich.console import Console
from rich.text import Text

from devcycle.output.styles import Style


class Logger:
    def __init__(self, console: Console):
        self._console = console
        self._log: Text | None = None

    def log(self, text: Text):
        if self._log is None:
            self._log = text
            return
        self._log.append(Text('\n', style=Style.regular).append(text))

    def flush(self):
        if self._log:
            self._console.print(self._log + Text(' ', style=Style.regular))
        self._log = None
