import os
import sys
from typing import Optional, Protocol, TextIO


class OutputService(Protocol):
    """Plain-text output tagged by severity"""

    def write(self, message: str) -> None: ...

    def write_line(self, message: str = "") -> None: ...

    def write_info(self, message: str) -> None: ...

    def write_info_verbose(self, message: str) -> None: ...

    def write_success(self, message: str) -> None: ...

    def write_warning(self, message: str) -> None: ...

    def write_error(self, message: str) -> None: ...


class Ansi:
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    MAGENTA = "\033[35m"


class ConsoleOutputService:
    """Colored console output"""

    def __init__(self, stream: Optional[TextIO] = None, use_color: bool = True):
        self.stream = stream if stream is not None else sys.stdout
        # https://no-color.org
        self.use_color = use_color and not os.getenv('NO_COLOR')

    def _colored(self, message: str, color: str) -> None:
        if self.use_color:
            message = f"{color}{message}{Ansi.RESET}"
        self.write_line(message)

    def write(self, message: str) -> None:
        self.stream.write(message)
        self.stream.flush()

    def write_line(self, message: str = "") -> None:
        self.stream.write(message + "\n")
        self.stream.flush()

    def write_info(self, message: str) -> None:
        self._colored(message, Ansi.YELLOW)

    def write_info_verbose(self, message: str) -> None:
        self._colored(message, Ansi.MAGENTA)

    def write_success(self, message: str) -> None:
        self._colored(message, Ansi.GREEN)

    def write_warning(self, message: str) -> None:
        self._colored(message, Ansi.YELLOW)

    def write_error(self, message: str) -> None:
        self._colored(message, Ansi.RED)
