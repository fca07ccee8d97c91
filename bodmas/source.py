import logging
import sys

from .config import SOURCE_CONFIG
from .errors import InputError, InputErrorKind

logger = logging.getLogger(__name__)


class LineSource:
    """Hands out one non-blank line at a time from a text stream.

    `read_line()` returns the line with its '\\n' (a last line without one is
    returned as it is) and the empty string once input is exhausted. Blank
    and whitespace-only lines are skipped. On a terminal, lines are read with
    `input()` behind a prompt.
    """

    def __init__(self, stream=None, prompt=SOURCE_CONFIG["prompt"], interactive=None,
                 max_line_size=SOURCE_CONFIG["max_line_size"]):
        self.stream = stream if stream is not None else sys.stdin
        if interactive is None:
            interactive = self.stream.isatty()
        self.interactive = interactive
        self.prompt = prompt
        self.max_line_size = max_line_size
        self.line_number = 0
        self.eof = False

    def _read(self):
        if not self.interactive:
            return self.stream.readline()
        try:
            return input(self.prompt) + "\n"
        except EOFError:
            return ""

    def read_line(self):
        while not self.eof:
            line = self._read()
            if not line:
                self.eof = True
                break
            self.line_number += 1
            if line.isspace():
                # ignore blank and empty lines
                continue
            if len(line.rstrip("\r\n")) > self.max_line_size:
                logger.debug("line %d: %d characters", self.line_number, len(line))
                raise InputError(InputErrorKind.LINE_TOO_LONG,
                                 f"line too long (more than {self.max_line_size} characters)")
            return line
        return ""
