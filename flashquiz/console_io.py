"""
Line-based console I/O that records every line in the session transcript.
"""

from typing import Optional

from rich.console import Console

from .transcript import Transcript


class ConsoleIO:
    """
    Prints and reads whole lines through a rich Console.

    Output is printed verbatim: card text may contain square brackets, colons
    or long runs of words, so markup, emoji codes, highlighting and wrapping
    are all disabled.
    """

    def __init__(
        self, transcript: Transcript, console: Optional[Console] = None
    ):
        self.transcript = transcript
        self.console = console or Console()

    def say(self, line: str) -> None:
        """Print one line and record it."""
        self.console.print(
            line, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
        self.transcript.record(line)

    def read(self) -> str:
        """Read one line of operator input and record it."""
        line = self.console.input()
        self.transcript.record(line)
        return line

    def prompt(self, question: str) -> str:
        """Print `question` on its own line, then read the answer."""
        self.say(question)
        return self.read()
