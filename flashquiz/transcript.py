"""
Transcript of everything printed to and typed by the operator.
"""

import logging
from typing import List

from .persistence import DEFAULT_ENCODING, PathLike, write_lines

logger = logging.getLogger(__name__)


class Transcript:
    """
    Append-only log of session lines in chronological order.

    The log is never cleared: saving it twice writes the full history each
    time.
    """

    def __init__(self):
        self._lines: List[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def record(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def dump(self, path: PathLike, encoding: str = DEFAULT_ENCODING) -> int:
        """
        Write every line, newline-terminated, to `path`.

        Returns:
            int: The number of lines written.

        Raises:
            CardFileWriteError: If the file cannot be written.
        """
        # Snapshot so the write is not affected by lines recorded meanwhile.
        written = write_lines(
            path, (f"{line}\n" for line in list(self._lines)), encoding
        )
        logger.info(f"Saved {written} transcript lines to {path}")
        return written
