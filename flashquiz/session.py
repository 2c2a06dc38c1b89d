"""
Session state shared by the startup options and the command interpreter.
"""

import logging
import random
from pathlib import Path
from typing import Optional, Union

from rich.console import Console

from . import constants
from .config import Settings
from .console_io import ConsoleIO
from .exceptions import CardFileNotFoundError
from .persistence import export_cards, import_cards
from .quiz import QuizEngine
from .store import CardStore
from .transcript import Transcript

logger = logging.getLogger(__name__)


class FlashcardSession:
    """
    Everything one run of the program works on: the card store, the
    transcript, the console and the export path captured at startup.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        console: Optional[Console] = None,
        store: Optional[CardStore] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or Settings()
        self.store = store if store is not None else CardStore()
        self.transcript = Transcript()
        self.io = ConsoleIO(self.transcript, console=console)
        self.pending_export_path: Optional[str] = None
        if rng is None:
            rng = random.Random(self.settings.random_seed)
        self.quiz = QuizEngine(self.store, self.io, rng=rng)

    @property
    def encoding(self) -> str:
        return self.settings.file_encoding

    def import_from(self, path: Union[str, Path]) -> Optional[int]:
        """
        Import the card file at `path` and report how many cards it held.

        A missing file is reported and skipped.

        Returns:
            The reported card count, or None when the file was not found.

        Raises:
            MalformedCardFileError: If the file cannot be decoded.
        """
        try:
            count = import_cards(self.store, path, encoding=self.encoding)
        except CardFileNotFoundError:
            logger.warning(f"Import skipped, no such file: {path}")
            self.io.say(constants.MSG_FILE_NOT_FOUND)
            return None
        self.io.say(constants.MSG_CARDS_LOADED.format(count=count))
        return count

    def export_to(self, path: Union[str, Path]) -> int:
        """
        Export every card to `path` and report the count.

        Raises:
            CardFileWriteError: If the file cannot be written.
        """
        count = export_cards(self.store, path, encoding=self.encoding)
        self.io.say(constants.MSG_CARDS_SAVED.format(count=count))
        return count

    def save_transcript(self, path: Union[str, Path]) -> int:
        """
        Write the transcript to `path` and report it.

        Raises:
            CardFileWriteError: If the file cannot be written.
        """
        written = self.transcript.dump(path, encoding=self.encoding)
        self.io.say(constants.MSG_LOG_SAVED)
        return written

    def export_pending(self) -> Optional[int]:
        """Run the export requested at startup, if there was one."""
        if self.pending_export_path is None:
            return None
        logger.info(f"Exporting to startup path {self.pending_export_path}")
        return self.export_to(self.pending_export_path)
