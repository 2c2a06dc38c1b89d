"""
The interactive command loop.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

from flashquiz import constants
from flashquiz.exceptions import InvalidCountError
from flashquiz.models import FlashCard
from flashquiz.persistence import parse_decimal
from flashquiz.session import FlashcardSession

logger = logging.getLogger(__name__)


class Command(str, Enum):
    ADD = "add"
    REMOVE = "remove"
    IMPORT = "import"
    EXPORT = "export"
    ASK = "ask"
    EXIT = "exit"
    LOG = "log"
    HARDEST_CARD = "hardest card"
    RESET_STATS = "reset stats"


COMMANDS: Dict[str, Command] = {command.value: command for command in Command}


def parse_command(text: str) -> Optional[Command]:
    """Case-insensitive lookup of a full command phrase."""
    return COMMANDS.get(text.lower())


def parse_count(text: str) -> int:
    """
    Parse the answer to the "how many times" prompt.

    Raises:
        InvalidCountError: If `text` is not a plain decimal integer.
    """
    try:
        return parse_decimal(text)
    except ValueError as e:
        raise InvalidCountError(
            f"Expected a whole number of questions, got '{text}'.",
            original_exception=e,
        ) from e


class CommandInterpreter:
    """
    Reads one command per iteration and runs it against a FlashcardSession.

    Every command except `exit` ends with a blank separator line, whether it
    succeeded, was refused or was not recognised.
    """

    def __init__(self, session: FlashcardSession):
        self.session = session
        self.io = session.io
        self.store = session.store
        self._handlers: Dict[Command, Callable[[], None]] = {
            Command.ADD: self.add,
            Command.REMOVE: self.remove,
            Command.IMPORT: self.import_cards,
            Command.EXPORT: self.export_cards,
            Command.ASK: self.ask,
            Command.LOG: self.save_log,
            Command.HARDEST_CARD: self.hardest_card,
            Command.RESET_STATS: self.reset_stats,
        }

    def run(self) -> None:
        """Loop until the operator exits."""
        while self.step():
            pass

    def step(self) -> bool:
        """
        Read and run one command.

        Returns:
            bool: False once `exit` has run, True otherwise.
        """
        command = parse_command(self.io.prompt(constants.PROMPT_ACTION))
        if command is Command.EXIT:
            self.exit()
            return False

        if command is None:
            self.io.say(constants.MSG_UNKNOWN_ACTION)
        else:
            logger.debug(f"Running command '{command.value}'")
            self._handlers[command]()
        self.io.say("")
        return True

    # -----------------------------------------------------------------------
    # Card editing
    # -----------------------------------------------------------------------

    def add(self) -> None:
        term = self.io.prompt(constants.PROMPT_TERM)
        if self.store.find_by_term(term) is not None:
            self.io.say(constants.MSG_TERM_EXISTS.format(term=term))
            return

        definition = self.io.prompt(constants.PROMPT_DEFINITION)
        if self.store.find_by_definition(definition) is not None:
            self.io.say(
                constants.MSG_DEFINITION_EXISTS.format(definition=definition)
            )
            return

        self.store.add(FlashCard(term=term, definition=definition))
        self.io.say(
            constants.MSG_CARD_ADDED.format(term=term, definition=definition)
        )

    def remove(self) -> None:
        term = self.io.prompt(constants.PROMPT_REMOVE)
        card = self.store.find_by_term(term)
        if card is None:
            self.io.say(constants.MSG_CARD_MISSING.format(term=term))
            return
        self.store.remove(card)
        self.io.say(constants.MSG_CARD_REMOVED)

    # -----------------------------------------------------------------------
    # Files
    # -----------------------------------------------------------------------

    def import_cards(self) -> None:
        self.session.import_from(self.io.prompt(constants.PROMPT_FILE_NAME))

    def export_cards(self) -> None:
        self.session.export_to(self.io.prompt(constants.PROMPT_FILE_NAME))

    def save_log(self) -> None:
        self.session.save_transcript(
            self.io.prompt(constants.PROMPT_FILE_NAME)
        )

    # -----------------------------------------------------------------------
    # Quiz & statistics
    # -----------------------------------------------------------------------

    def ask(self) -> None:
        count = parse_count(self.io.prompt(constants.PROMPT_ASK_COUNT))
        if count > 0 and self.store.is_empty:
            self.io.say(constants.MSG_NO_CARDS_TO_ASK)
            return
        self.session.quiz.ask(count)

    def hardest_card(self) -> None:
        hardest = self.store.hardest_cards()
        if not hardest:
            self.io.say(constants.MSG_NO_ERRORS)
        elif len(hardest) == 1:
            card = hardest[0]
            self.io.say(
                constants.MSG_HARDEST_CARD.format(
                    term=card.term, errors=card.error_count
                )
            )
        else:
            terms = ", ".join(f'"{card.term}"' for card in hardest)
            self.io.say(
                constants.MSG_HARDEST_CARDS.format(
                    terms=terms, errors=hardest[0].error_count
                )
            )

    def reset_stats(self) -> None:
        self.store.reset_stats()
        self.io.say(constants.MSG_STATS_RESET)

    def exit(self) -> None:
        self.io.say(constants.MSG_BYE)
        self.session.export_pending()
