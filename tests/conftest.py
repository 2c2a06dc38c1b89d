import logging
import os
import random
from typing import Callable, List, Optional
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from flashquiz.config import Settings
from flashquiz.models import FlashCard
from flashquiz.session import FlashcardSession
from flashquiz.store import CardStore


# each test runs on cwd to its temp dir
@pytest.fixture(autouse=True)
def go_to_tmpdir(tmp_path, monkeypatch):
    """
    Run every test inside its own temporary directory, with no FLASHQUIZ_*
    variables leaking in from the environment and a clean `flashquiz` logger.
    """
    for name in list(os.environ):
        if name.startswith("FLASHQUIZ_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("flashquiz")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def scripted_console() -> Callable[..., MagicMock]:
    """
    Build a mock rich Console whose `input` returns the given answers in
    order. Running out of answers raises StopIteration, which makes a test
    that reads more input than expected fail loudly.
    """

    def _make(*answers: str) -> MagicMock:
        console = MagicMock(spec=Console)
        console.input.side_effect = list(answers)
        return console

    return _make


@pytest.fixture
def sample_cards() -> List[FlashCard]:
    return [
        FlashCard(term="France", definition="Paris"),
        FlashCard(term="Japan", definition="Tokyo", error_count=2),
        FlashCard(term="Peru", definition="Lima", error_count=1),
    ]


@pytest.fixture
def make_session(scripted_console) -> Callable[..., FlashcardSession]:
    """
    Create a FlashcardSession driven by scripted input.

    Parameters:
        *answers: Lines the operator "types", in order.
        cards: Optional initial cards.
        seed: Seed for the quiz card selection.
    """

    def _make(
        *answers: str,
        cards: Optional[List[FlashCard]] = None,
        seed: int = 0,
    ) -> FlashcardSession:
        return FlashcardSession(
            settings=Settings(),
            console=scripted_console(*answers),
            store=CardStore(cards),
            rng=random.Random(seed),
        )

    return _make


@pytest.fixture
def printed_lines() -> Callable[[FlashcardSession], List[str]]:
    """Lines a scripted session printed, in order, without the operator's input."""

    def _lines(session: FlashcardSession) -> List[str]:
        return [c.args[0] for c in session.io.console.print.call_args_list]

    return _lines
