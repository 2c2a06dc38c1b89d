"""
Quiz rounds: ask for the definition of random cards and score the answers.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from . import constants
from .console_io import ConsoleIO
from .models import FlashCard
from .store import CardStore

logger = logging.getLogger(__name__)


@dataclass
class AnswerResult:
    """Outcome of one quiz answer."""

    card: FlashCard
    answer: str
    matched_card: Optional[FlashCard]

    @property
    def is_correct(self) -> bool:
        return (
            self.matched_card is not None
            and self.matched_card.term == self.card.term
        )

    @property
    def message(self) -> str:
        if self.is_correct:
            return constants.MSG_CORRECT
        if self.matched_card is None:
            return constants.MSG_WRONG.format(definition=self.card.definition)
        return constants.MSG_WRONG_OTHER_CARD.format(
            definition=self.card.definition,
            other_term=self.matched_card.term,
        )


def grade_answer(store: CardStore, card: FlashCard, answer: str) -> AnswerResult:
    """
    Score `answer` as the definition of `card` and update its error count.

    The answer is resolved against every definition in the store, so a wrong
    answer that belongs to another card can name that card.
    """
    result = AnswerResult(
        card=card,
        answer=answer,
        matched_card=store.find_by_definition(answer),
    )
    if not result.is_correct:
        card.record_error()
    return result


class QuizEngine:
    """
    Runs quiz rounds against a CardStore.

    Each round draws from the store as it is at that moment.
    """

    def __init__(
        self,
        store: CardStore,
        io: ConsoleIO,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.io = io
        self.rng = rng or random.Random()

    def ask_one(self) -> AnswerResult:
        """
        Ask about one random card and report the verdict.

        Raises:
            EmptyStoreError: If the store holds no cards.
        """
        card = self.store.random_card(self.rng)
        answer = self.io.prompt(constants.PROMPT_QUESTION.format(term=card.term))
        result = grade_answer(self.store, card, answer)
        self.io.say(result.message)
        return result

    def ask(self, count: int) -> int:
        """
        Run `count` rounds; zero or a negative count runs none.

        Returns:
            int: The number of correct answers.
        """
        correct = 0
        for _ in range(count):
            if self.ask_one().is_correct:
                correct += 1
        logger.info(f"Quiz finished: {correct}/{max(count, 0)} correct")
        return correct
