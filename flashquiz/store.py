"""
In-memory, insertion-ordered collection of flashcards.
"""

import logging
import random
from typing import Iterator, List, Optional

from .exceptions import EmptyStoreError
from .models import FlashCard

logger = logging.getLogger(__name__)


class CardStore:
    """
    Ordered collection of FlashCard objects.

    No two cards may share a term and no two cards may share a definition.
    `add` does not check this; callers look the card up first. Lookups are
    exact and case-sensitive, and the first match in insertion order wins.
    """

    def __init__(self, cards: Optional[List[FlashCard]] = None):
        self._cards: List[FlashCard] = list(cards or [])

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[FlashCard]:
        return iter(self._cards)

    @property
    def is_empty(self) -> bool:
        return not self._cards

    def find_by_term(self, term: str) -> Optional[FlashCard]:
        """Return the first card whose term equals `term`, if any."""
        return next((c for c in self._cards if c.term == term), None)

    def find_by_definition(self, definition: str) -> Optional[FlashCard]:
        """Return the first card whose definition equals `definition`, if any."""
        return next(
            (c for c in self._cards if c.definition == definition), None
        )

    def add(self, card: FlashCard) -> None:
        self._cards.append(card)
        logger.debug(f"Added card '{card.term}' ({len(self._cards)} total)")

    def remove(self, card: FlashCard) -> None:
        """Remove `card` by identity. Raises ValueError if it is not stored."""
        for index, stored in enumerate(self._cards):
            if stored is card:
                del self._cards[index]
                logger.debug(f"Removed card '{card.term}'")
                return
        raise ValueError(f"Card '{card.term}' is not in the store.")

    def clear(self) -> None:
        self._cards.clear()

    def random_card(self, rng: random.Random) -> FlashCard:
        """
        Draw one card uniformly at random from the current contents.

        Raises:
            EmptyStoreError: If the store holds no cards.
        """
        if not self._cards:
            raise EmptyStoreError("Cannot draw a card from an empty store.")
        return rng.choice(self._cards)

    def max_error_count(self) -> int:
        """Highest error count in the store, 0 when the store is empty."""
        return max((c.error_count for c in self._cards), default=0)

    def hardest_cards(self) -> List[FlashCard]:
        """
        Cards sharing the highest non-zero error count, in store order.

        Returns an empty list when no card has any errors.
        """
        max_errors = self.max_error_count()
        if max_errors == 0:
            return []
        return [c for c in self._cards if c.error_count == max_errors]

    def reset_stats(self) -> None:
        """Set every card's error count back to zero."""
        for card in self._cards:
            card.error_count = 0
        logger.info(f"Reset error counts for {len(self._cards)} cards")
