"""Flashquiz - an interactive term/definition flashcard trainer."""

from .models import FlashCard
from .store import CardStore
from .transcript import Transcript
from .session import FlashcardSession
from .persistence import export_cards, import_cards

__all__ = [
    "FlashCard",
    "CardStore",
    "Transcript",
    "FlashcardSession",
    "export_cards",
    "import_cards",
]
