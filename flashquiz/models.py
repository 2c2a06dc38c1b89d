"""
Data model for a single flashcard.
"""

from pydantic import BaseModel, ConfigDict, Field


class FlashCard(BaseModel):
    """
    A term/definition pair with the number of wrong quiz answers given for it.

    Cards are mutable: import overwrites all three fields of a matching card
    in place, and the quiz increments `error_count`.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    term: str = Field(..., description="Card front; unique within a store.")
    definition: str = Field(
        ..., description="Card back; unique within a store."
    )
    error_count: int = Field(
        default=0,
        ge=0,
        description="Number of wrong answers given for this card.",
    )

    def record_error(self) -> None:
        """Count one more wrong answer."""
        self.error_count += 1

    def to_lines(self) -> tuple[str, str, str]:
        """Return the three card-file lines for this card."""
        return self.term, self.definition, str(self.error_count)
