"""
Reading and writing the line-oriented card file format.

A card file holds three lines per card (term, definition, error count) with
no header and no separators. Files are written record by record: the first
record truncates the destination and every later record is appended, so a
single export or transcript dump always produces one clean file.
"""

import logging
import re
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from .constants import LINES_PER_CARD
from .exceptions import (
    CardFileNotFoundError,
    CardFileWriteError,
    MalformedCardFileError,
)
from .models import FlashCard
from .store import CardStore

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
CardRecord = Tuple[str, str, int]

DEFAULT_ENCODING = "utf-8"

DECIMAL_INTEGER = re.compile(r"-?[0-9]+")
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def write_or_append(
    path: PathLike, index: int, text: str, encoding: str = DEFAULT_ENCODING
) -> None:
    """
    Write `text` to `path`, truncating the file when `index` is 0 and
    appending otherwise.

    Raises:
        CardFileWriteError: If the file cannot be written.
    """
    mode = "w" if index == 0 else "a"
    try:
        with open(path, mode, encoding=encoding) as f:
            f.write(text)
    except OSError as e:
        logger.error(f"Could not write to file {path}: {e}")
        raise CardFileWriteError(
            f"Failed to write to {path}: {e}", original_exception=e
        ) from e


def write_lines(
    path: PathLike, entries: Iterable[str], encoding: str = DEFAULT_ENCODING
) -> int:
    """
    Write each entry with write_or_append and return how many were written.

    Nothing is written, and the file is left untouched, when `entries` is
    empty.
    """
    count = 0
    for index, entry in enumerate(entries):
        write_or_append(path, index, entry, encoding=encoding)
        count += 1
    return count


def encode_card(card: FlashCard) -> str:
    """Encode one card as its three newline-terminated lines."""
    return "".join(f"{line}\n" for line in card.to_lines())


def export_cards(
    store: CardStore, path: PathLike, encoding: str = DEFAULT_ENCODING
) -> int:
    """
    Save every card in `store` to `path` in store order.

    Returns:
        int: The number of cards written. With an empty store the file is not
        created and 0 is returned.
    """
    logger.info(f"Exporting {len(store)} cards to {path}")
    return write_lines(
        path, (encode_card(card) for card in store), encoding=encoding
    )


def parse_decimal(raw: str) -> int:
    """
    Convert a plain decimal integer, optionally negative, to int.

    Unlike int(), surrounding whitespace, a leading "+", digit separators
    and non-ASCII digits are refused.

    Raises:
        ValueError: If `raw` is not a plain decimal integer.
    """
    if not DECIMAL_INTEGER.fullmatch(raw):
        raise ValueError(f"invalid decimal integer: '{raw}'")
    return int(raw)


def split_lines(text: str) -> List[str]:
    """
    Split `text` on "\\n", "\\r\\n" and "\\r" only.

    Other characters str.splitlines() treats as breaks (form feed, U+2028,
    ...) stay inside their line, so whatever export writes on one line reads
    back as one line. A final line terminator does not start an empty line.
    """
    lines = LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def _parse_error_count(path: PathLike, line_number: int, raw: str) -> int:
    try:
        value = parse_decimal(raw)
    except ValueError as e:
        raise MalformedCardFileError(
            path, line_number, f"error count '{raw}' is not an integer", e
        ) from e
    if value < 0:
        raise MalformedCardFileError(
            path, line_number, f"error count '{raw}' is negative"
        )
    return value


def read_card_records(
    path: PathLike, encoding: str = DEFAULT_ENCODING
) -> Tuple[List[CardRecord], int]:
    """
    Read a card file into (term, definition, error_count) records.

    Only complete groups of three lines are decoded; a trailing partial group
    is dropped.

    Returns:
        tuple: (records, line_count) where `line_count` is the total number of
        lines in the file, partial group included.

    Raises:
        CardFileNotFoundError: If `path` is not an existing file.
        MalformedCardFileError: If the file cannot be decoded or an error
            count is not a non-negative integer.
    """
    file_path = Path(path)
    if not file_path.is_file():
        raise CardFileNotFoundError(path)

    try:
        with open(file_path, encoding=encoding, newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise MalformedCardFileError(
            path, None, f"not valid {encoding} text", e
        ) from e

    lines = split_lines(text)
    complete = len(lines) - len(lines) % LINES_PER_CARD
    records: List[CardRecord] = []
    for start in range(0, complete, LINES_PER_CARD):
        term, definition, raw_count = lines[start : start + LINES_PER_CARD]
        error_count = _parse_error_count(path, start + 3, raw_count)
        records.append((term, definition, error_count))

    if complete != len(lines):
        logger.warning(
            f"Ignoring {len(lines) - complete} trailing line(s) in {path}"
        )
    return records, len(lines)


def merge_record(store: CardStore, record: CardRecord) -> FlashCard:
    """
    Merge one record into `store`.

    The target card is looked up by term first and by definition second. A
    target has all three fields overwritten, which is how an import can rename
    a card or change its definition. Without a target a new card is appended.

    Returns:
        FlashCard: The updated or newly added card.
    """
    term, definition, error_count = record
    card = store.find_by_term(term) or store.find_by_definition(definition)
    if card is None:
        card = FlashCard(
            term=term, definition=definition, error_count=error_count
        )
        store.add(card)
        return card

    logger.debug(f"Updating card '{card.term}' from import")
    card.term = term
    card.definition = definition
    card.error_count = error_count
    return card


def import_cards(
    store: CardStore, path: PathLike, encoding: str = DEFAULT_ENCODING
) -> int:
    """
    Load the card file at `path` into `store`, merging with existing cards.

    Returns:
        int: The total line count divided by three (integer division). A file
        whose length is not a multiple of three still reports the quotient.

    Raises:
        CardFileNotFoundError: If `path` is not an existing file.
        MalformedCardFileError: If an error count cannot be decoded.
    """
    records, line_count = read_card_records(path, encoding=encoding)
    for record in records:
        merge_record(store, record)
    logger.info(f"Imported {len(records)} records from {path}")
    return line_count // LINES_PER_CARD
