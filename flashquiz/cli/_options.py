"""
Launch argument handling: `-import <path>` and `-export <path>` pairs.
"""

import logging
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from flashquiz.session import FlashcardSession

logger = logging.getLogger(__name__)


class LaunchOption(str, Enum):
    IMPORT = "-import"
    EXPORT = "-export"

    @classmethod
    def lookup(cls, flag: str) -> Optional["LaunchOption"]:
        """Case-insensitive match of `flag`; None for unknown flags."""
        try:
            return cls(flag.lower())
        except ValueError:
            return None


def parse_launch_args(
    args: Sequence[str],
) -> List[Tuple[LaunchOption, str]]:
    """
    Split launch arguments into (option, value) pairs.

    Arguments are read two at a time. A pair whose flag is not recognised is
    skipped as a whole; a recognised flag without a value is dropped.
    """
    pairs: List[Tuple[LaunchOption, str]] = []
    for i in range(0, len(args), 2):
        option = LaunchOption.lookup(args[i])
        if option is None:
            logger.debug(f"Ignoring unknown launch option '{args[i]}'")
            continue
        if i + 1 >= len(args):
            logger.warning(f"Launch option '{args[i]}' has no value; ignored")
            continue
        pairs.append((option, args[i + 1]))
    return pairs


def apply_launch_args(
    session: FlashcardSession, args: Sequence[str]
) -> None:
    """
    Apply launch arguments to `session` in order.

    `-import` loads its file right away; `-export` only records the path for
    the export performed at exit, the last one given wins.
    """
    for option, value in parse_launch_args(args):
        if option is LaunchOption.IMPORT:
            session.import_from(value)
        else:
            session.pending_export_path = value
