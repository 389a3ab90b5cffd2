"""
leitner.flashcard
-----------------

This module defines the Flashcard class.

Classes:
    Flashcard: Represents a single flashcard placed in the Leitner buckets.
"""

from __future__ import annotations
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
import time
from typing import TypedDict
from typing_extensions import Self


class FlashcardDict(TypedDict):
    """
    JSON-serializable dictionary representation of a Flashcard object.
    """

    card_id: int
    front: str
    back: str
    hint: str
    tags: list[str]


def _new_card_id() -> int:
    # epoch milliseconds of when the card was created
    card_id = int(datetime.now(timezone.utc).timestamp() * 1000)
    # wait 1ms to prevent potential card_id collision on next Flashcard creation
    time.sleep(0.001)
    return card_id


@dataclass(frozen=True, init=False)
class Flashcard:
    """
    Represents a flashcard.

    Flashcards are immutable and hashable. Two flashcards built separately from the same
    text get different card ids and are therefore different cards.

    Attributes:
        front: The question side of the card.
        back: The answer side of the card.
        hint: A hint for the answer, possibly empty.
        tags: Tags attached to the card.
        card_id: The id of the card. Defaults to the epoch milliseconds of when the card was created.
    """

    front: str
    back: str
    hint: str
    tags: tuple[str, ...]
    card_id: int

    def __init__(
        self,
        front: str,
        back: str,
        hint: str = "",
        tags: Sequence[str] = (),
        card_id: int | None = None,
    ) -> None:
        if card_id is None:
            card_id = _new_card_id()

        # frozen dataclass, so fields are set through object.__setattr__
        object.__setattr__(self, "front", front)
        object.__setattr__(self, "back", back)
        object.__setattr__(self, "hint", hint)
        object.__setattr__(self, "tags", tuple(tags))
        object.__setattr__(self, "card_id", card_id)

    def to_dict(self) -> FlashcardDict:
        """
        Returns a JSON-serializable dictionary representation of the Flashcard object.

        Returns:
            A dictionary representation of the Flashcard object.
        """

        return {
            "card_id": self.card_id,
            "front": self.front,
            "back": self.back,
            "hint": self.hint,
            "tags": list(self.tags),
        }

    @classmethod
    def from_dict(cls, source_dict: FlashcardDict) -> Self:
        """
        Creates a Flashcard object from an existing dictionary.

        Args:
            source_dict: A dictionary representing an existing Flashcard object.

        Returns:
            A Flashcard object created from the provided dictionary.
        """

        return cls(
            front=source_dict["front"],
            back=source_dict["back"],
            hint=source_dict["hint"],
            tags=source_dict["tags"],
            card_id=int(source_dict["card_id"]),
        )


__all__ = ["Flashcard"]
