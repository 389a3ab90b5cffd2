"""
leitner.review_log
------------------

A ReviewLog is the history entry written each time a learner reviews a flashcard. It records the
reported difficulty and the bucket move that difficulty caused, so a learner's history can be stored
as plain JSON and replayed into progress statistics later.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import TypedDict
import json
from typing_extensions import Self
from leitner.difficulty import Difficulty


class ReviewLogDict(TypedDict):
    """
    Plain-JSON form of a ReviewLog, with the datetime as an ISO 8601 string.
    """

    card_id: int
    difficulty: int
    review_datetime: str
    review_duration: int | None
    previous_bucket: int
    new_bucket: int


@dataclass
class ReviewLog:
    """
    One review of one flashcard.

    Attributes:
        card_id: Id of the reviewed flashcard.
        difficulty: What the learner reported for this review.
        review_datetime: When the review happened, in UTC.
        review_duration: How long the review took in milliseconds, if known.
        previous_bucket: Bucket holding the card when the review started.
        new_bucket: Bucket the card was placed in afterwards.
    """

    card_id: int
    difficulty: Difficulty
    review_datetime: datetime
    review_duration: int | None
    previous_bucket: int
    new_bucket: int

    @property
    def bucket_change(self) -> int:
        """Number of buckets the card moved; negative for a demotion."""
        return self.new_bucket - self.previous_bucket

    def to_dict(self) -> ReviewLogDict:
        """
        Converts the log entry into a dict that json.dumps() accepts.
        """

        return ReviewLogDict(
            card_id=self.card_id,
            difficulty=int(self.difficulty),
            review_datetime=self.review_datetime.isoformat(),
            review_duration=self.review_duration,
            previous_bucket=self.previous_bucket,
            new_bucket=self.new_bucket,
        )

    @classmethod
    def from_dict(cls, source_dict: ReviewLogDict) -> Self:
        """
        Rebuilds a log entry from the output of `to_dict`.

        Raises:
            ValueError: If the stored difficulty or datetime cannot be parsed.
        """

        return cls(
            card_id=int(source_dict["card_id"]),
            difficulty=Difficulty(int(source_dict["difficulty"])),
            review_datetime=datetime.fromisoformat(source_dict["review_datetime"]),
            review_duration=source_dict["review_duration"],
            previous_bucket=int(source_dict["previous_bucket"]),
            new_bucket=int(source_dict["new_bucket"]),
        )

    def to_json(self, indent: int | str | None = None) -> str:
        """Serializes the log entry; `indent` is passed through to json.dumps()."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, source_json: str) -> Self:
        """Parses a log entry previously written by `to_json`."""
        return cls.from_dict(json.loads(source_json))


__all__ = ["ReviewLog"]
