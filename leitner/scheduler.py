"""
leitner.scheduler
-----------------

This module implements the Modified-Leitner scheduling rules.

Bucket i is practiced every 2**i days, except for the highest bucket which holds retired cards that are
no longer practiced. After each review a card moves back to bucket 0 (Wrong), down one bucket (Hard) or
up one bucket (Easy).

Functions:
    practice: Selects the cards to practice on a given day.
    update: Moves a card to its new bucket after a review.

Classes:
    Scheduler: Reviews cards against a learner's buckets and produces review logs.
    CardNotFoundError: Raised when a reviewed card is in none of the buckets.
"""

from __future__ import annotations
from datetime import datetime, timezone
import logging
from dataclasses import dataclass
from leitner.buckets import (
    BucketMap,
    BucketRange,
    BucketSets,
    get_bucket_range,
    to_bucket_sets,
)
from leitner.difficulty import Difficulty
from leitner.flashcard import Flashcard
from leitner.review_log import ReviewLog

logger = logging.getLogger(__name__)


class CardNotFoundError(ValueError):
    """
    Raised when a card is looked up in buckets that do not contain it.
    """

    def __init__(self, card: Flashcard) -> None:
        super().__init__(f"no bucket contains Flashcard card_id {card.card_id}")
        self.card = card


def practice(buckets: BucketSets, day: int) -> set[Flashcard]:
    """
    Selects the cards to practice on a particular day.

    Args:
        buckets: The dense list-of-sets representation of the buckets.
        day: The current day number, starting from 0.

    Returns:
        set[Flashcard]: The flashcards due on `day`.

    Raises:
        ValueError: If `day` is negative.
    """

    if day < 0:
        raise ValueError(f"day must be non-negative, got {day}")

    practice_set: set[Flashcard] = set()

    retired_bucket = len(buckets) - 1
    for bucket in range(retired_bucket):
        # days are numbered from 0, so every n'th practice day is day n-1
        if (day + 1) % 2**bucket == 0:
            practice_set.update(buckets[bucket])

    return practice_set


def _find_bucket(buckets: BucketMap, card: Flashcard) -> int:
    for bucket, cards in buckets.items():
        if card in cards:
            return bucket

    raise CardNotFoundError(card)


def _next_bucket(*, bucket: int, difficulty: Difficulty, max_bucket: int) -> int:
    match difficulty:
        case Difficulty.Wrong:
            return 0
        case Difficulty.Hard:
            return max(0, bucket - 1)
        case Difficulty.Easy:
            return min(bucket + 1, max_bucket)

    raise ValueError(f"Invalid difficulty: {difficulty!r}")


def _move_card(
    buckets: BucketMap, card: Flashcard, difficulty: Difficulty
) -> tuple[BucketMap, int, int]:
    difficulty = Difficulty(difficulty)
    current_bucket = _find_bucket(buckets, card)

    updated_buckets: BucketMap = {
        bucket: set(cards) for bucket, cards in buckets.items()
    }
    updated_buckets[current_bucket].discard(card)

    new_bucket = _next_bucket(
        bucket=current_bucket, difficulty=difficulty, max_bucket=max(buckets)
    )
    updated_buckets.setdefault(new_bucket, set()).add(card)

    logger.debug(
        "Moved card %s from bucket %d to bucket %d (%s)",
        card.card_id,
        current_bucket,
        new_bucket,
        difficulty.name,
    )

    return updated_buckets, current_bucket, new_bucket


def update(buckets: BucketMap, card: Flashcard, difficulty: Difficulty) -> BucketMap:
    """
    Moves a card to its new bucket after a practice trial.

    Easy promotions never go past the highest bucket number present in `buckets`, even when that bucket is empty.

    Args:
        buckets: The sparse dict representation of the buckets.
        card: The flashcard that was practiced.
        difficulty: How well the learner did on the card, as a Difficulty or its integer value.

    Returns:
        BucketMap: A new dict of buckets. The given `buckets` are left untouched.

    Raises:
        ValueError: If `difficulty` is not a valid Difficulty.
        CardNotFoundError: If no bucket contains `card`.
    """

    updated_buckets, _, _ = _move_card(buckets, card, difficulty)
    return updated_buckets


@dataclass
class Scheduler:
    """
    The Modified-Leitner scheduler.

    The scheduler keeps no bucket state of its own: every method takes the learner's buckets
    and returns new values.
    """

    def get_practice_cards(self, buckets: BucketMap, day: int) -> set[Flashcard]:
        """
        Selects the cards to practice on a particular day.

        Args:
            buckets: The sparse dict representation of the buckets.
            day: The current day number, starting from 0.

        Returns:
            set[Flashcard]: The flashcards due on `day`.
        """

        return practice(to_bucket_sets(buckets), day)

    def get_bucket_range(self, buckets: BucketMap) -> BucketRange | None:
        """
        Finds the range of occupied buckets.

        Args:
            buckets: The sparse dict representation of the buckets.

        Returns:
            BucketRange | None: The lowest and highest occupied buckets, or None if every bucket is empty.
        """

        return get_bucket_range(to_bucket_sets(buckets))

    def review_card(
        self,
        buckets: BucketMap,
        card: Flashcard,
        difficulty: Difficulty,
        review_datetime: datetime | None = None,
        review_duration: int | None = None,
    ) -> tuple[BucketMap, ReviewLog]:
        """
        Reviews a card with a given difficulty at a given time for a specified duration.

        Args:
            buckets: The sparse dict representation of the buckets.
            card: The card being reviewed.
            difficulty: The difficulty the learner reported for the card.
            review_datetime: The date and time of the review.
            review_duration: The number of miliseconds it took to review the card or None if unspecified.

        Returns:
            tuple[BucketMap,ReviewLog]: A tuple containing the updated buckets and the review log of the card.

        Raises:
            ValueError: If the `review_datetime` argument is not timezone-aware and set to UTC,
                or if `difficulty` is not a valid Difficulty.
            CardNotFoundError: If no bucket contains `card`.
        """

        if review_datetime is not None and (
            (review_datetime.tzinfo is None) or (review_datetime.tzinfo != timezone.utc)
        ):
            raise ValueError("datetime must be timezone-aware and set to UTC")

        if review_datetime is None:
            review_datetime = datetime.now(timezone.utc)

        difficulty = Difficulty(difficulty)
        updated_buckets, previous_bucket, new_bucket = _move_card(
            buckets, card, difficulty
        )

        review_log = ReviewLog(
            card_id=card.card_id,
            difficulty=difficulty,
            review_datetime=review_datetime,
            review_duration=review_duration,
            previous_bucket=previous_bucket,
            new_bucket=new_bucket,
        )

        return updated_buckets, review_log


__all__ = ["practice", "update", "Scheduler", "CardNotFoundError"]
