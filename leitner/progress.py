"""
leitner.progress
----------------

This module computes summary statistics of a learner's progress.

Classes:
    Progress: Statistics about the learner's buckets and review history.

Functions:
    compute_progress: Computes the Progress of a learner.
"""

from __future__ import annotations
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from leitner.buckets import BucketMap, BucketRange, get_bucket_range, to_bucket_sets
from leitner.difficulty import Difficulty
from leitner.review_log import ReviewLog


@dataclass(frozen=True)
class Progress:
    """
    Statistics about a learner's progress.

    Attributes:
        total_cards: The number of cards across all buckets.
        cards_per_bucket: The number of cards in each bucket, for every bucket up to the highest one.
        retired_cards: The number of cards in the retired (highest) bucket.
        bucket_range: The lowest and highest occupied buckets, or None if there are no cards.
        total_reviews: The number of reviews in the history.
        reviews_by_difficulty: The number of reviews given each difficulty.
        success_rate: The share of reviews that were not Wrong, or None if there are no reviews.
        reviewed_cards: The number of distinct cards that have been reviewed.
    """

    total_cards: int
    cards_per_bucket: dict[int, int]
    retired_cards: int
    bucket_range: BucketRange | None
    total_reviews: int
    reviews_by_difficulty: dict[Difficulty, int]
    success_rate: float | None
    reviewed_cards: int


def compute_progress(buckets: BucketMap, history: Iterable[ReviewLog]) -> Progress:
    """
    Computes statistics about the learner's progress.

    Args:
        buckets: The sparse dict representation of the buckets.
        history: The review logs of the learner, in any order.

    Returns:
        Progress: The learner's progress.
    """

    bucket_sets = to_bucket_sets(buckets)
    cards_per_bucket = {bucket: len(cards) for bucket, cards in enumerate(bucket_sets)}

    review_logs = list(history)
    difficulty_counts = Counter(review_log.difficulty for review_log in review_logs)
    reviews_by_difficulty = {
        difficulty: difficulty_counts[difficulty] for difficulty in Difficulty
    }

    success_rate = None
    if len(review_logs) > 0:
        success_rate = 1 - reviews_by_difficulty[Difficulty.Wrong] / len(review_logs)

    return Progress(
        total_cards=sum(cards_per_bucket.values()),
        cards_per_bucket=cards_per_bucket,
        retired_cards=len(bucket_sets[-1]) if len(bucket_sets) > 0 else 0,
        bucket_range=get_bucket_range(bucket_sets),
        total_reviews=len(review_logs),
        reviews_by_difficulty=reviews_by_difficulty,
        success_rate=success_rate,
        reviewed_cards=len({review_log.card_id for review_log in review_logs}),
    )


__all__ = ["Progress", "compute_progress"]
