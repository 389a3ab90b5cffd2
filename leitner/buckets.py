"""
leitner.buckets
---------------

This module defines the two representations of a learner's buckets and the conversion between them.

Bucket state comes in a sparse form, a dict mapping bucket numbers to sets of flashcards where
missing keys are empty buckets, and a dense form, a list of sets where index i is bucket i.

Functions:
    to_bucket_sets: Converts the sparse form into the dense form.
    get_bucket_range: Finds the lowest and highest occupied buckets of the dense form.
"""

from __future__ import annotations
from typing import NamedTuple
from leitner.flashcard import Flashcard

BucketMap = dict[int, set[Flashcard]]
BucketSets = list[set[Flashcard]]


class BucketRange(NamedTuple):
    """
    The range of buckets holding at least one flashcard.

    Attributes:
        min_bucket: The lowest occupied bucket.
        max_bucket: The highest occupied bucket.
    """

    min_bucket: int
    max_bucket: int


def to_bucket_sets(buckets: BucketMap) -> BucketSets:
    """
    Converts a dict of buckets into a list of sets, one per bucket number.

    Args:
        buckets: Bucket numbers mapped to the flashcards in that bucket.

    Returns:
        BucketSets: A list where element i is a copy of bucket i, or an empty set if bucket i is missing.
    """

    if len(buckets) == 0:
        return []

    max_bucket = max(buckets)

    bucket_sets: BucketSets = [set() for _ in range(max_bucket + 1)]
    for bucket, cards in buckets.items():
        bucket_sets[bucket] = set(cards)

    return bucket_sets


def get_bucket_range(buckets: BucketSets) -> BucketRange | None:
    """
    Finds the range of buckets that contain flashcards, as a rough measure of progress.

    Args:
        buckets: The dense list-of-sets representation of the buckets.

    Returns:
        BucketRange | None: The lowest and highest occupied buckets, or None if every bucket is empty.
    """

    min_bucket = next(
        (index for index, cards in enumerate(buckets) if len(cards) > 0), None
    )
    if min_bucket is None:
        return None

    # search down from the top, stopping at min_bucket which is known to be occupied
    max_bucket = len(buckets) - 1
    while len(buckets[max_bucket]) == 0:
        max_bucket -= 1

    return BucketRange(min_bucket=min_bucket, max_bucket=max_bucket)


__all__ = [
    "BucketMap",
    "BucketSets",
    "BucketRange",
    "to_bucket_sets",
    "get_bucket_range",
]
