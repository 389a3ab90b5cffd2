"""
py-leitner
----------

Py-Leitner is a Python implementation of the Modified-Leitner spaced-repetition algorithm, which decides
which flashcards a learner should practice each day and moves cards between proficiency buckets after every review.
"""

from leitner.buckets import (
    BucketMap,
    BucketSets,
    BucketRange,
    to_bucket_sets,
    get_bucket_range,
)
from leitner.difficulty import Difficulty
from leitner.flashcard import Flashcard
from leitner.hint import get_hint
from leitner.progress import Progress, compute_progress
from leitner.review_log import ReviewLog
from leitner.scheduler import CardNotFoundError, Scheduler, practice, update

__all__ = [
    "BucketMap",
    "BucketSets",
    "BucketRange",
    "to_bucket_sets",
    "get_bucket_range",
    "Difficulty",
    "Flashcard",
    "get_hint",
    "Progress",
    "compute_progress",
    "ReviewLog",
    "CardNotFoundError",
    "Scheduler",
    "practice",
    "update",
]
