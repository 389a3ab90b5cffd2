from enum import IntEnum


class Difficulty(IntEnum):
    """
    Enum representing how well the learner did when reviewing a Flashcard.
    """

    Wrong = 0
    Hard = 1
    Easy = 2


__all__ = ["Difficulty"]
