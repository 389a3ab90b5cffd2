from leitner.flashcard import Flashcard

HINT_PREVIEW_LENGTH = 5
NO_HINT_AVAILABLE = "no hint available"


def get_hint(card: Flashcard) -> str:
    """
    Returns a deterministic hint for a flashcard.

    The card's own hint is used when it has one, otherwise the first few characters of the answer are revealed.

    Args:
        card: The flashcard to hint.

    Returns:
        str: A non-empty hint string.
    """

    if card.hint != "":
        return card.hint

    back = card.back.strip()
    if len(back) == 0:
        return NO_HINT_AVAILABLE

    return f"Starts with '{back[:HINT_PREVIEW_LENGTH]}'"


__all__ = ["get_hint"]
