"""Rules a submitted score has to satisfy before it replaces the stored one."""

from src.core.exceptions import InvalidScoreError, ScoreRegressionError

# Scores are stored as signed 64-bit integers
MIN_SCORE = 0
MAX_SCORE = 2**63 - 1


def parse_score(text: object) -> int:
    """Interpret a decimal string as a score (base 10, optional leading '+')."""
    if not isinstance(text, str):
        raise InvalidScoreError("Invalid score format")

    digits = text[1:] if text.startswith("+") else text
    # str.isdigit() also accepts characters like '²', which int() refuses
    if not (digits.isascii() and digits.isdigit()):
        raise InvalidScoreError("Invalid score format")

    value = int(digits)
    if not MIN_SCORE <= value <= MAX_SCORE:
        raise InvalidScoreError("Invalid score format")
    return value


def validate_update(current: int, proposed: int) -> int:
    """
    Return the value to store, or raise if the update would lower the score.

    Submitting the current value again is accepted (no-op update).
    """
    if proposed < current:
        raise ScoreRegressionError(
            "New score is less than the current one, UNACCEPTABLE!"
        )
    return proposed
