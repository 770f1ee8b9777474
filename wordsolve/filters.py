"""
filters.py

The three pruning rules, one per feedback class, and the per-guess driver
that applies them.

Every rule walks the whole vocabulary once, tombstones the words that can no
longer be the secret and returns how many it removed. Rules only ever
remove, so applying them in a different order ends in the same vocabulary.
"""

import logging

import numpy as np

from wordsolve.patterns import ABSENT, CORRECT, PRESENT, SYMBOLS
from wordsolve.vocabulary import ALPHABET, WORD_LENGTH

log = logging.getLogger(__name__)


def _letter_code(letter):
    assert isinstance(letter, str) and len(letter) == 1 and letter in ALPHABET, (
        f"bad letter {letter!r}"
    )
    return ALPHABET.index(letter)


def _check_position(position):
    assert 0 <= position < WORD_LENGTH, f"position {position} out of range"


def exclude_letter(letter, vocabulary) -> int:
    """Absent: drop every word containing letter anywhere."""
    code = _letter_code(letter)
    return vocabulary.remove_where(np.any(vocabulary.codes == code, axis=1))


def relocate_letter(letter, position, vocabulary) -> int:
    """
    Present elsewhere: drop words that lack letter, or that have it at
    position. Survivors contain the letter at some other position.
    """
    code = _letter_code(letter)
    _check_position(position)
    codes = vocabulary.codes
    in_word = np.any(codes == code, axis=1)
    at_position = codes[:, position] == code
    return vocabulary.remove_where(~in_word | at_position)


def pin_letter(letter, position, vocabulary) -> int:
    """Correct: drop every word whose letter at position is not letter."""
    code = _letter_code(letter)
    _check_position(position)
    return vocabulary.remove_where(vocabulary.codes[:, position] != code)


def non_gray_elsewhere(guess, feedback, position) -> bool:
    """
    True when the letter at position shows up again in the guess with a
    non-absent mark.

    A guess can hold a letter twice while the secret holds it once; the
    extra copy comes back absent even though the letter is in the secret.
    """
    letter = guess[position]
    return any(
        j != position and guess[j] == letter and feedback[j] != ABSENT
        for j in range(WORD_LENGTH)
    )


def apply_feedback(guess, feedback, vocabulary) -> int:
    """Apply one round of feedback position by position. Returns total removed."""
    assert len(guess) == WORD_LENGTH and len(feedback) == WORD_LENGTH
    assert set(feedback) <= set(SYMBOLS), f"bad feedback {feedback!r}"

    total = 0
    for position, (letter, mark) in enumerate(zip(guess, feedback)):
        if mark == ABSENT:
            if non_gray_elsewhere(guess, feedback, position):
                log.debug("keeping gray letter %s: marked elsewhere in guess", letter)
                continue
            log.debug("filtering with gray letter: %s", letter)
            removed = exclude_letter(letter, vocabulary)
        elif mark == PRESENT:
            log.debug("filtering with yellow letter: %s", letter)
            removed = relocate_letter(letter, position, vocabulary)
        elif mark == CORRECT:
            log.debug("filtering with green letter: %s", letter)
            removed = pin_letter(letter, position, vocabulary)
        log.debug("removed %d words.", removed)
        total += removed
    return total
