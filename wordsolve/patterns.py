"""
patterns.py

Feedback for a (secret, guess) pair and validation of feedback typed in by a
player.

A feedback string has one symbol per position:

    x = absent       (letter is not in the secret)
    y = present      (letter is in the secret, somewhere else)
    g = correct      (letter is in the secret at this position)

Unlike the official game, evaluate() does not cap yellows by the number of
times a letter occurs in the secret. Guessing "geese" against "those" marks
every 'e' as at least yellow. The filters are written against this rule and
self-play depends on it staying that way.
"""

from wordsolve.vocabulary import WORD_LENGTH, is_valid_word


ABSENT = "x"
PRESENT = "y"
CORRECT = "g"
SYMBOLS = ABSENT + PRESENT + CORRECT
SOLVED = CORRECT * WORD_LENGTH


def evaluate(secret: str, guess: str) -> tuple[str, bool]:
    """
    Feedback for guess against secret, plus whether the guess is the secret.
    """
    for word in (secret, guess):
        if not is_valid_word(word):
            raise ValueError(f"not a five letter lowercase word: {word!r}")

    result = [ABSENT] * WORD_LENGTH

    for i in range(WORD_LENGTH):
        if guess[i] in secret:
            result[i] = PRESENT

    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            result[i] = CORRECT

    return "".join(result), guess == secret


def parse_feedback(text: str) -> str:
    """Normalise a typed feedback line, raising ValueError if malformed."""
    feedback = text.strip().lower()
    if len(feedback) != WORD_LENGTH:
        raise ValueError(
            f"feedback must be {WORD_LENGTH} characters, got {len(feedback)}"
        )
    bad = sorted(set(feedback) - set(SYMBOLS))
    if bad:
        raise ValueError(f"feedback may only use {','.join(SYMBOLS)}, got {''.join(bad)}")
    return feedback


def is_solved(feedback: str) -> bool:
    return feedback == SOLVED


def render(guess: str, feedback: str) -> str:
    """Correct letters uppercase, misplaced lowercase, absent as '.'."""
    out = []
    for letter, mark in zip(guess, feedback):
        if mark == CORRECT:
            out.append(letter.upper())
        elif mark == PRESENT:
            out.append(letter)
        else:
            out.append(".")
    return "".join(out)
