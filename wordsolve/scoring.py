"""
scoring.py

Letter-coverage heuristic used to pick the next guess.

A letter's score is the number of live words that contain it at least once.
A word's score is the sum of the scores of its distinct letters, so a word
that tests five different common letters beats one that tests the same
common letter twice.
"""

import numpy as np

from wordsolve.vocabulary import ALPHABET, WORD_LENGTH, encode_word


def score_letter(letter, vocabulary) -> int:
    """Number of live words in which letter occurs at least once."""
    code = ALPHABET.index(letter)
    live = vocabulary.codes[vocabulary.alive]
    return int(np.count_nonzero(np.any(live == code, axis=1)))


def letter_scores(vocabulary) -> np.ndarray:
    """Coverage count for every letter, index 0 = 'a'. Recomputed per call."""
    return np.array([score_letter(letter, vocabulary) for letter in ALPHABET])


def score_word(word, scores) -> int:
    """Sum of letter scores over the distinct letters of word."""
    return int(np.sum(np.asarray(scores)[np.unique(encode_word(word))]))


def presence_matrix(codes: np.ndarray) -> np.ndarray:
    """
    Boolean (n_words, 26) matrix, True where the word contains the letter.

    Repeated letters collapse onto the same cell, which is what makes the
    matrix product below equal to score_word for every row.
    """
    presence = np.zeros((codes.shape[0], len(ALPHABET)), dtype=bool)
    rows = np.repeat(np.arange(codes.shape[0]), WORD_LENGTH)
    presence[rows, codes.ravel()] = True
    return presence


def word_scores(vocabulary, scores=None) -> np.ndarray:
    """
    Score of every slot; empty slots get -1 so they never win.
    """
    if scores is None:
        scores = letter_scores(vocabulary)
    totals = presence_matrix(vocabulary.codes).astype(np.int64) @ np.asarray(
        scores, dtype=np.int64
    )
    totals[~vocabulary.alive] = -1
    return totals


def select_guess(vocabulary):
    """
    Live word with the highest score, or None when nothing is left.

    np.argmax returns the first maximum, so the earliest slot wins ties.
    """
    if not vocabulary:
        return None
    totals = word_scores(vocabulary)
    return vocabulary[int(np.argmax(totals))]


def rank_guesses(vocabulary, top):
    """Best `top` live words as (word, score), ties kept in slot order."""
    if top <= 0 or not vocabulary:
        return []
    totals = word_scores(vocabulary)
    live = np.flatnonzero(vocabulary.alive)
    # stable sort on the negated score keeps slot order within a tie
    order = live[np.argsort(-totals[live], kind="stable")][:top]
    return [(vocabulary[i], int(totals[i])) for i in order]
