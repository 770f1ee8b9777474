import numpy as np

from wordsolve.scoring import (
    letter_scores,
    rank_guesses,
    score_letter,
    score_word,
    select_guess,
    word_scores,
)
from wordsolve.vocabulary import ALPHABET, Vocabulary
from wordsolve.words import DEMO_WORDS


def _scores(**values):
    scores = np.zeros(len(ALPHABET), dtype=np.int64)
    for letter, value in values.items():
        scores[ALPHABET.index(letter)] = value
    return scores


def test_score_letter_counts_words_not_occurrences():
    vocab = Vocabulary(["stalk", "scrap"])
    assert score_letter("s", vocab) == 2
    assert score_letter("z", vocab) == 0

    vocab = Vocabulary(["eerie", "ether"])
    assert score_letter("e", vocab) == 2


def test_score_letter_skips_removed_words():
    vocab = Vocabulary(["stalk", "scrap"])
    vocab.remove(1)
    assert score_letter("s", vocab) == 1
    assert score_letter("c", vocab) == 0


def test_letter_scores_on_demo_words():
    scores = letter_scores(Vocabulary(DEMO_WORDS))
    assert scores.shape == (26,)
    assert scores[ALPHABET.index("t")] == 7
    assert scores[ALPHABET.index("a")] == 7
    assert scores[ALPHABET.index("r")] == 5
    assert scores[ALPHABET.index("s")] == 4
    assert scores[ALPHABET.index("z")] == 0


def test_score_word_counts_each_letter_once():
    assert score_word("eerie", _scores(e=10)) == 10
    assert score_word("eerie", _scores(e=10, r=3, i=2)) == 15
    assert score_word("stalk", _scores(e=10)) == 0


def test_word_scores_match_score_word():
    vocab = Vocabulary(DEMO_WORDS + ["eerie", "geese"])
    vocab.remove(3)
    scores = letter_scores(vocab)
    totals = word_scores(vocab, scores)

    for index in range(len(vocab)):
        word = vocab[index]
        if word is None:
            assert totals[index] == -1
        else:
            assert totals[index] == score_word(word, scores)


def test_select_guess_picks_highest_score():
    assert select_guess(Vocabulary(DEMO_WORDS)) == "ultra"


def test_select_guess_first_word_wins_ties():
    assert select_guess(Vocabulary(["abcde", "edcba"])) == "abcde"
    assert select_guess(Vocabulary(["edcba", "abcde"])) == "edcba"


def test_select_guess_on_empty_vocabulary():
    assert select_guess(Vocabulary([])) is None

    vocab = Vocabulary(["stalk"])
    vocab.remove(0)
    assert select_guess(vocab) is None


def test_rank_guesses_keeps_slot_order_within_ties():
    ranked = rank_guesses(Vocabulary(DEMO_WORDS), 4)
    assert ranked == [("ultra", 23), ("stalk", 22), ("shear", 22), ("vital", 21)]
    assert rank_guesses(Vocabulary(DEMO_WORDS), 0) == []
    assert rank_guesses(Vocabulary([]), 3) == []
