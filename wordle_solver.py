"""
wordle_solver.py

Command line front end for the letter-coverage solver.

Modes:
wordle_solver.py SECRET: self-play against SECRET and report the guess count.
wordle_solver.py: interactive; print a guess, read its g/y/x feedback, repeat.
-benchmark: self-play every vocabulary word as the secret.

Optional:
-vocab PATH: word list to use (default: data/vocabulary.txt).
-suggest N: also list the N best scoring candidates each round.
-verbose: log every filter rule and how many words it removed.
"""

import argparse
import logging
import sys

import numpy as np
from tqdm import tqdm

from wordsolve.patterns import render
from wordsolve.scoring import rank_guesses
from wordsolve.solve import prompt_feedback, secret_feedback, solve
from wordsolve.vocabulary import Vocabulary, is_valid_word
from wordsolve.words import VOCAB_PATH, load_word_list


def _print_round(suggest):
    def on_guess(round_number, guess, vocabulary):
        if suggest > 0:
            print(f"{vocabulary.active_count} candidates left, best {suggest}:")
            for word, score in rank_guesses(vocabulary, suggest):
                print(f"  {word}: {score}")
        print(f"GUESS #{round_number}: {guess}")

    return on_guess


def report(result):
    if result.solved:
        print(f"correct! got it in {result.num_guesses} guesses!")
    else:
        print("oh no, could not guess it -- maybe outside the vocabulary?")


def run_self_play(words, secret, suggest):
    vocabulary = Vocabulary(words)
    result = solve(vocabulary, secret_feedback(secret), on_guess=_print_round(suggest))
    for guess, feedback in result.guesses:
        print(f"{guess} {feedback} {render(guess, feedback)}")
    report(result)
    return result


def run_interactive(words, suggest):
    vocabulary = Vocabulary(words)
    try:
        result = solve(vocabulary, prompt_feedback(), on_guess=_print_round(suggest))
    except EOFError:
        print("\nAborted: no more input.")
        return None
    report(result)
    return result


def run_benchmark(words):
    """Self-play every word in the list as the secret and summarise."""
    if not words:
        print("Vocabulary is empty, nothing to benchmark.")
        return np.zeros(0, dtype=np.int64), []

    counts = []
    failures = []

    print(f"Solving all {len(words)} words...")
    for secret in tqdm(words, desc="Secret"):
        result = solve(Vocabulary(words), secret_feedback(secret))
        if result.solved:
            counts.append(result.num_guesses)
        else:
            failures.append(secret)
            tqdm.write(f"Failed on {secret} after {result.num_guesses} guesses.")

    counts = np.array(counts, dtype=np.int64)
    histogram = np.bincount(counts) if counts.size else np.zeros(1, dtype=np.int64)

    print("\nGuesses needed:")
    for n_guesses in range(1, histogram.size):
        if histogram[n_guesses]:
            print(f"{n_guesses:>3}: {histogram[n_guesses]:,}")
    if counts.size:
        print(f"Mean: {counts.mean():.3f} guesses, worst: {counts.max()}")
    print(f"Failures: {len(failures)}")
    return counts, failures


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Letter-coverage solver for five letter word guessing games."
    )
    parser.add_argument(
        "secret",
        nargs="?",
        default=None,
        help="Secret word for self-play; omit to enter feedback by hand.",
    )
    parser.add_argument(
        "-vocab",
        default=str(VOCAB_PATH),
        help="Word list, one five letter word per line (default: data/vocabulary.txt).",
    )
    parser.add_argument(
        "-suggest",
        type=int,
        default=0,
        help="Also show the N best scoring candidates each round (default: 0).",
    )
    parser.add_argument(
        "-benchmark",
        action="store_true",
        help="Self-play every vocabulary word as the secret; ignores SECRET.",
    )
    parser.add_argument(
        "-verbose",
        action="store_true",
        help="Log each filter rule applied and how many words it removed.",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        words = load_word_list(args.vocab)
    except OSError as exc:
        raise SystemExit(f"Can't read vocabulary {args.vocab}: {exc}") from exc

    if args.benchmark:
        run_benchmark(words)
        return

    if args.secret is not None:
        secret = args.secret.strip().lower()
        if not is_valid_word(secret):
            raise SystemExit(f"secret must be a five letter word: {args.secret}")
        run_self_play(words, secret, args.suggest)
        return

    run_interactive(words, args.suggest)


if __name__ == "__main__":
    sys.exit(main())
