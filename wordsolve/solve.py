"""
solve.py

The guess / feedback / filter loop.

Feedback comes from an injected callable taking the guess and returning a
validated feedback string. secret_feedback() scores guesses against a known
secret (self-play); prompt_feedback() asks a person and keeps asking until
the answer is well formed.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from wordsolve.filters import apply_feedback
from wordsolve.patterns import evaluate, is_solved, parse_feedback
from wordsolve.scoring import select_guess

log = logging.getLogger(__name__)

PROMPT = "please enter result as 5 characters (g,y,x): "


class State(Enum):
    SELECTING_GUESS = "selecting_guess"
    AWAITING_FEEDBACK = "awaiting_feedback"
    FILTERING = "filtering"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SolveResult:
    state: State
    guesses: list = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.state is State.SOLVED

    @property
    def num_guesses(self) -> int:
        return len(self.guesses)


def secret_feedback(secret):
    """Feedback source that scores each guess against a known secret."""

    def source(guess):
        feedback, _ = evaluate(secret, guess)
        return feedback

    return source


def prompt_feedback(read=None, write=print):
    """
    Feedback source backed by a person. Malformed lines are reported through
    write() and asked for again; EOFError from read() propagates.

    read defaults to input(), looked up on each call.
    """

    def source(guess):
        while True:
            try:
                return parse_feedback((read or input)(PROMPT))
            except ValueError as exc:
                write(f"Not a valid result ({exc}), try again!")

    return source


def solve(vocabulary, feedback_source, max_rounds=None, on_guess=None) -> SolveResult:
    """
    Run rounds until the feedback is all green or no guess is left.

    The vocabulary is filtered in place. max_rounds defaults to the number of
    slots: every unsolved round removes at least the guess itself, so the
    default bound never ends a run that still had candidates left.
    """
    if max_rounds is None:
        max_rounds = len(vocabulary)

    result = SolveResult(State.SELECTING_GUESS)
    guess = feedback = None

    while True:
        if result.state is State.SELECTING_GUESS:
            if result.num_guesses >= max_rounds:
                log.info("stopping after %d rounds", result.num_guesses)
                result.state = State.EXHAUSTED
                continue
            guess = select_guess(vocabulary)
            if guess is None:
                result.state = State.EXHAUSTED
                continue
            if on_guess is not None:
                on_guess(result.num_guesses + 1, guess, vocabulary)
            result.state = State.AWAITING_FEEDBACK

        elif result.state is State.AWAITING_FEEDBACK:
            feedback = feedback_source(guess)
            result.guesses.append((guess, feedback))
            if is_solved(feedback):
                result.state = State.SOLVED
            else:
                result.state = State.FILTERING

        elif result.state is State.FILTERING:
            removed = apply_feedback(guess, feedback, vocabulary)
            removed += vocabulary.discard(guess)
            log.debug(
                "round %d: removed %d, %d words left",
                result.num_guesses,
                removed,
                vocabulary.active_count,
            )
            result.state = State.SELECTING_GUESS

        else:
            return result
