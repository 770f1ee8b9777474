"""
main.py

Walks the solver through the ten demo words with "nadir" as the secret.
"""

from wordsolve.scoring import letter_scores, select_guess
from wordsolve.solve import secret_feedback, solve
from wordsolve.vocabulary import ALPHABET, Vocabulary
from wordsolve.words import DEMO_WORDS


DEFAULT_SECRET = "nadir"


vocabulary = Vocabulary(DEMO_WORDS)
scores = letter_scores(vocabulary)

print("Letter coverage:")
for letter, score in zip(ALPHABET, scores):
    if score:
        print(f"{letter}: {score}")

print(f"\nFirst guess: {select_guess(vocabulary)}")

result = solve(vocabulary, secret_feedback(DEFAULT_SECRET))
for n, (guess, feedback) in enumerate(result.guesses, start=1):
    print(f"GUESS #{n}: {guess} -> {feedback}")
print(f"Solved: {result.solved} in {result.num_guesses} guesses")
