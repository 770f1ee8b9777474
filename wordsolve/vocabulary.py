"""
vocabulary.py

The working set of candidate words.

Words are stored as a (n_slots, 5) matrix of letter codes 0..25 next to a
boolean mask of live slots. Filtering never compacts the matrix: a removed
word only has its slot switched off, so slot indices stay stable for the
whole session and the slot count never changes.
"""

import numpy as np


WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"


def is_valid_word(word) -> bool:
    """True for a five letter lowercase ASCII word."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and all(ch in ALPHABET for ch in word)
    )


def encode_word(word: str) -> np.ndarray:
    """Letter codes for one word, 'a' -> 0 ... 'z' -> 25."""
    return np.frombuffer(word.encode("ascii"), dtype=np.uint8) - ord("a")


class Vocabulary:
    def __init__(self, words):
        words = list(words)
        for word in words:
            if not is_valid_word(word):
                raise ValueError(f"not a five letter lowercase word: {word!r}")

        self._words = words
        if words:
            self._codes = encode_word("".join(words)).reshape(-1, WORD_LENGTH)
        else:
            self._codes = np.zeros((0, WORD_LENGTH), dtype=np.uint8)
        self._alive = np.ones(len(words), dtype=bool)

        self._codes.flags.writeable = False

    @property
    def codes(self) -> np.ndarray:
        return self._codes

    @property
    def alive(self) -> np.ndarray:
        """Read-only view of the live mask."""
        view = self._alive.view()
        view.flags.writeable = False
        return view

    @property
    def active_count(self) -> int:
        return int(np.count_nonzero(self._alive))

    def __len__(self):
        return len(self._words)

    def __bool__(self):
        return bool(self._alive.any())

    def __getitem__(self, index):
        if not self._alive[index]:
            return None
        return self._words[index]

    def __iter__(self):
        for index in np.flatnonzero(self._alive):
            yield self._words[index]

    def __repr__(self):
        return f"Vocabulary({self.active_count}/{len(self)} live)"

    def words(self) -> list[str]:
        return list(self)

    def remove(self, index) -> bool:
        """Tombstone one slot. Returns False if it was already empty."""
        if not self._alive[index]:
            return False
        self._alive[index] = False
        return True

    def remove_where(self, mask) -> int:
        """
        Tombstone every live slot where mask is True.

        mask must have one entry per slot. Slots that are already empty do
        not count towards the returned number.
        """
        mask = np.asarray(mask, dtype=bool)
        if mask.shape != self._alive.shape:
            raise ValueError(
                f"mask shape {mask.shape} does not match {len(self)} slots"
            )
        hit = mask & self._alive
        self._alive[hit] = False
        return int(np.count_nonzero(hit))

    def discard(self, word: str) -> int:
        """Tombstone every live slot holding word."""
        if not is_valid_word(word):
            return 0
        return self.remove_where(np.all(self._codes == encode_word(word), axis=1))
