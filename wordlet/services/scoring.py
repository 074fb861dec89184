"""
Guess Scoring

Pure functions implementing the letter evaluation algorithm and the
per-letter knowledge merge rule.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from ..models.game import GuessLetter, HitAccuracy


def build_letter_counts(word: str) -> Counter:
    """Count the occurrences of every letter in a word."""
    return Counter(word)


def score_guess(guess: str, answer: str) -> List[GuessLetter]:
    """
    Score every letter of a guess against the answer.

    Exact matches are consumed from the answer's letter counts before any
    misplaced letter is considered, so a repeated letter is only marked
    IN_WORD while unmatched occurrences remain in the answer.

    Args:
        guess: The guessed word, same length as the answer
        answer: The secret word

    Returns:
        List of GuessLetter in guess order
    """
    remaining = build_letter_counts(answer)
    accuracies: List[Optional[HitAccuracy]] = [None] * len(guess)

    # First pass: exact position matches
    for index, (letter, expected) in enumerate(zip(guess, answer)):
        if letter == expected:
            accuracies[index] = HitAccuracy.IN_RIGHT_PLACE
            remaining[letter] -= 1

    # Second pass: misplaced letters, left to right
    for index, letter in enumerate(guess):
        if accuracies[index] is not None:
            continue
        if remaining[letter] >= 1:
            accuracies[index] = HitAccuracy.IN_WORD
            remaining[letter] -= 1
        else:
            accuracies[index] = HitAccuracy.NOT_IN_WORD

    return [GuessLetter(letter, accuracy) for letter, accuracy in zip(guess, accuracies)]


def correct_positions(letters: Iterable[GuessLetter]) -> List[int]:
    """Column indices scored IN_RIGHT_PLACE."""
    return [index for index, gl in enumerate(letters) if gl.accuracy is HitAccuracy.IN_RIGHT_PLACE]


def merge_letter_knowledge(registry: Dict[str, HitAccuracy], letters: Iterable[GuessLetter]) -> None:
    """
    Fold a scored guess into the letter registry in place.

    An entry is only ever replaced by a strictly better accuracy.
    """
    for gl in letters:
        current = registry.get(gl.letter)
        if current is None or gl.accuracy.is_better_than(current):
            registry[gl.letter] = gl.accuracy
