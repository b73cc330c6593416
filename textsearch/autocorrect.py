"""
Auto-correction module for query processing.

This module handles query-term correction using Levenshtein distance
against the vocabulary of the inverted index.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)


def edit_distance(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Levenshtein distance between two tokens with unit-cost insertion,
    deletion and substitution.

    Args:
        a: First token.
        b: Second token.
        max_dist: Optional cutoff. Distances above it are reported as
            ``max_dist + 1``.

    Returns:
        Edit distance as a non-negative integer.
    """
    return Levenshtein.distance(a, b, weights=(1, 1, 1), score_cutoff=max_dist)


class AutoCorrect:
    """Handles query auto-correction using edit distance."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def correct_term(self, term: str, vocab: Iterable[str], max_dist: int = None) -> str:
        """
        Replace an unknown term with the nearest vocabulary term.

        The vocabulary is scanned in order. A candidate replaces the current
        best only when strictly closer, and the scan stops at the first
        candidate at distance 1. When several candidates share the minimal
        distance above 1, the one seen first wins, so the result depends on
        the vocabulary order.

        Args:
            term: Term to correct.
            vocab: Known terms.
            max_dist: Maximum accepted edit distance.

        Returns:
            The closest vocabulary term, or ``term`` itself if none lies
            within ``max_dist``.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        best, best_dist = term, max_dist + 1
        L = len(term)

        for known in vocab:
            # Length difference is a lower bound on the distance
            if abs(len(known) - L) >= best_dist:
                continue
            dist = edit_distance(term, known, max_dist=max_dist)
            if dist < best_dist:
                best, best_dist = known, dist
                if dist == 1:
                    break

        return best

    def autocorrect_query_words(self, words: List[str], vocab, max_dist: int = None) -> Tuple[List[str], List[Tuple[str, str]], List[str]]:
        """
        Auto-correct a list of query words.

        Args:
            words: List of words to correct.
            vocab: Known terms; must support membership tests and iteration.
            max_dist: Maximum edit distance to consider.

        Returns:
            Tuple of (corrected_words, changes, oov_no_suggest).
            - corrected_words: List of corrected words
            - changes: List of (original, corrected) pairs
            - oov_no_suggest: List of words with no viable suggestions
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        corrected = []
        changes = []
        oov_no_suggest = []

        for w in words:
            if w in vocab:
                corrected.append(w)
                continue

            suggestion = self.correct_term(w, vocab, max_dist=max_dist)
            corrected.append(suggestion)
            if suggestion != w:
                changes.append((w, suggestion))
            else:
                oov_no_suggest.append(w)

        if changes:
            logger.debug("Query corrections: %s", changes)
        if oov_no_suggest:
            logger.debug("No correction within distance %d for: %s", max_dist, oov_no_suggest)

        return corrected, changes, oov_no_suggest

    def get_similar_words(self, word: str, vocab: Iterable[str], doc_freq: Dict[str, int],
                          max_dist: int = None, top_k: int = 5) -> List[Tuple[str, int, int]]:
        """
        Get similar words to a given word.

        Args:
            word: Input word.
            vocab: Known terms.
            doc_freq: Document frequency per term, used to break ties.
            max_dist: Maximum edit distance to consider.
            top_k: Number of top similar words to return.

        Returns:
            List of (word, distance, frequency) tuples sorted by distance then frequency.
        """
        if max_dist is None:
            max_dist = self.config.MAX_EDIT_DISTANCE

        similar_words = []
        for cand in vocab:
            if abs(len(cand) - len(word)) > max_dist:
                continue
            dist = edit_distance(word, cand, max_dist=max_dist)
            if dist <= max_dist:
                similar_words.append((cand, dist, doc_freq.get(cand, 0)))

        # Sort by distance first, then by frequency (descending), then alphabetically
        similar_words.sort(key=lambda x: (x[1], -x[2], x[0]))
        return similar_words[:top_k]
