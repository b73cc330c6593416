"""
Document ranking and scoring module.

This module handles TF-IDF weighting, document vector norms and cosine
similarity ranking over the inverted index.
"""

import logging
import math
from collections import Counter, defaultdict
from typing import List, Tuple

from .indexer import InvertedIndex

logger = logging.getLogger(__name__)


class Ranker:
    """Handles document ranking using TF-IDF and cosine similarity."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def idf(self, index: InvertedIndex, term: str) -> float:
        """
        Inverse document frequency of a term.

        IDF formula: idf = ln(N / (1 + df)). The smoothed denominator makes it
        negative for terms found in (nearly) every document; that is kept.
        """
        return math.log(index.doc_count / (1 + index.get_document_frequency(term)))

    def compute_doc_norms(self, index: InvertedIndex) -> None:
        """
        Recompute the L2 norm of every document's TF-IDF vector.

        This is a full pass over the index and replaces ``index.doc_norms``.

        Args:
            index: The inverted index.
        """
        doc_norm2 = defaultdict(float)

        for term, postings in index.postings.items():
            term_idf = self.idf(index, term)
            for p in postings:
                w = p.tf * term_idf
                doc_norm2[p.doc_id] += w * w

        index.doc_norms = {doc_id: math.sqrt(v) for doc_id, v in doc_norm2.items()}
        logger.info("Computed document norms for %d documents over %d terms",
                    len(index.doc_norms), len(index.postings))

    def query_weights(self, index: InvertedIndex, query_terms: List[str]) -> Tuple[dict, float]:
        """
        Build the query TF-IDF vector.

        Args:
            index: The inverted index.
            query_terms: Query terms after correction.

        Returns:
            Tuple of (weights, norm) where weights maps term -> tf * idf.
        """
        if not query_terms:
            return {}, 0.0

        total = len(query_terms)
        weights = {}
        for term, count in Counter(query_terms).items():
            weights[term] = (count / total) * self.idf(index, term)

        q_norm = math.sqrt(sum(w * w for w in weights.values()))
        return weights, q_norm

    def cosine_rank(self, query_terms: List[str], index: InvertedIndex, limit: int = 0) -> List[Tuple[int, float]]:
        """
        Rank documents using cosine similarity over TF-IDF vectors.

        Documents with a zero (or not yet computed) norm are left out, as is
        everything when the query norm is zero.

        Args:
            query_terms: Query terms after correction.
            index: The inverted index.
            limit: Maximum number of results; 0 or less means unlimited.

        Returns:
            List of (doc_id, score) tuples sorted by score descending, then
            doc_id ascending.
        """
        if index.doc_count == 0:
            return []

        q_weights, q_norm = self.query_weights(index, query_terms)
        if q_norm == 0.0:
            return []

        # Accumulate dot-products over candidate docs by iterating postings per term
        scores = defaultdict(float)
        for term, wq in q_weights.items():
            term_idf = self.idf(index, term)
            for p in index.get_posting_list(term):
                scores[p.doc_id] += wq * (p.tf * term_idf)

        ranked = []
        for doc_id, dot in scores.items():
            dn = index.doc_norms.get(doc_id, 0.0)
            if dn != 0.0:
                ranked.append((doc_id, dot / (dn * q_norm)))

        ranked.sort(key=lambda x: (-x[1], x[0]))
        if limit > 0:
            return ranked[:limit]
        return ranked

    def get_top_tokens_for_document(self, doc_id: int, index: InvertedIndex, topk: int = 10) -> List[Tuple[str, float]]:
        """
        Get the top-k highest TF-IDF weighted terms of a document.

        Args:
            doc_id: Document ID.
            index: The inverted index.
            topk: Number of top terms to return.

        Returns:
            List of (term, weight) tuples sorted by weight descending.
        """
        term_weights = []
        for term, postings in index.postings.items():
            for p in postings:
                if p.doc_id == doc_id:
                    term_weights.append((term, p.tf * self.idf(index, term)))
                    break

        term_weights.sort(key=lambda x: (-x[1], x[0]))
        return term_weights[:topk]

    def summarize_ranking_stats(self, index: InvertedIndex) -> None:
        """Log summary statistics about the ranking tables."""
        if not index.postings or not index.doc_norms:
            logger.info("No ranking statistics available.")
            return

        idf_values = [self.idf(index, term) for term in index.postings]
        norm_values = list(index.doc_norms.values())
        logger.info("IDF range: %.3f - %.3f (average %.3f)",
                    min(idf_values), max(idf_values), sum(idf_values) / len(idf_values))
        logger.info("Document norm range: %.3f - %.3f (average %.3f)",
                    min(norm_values), max(norm_values), sum(norm_values) / len(norm_values))
