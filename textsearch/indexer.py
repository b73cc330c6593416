"""
Inverted index construction and management.

This module holds the in-memory inverted index (postings, document
frequencies, vocabulary, document norms) and the builder that adds
documents to it one at a time.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, NamedTuple, Optional, Set

logger = logging.getLogger(__name__)


class Document(NamedTuple):
    doc_id: int
    text: str


class Posting(NamedTuple):
    doc_id: int
    tf: float  # occurrences / filtered token count of the document


class InvertedIndex:
    """
    Aggregate owner of all index tables.

    Tables are only mutated by ``Indexer.add_document`` and
    ``Ranker.compute_doc_norms``; everything else reads.
    """

    def __init__(self):
        self.documents: Dict[int, Document] = {}
        self.postings: Dict[str, List[Posting]] = {}
        self.doc_freq: Dict[str, int] = {}
        self.vocab: Dict[str, None] = {}  # insertion-ordered set of terms
        self.doc_norms: Dict[int, float] = {}
        self.doc_count = 0

    def __len__(self) -> int:
        return len(self.documents)

    def __contains__(self, term: str) -> bool:
        return term in self.vocab

    def get_document(self, doc_id: int) -> Optional[Document]:
        return self.documents.get(doc_id)

    def get_posting_list(self, term: str) -> List[Posting]:
        """
        Get the posting list for a term.

        Args:
            term: Term to look up.

        Returns:
            List of postings for the term, empty if unknown.
        """
        return self.postings.get(term, [])

    def get_document_frequency(self, term: str) -> int:
        """Number of documents containing the term."""
        return self.doc_freq.get(term, 0)

    def get_collection_frequency(self, term: str) -> float:
        """Sum of the term's frequency across all documents containing it."""
        return sum(p.tf for p in self.get_posting_list(term))

    def get_documents_containing(self, terms: Iterable[str]) -> Set[int]:
        """
        Get the set of documents containing any of the given terms.

        Args:
            terms: Terms to search for.

        Returns:
            Set of document IDs containing at least one of the terms.
        """
        doc_ids = set()
        for term in terms:
            doc_ids.update(p.doc_id for p in self.get_posting_list(term))
        return doc_ids

    def summarize_index(self) -> None:
        """Log a summary of the inverted index."""
        num_terms = len(self.postings)
        total_postings = sum(len(plist) for plist in self.postings.values())

        logger.info("Inverted index: %d terms, %d postings, %d documents",
                    num_terms, total_postings, len(self.documents))
        if num_terms:
            posting_lengths = sorted(len(plist) for plist in self.postings.values())
            logger.info("Posting list length: min %d, max %d, median %d, average %.2f",
                        posting_lengths[0], posting_lengths[-1],
                        posting_lengths[len(posting_lengths) // 2],
                        total_postings / num_terms)


class Indexer:
    """Adds normalized documents to an inverted index."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def add_document(self, index: InvertedIndex, text: str, tokens: List[str]) -> Optional[int]:
        """
        Add one normalized document to the index.

        Document norms are not touched; they must be recomputed before
        querying.

        Args:
            index: Index to update.
            text: Normalized document text, stored as-is.
            tokens: Filtered tokens of the document.

        Returns:
            The new document ID, or None if there were no tokens to index.
        """
        if not tokens:
            logger.debug("Skipping document with no indexable tokens")
            return None

        index.doc_count += 1
        doc_id = index.doc_count
        index.documents[doc_id] = Document(doc_id, text)

        total = len(tokens)
        counts = Counter(tokens)  # term -> occurrences in this document
        for term, count in counts.items():
            index.vocab[term] = None
            index.doc_freq[term] = index.doc_freq.get(term, 0) + 1
            index.postings.setdefault(term, []).append(Posting(doc_id, count / total))

        if self.config.VERBOSE:
            logger.debug("Indexed document %d: %d tokens, %d distinct terms", doc_id, total, len(counts))
        return doc_id
