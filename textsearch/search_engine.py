"""
Main TextSearchEngine class that orchestrates the search pipeline.

This module contains the TextSearchEngine class that coordinates text
normalization, indexing, norm computation, query correction and ranking.
"""

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Callable, Dict, Iterable, List, NamedTuple, Optional, Sequence, Tuple

from . import config as default_config
from .autocorrect import AutoCorrect
from .indexer import Indexer, InvertedIndex
from .ranker import Ranker
from .utils import TextNormalizer, split_into_paragraphs

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    text: str  # normalized document text
    score: float
    doc_id: int


def load_config(config_dict: Optional[Dict[str, Any]] = None) -> SimpleNamespace:
    """Copy the module defaults and apply overrides from ``config_dict``."""
    values = {key: getattr(default_config, key) for key in dir(default_config) if key.isupper()}
    if config_dict:
        values.update(config_dict)
    return SimpleNamespace(**values)


class TextSearchEngine:
    """
    In-memory TF-IDF search engine with fuzzy query-term correction.

    Documents are added one at a time with ``add_document`` or in bulk with
    ``seed_documents``. Document norms are only recomputed by
    ``compute_doc_lengths`` (which ``seed_documents`` calls once at the end);
    until then a search treats every new document as having a zero norm and
    leaves it out of the results.

    The engine is not thread-safe. Callers sharing it between threads must
    serialize writes themselves.
    """

    def __init__(self, stop_words: Optional[Iterable[str]] = None,
                 preprocessors: Optional[Sequence[Callable[[str], str]]] = None,
                 tokenizer: Optional[Callable[[str], List[str]]] = None,
                 max_edit_distance: Optional[int] = None,
                 config_dict: Optional[Dict[str, Any]] = None):
        """
        Initialize the TextSearchEngine.

        Args:
            stop_words: Tokens to drop after tokenization, matched verbatim.
            preprocessors: Extra text transforms applied after lowercasing, in order.
            tokenizer: Callable splitting text into tokens. Defaults to whitespace.
            max_edit_distance: Maximum distance for query-term correction.
            config_dict: Optional configuration overrides.
        """
        self.config = load_config(config_dict)
        if max_edit_distance is not None:
            self.config.MAX_EDIT_DISTANCE = max_edit_distance

        # Initialize components
        self.normalizer = TextNormalizer(self.config, stop_words=stop_words,
                                         preprocessors=preprocessors, tokenizer=tokenizer)
        self.indexer = Indexer(self.config)
        self.ranker = Ranker(self.config)
        self.auto_correct = AutoCorrect(self.config)

        # State
        self.index = InvertedIndex()
        self.last_corrections: List[Tuple[str, str]] = []
        self._norms_stale = False

    def add_document(self, text: str) -> Optional[int]:
        """
        Add a single document to the index.

        Call ``compute_doc_lengths`` once all documents are added.

        Args:
            text: Raw document text.

        Returns:
            The assigned document ID, or None if the document had no
            indexable tokens after normalization.
        """
        processed, tokens = self.normalizer.normalize(text)
        doc_id = self.indexer.add_document(self.index, processed, tokens)
        if doc_id is not None:
            self._norms_stale = True
        return doc_id

    def seed_documents(self, texts: Iterable[str]) -> List[int]:
        """
        Add documents in order and compute document norms once at the end.

        Args:
            texts: Raw document texts.

        Returns:
            IDs of the documents that were indexed, in input order.
        """
        doc_ids = []
        for text in texts:
            doc_id = self.add_document(text)
            if doc_id is not None:
                doc_ids.append(doc_id)
        self.compute_doc_lengths()
        return doc_ids

    def compute_doc_lengths(self) -> None:
        """Recompute the TF-IDF vector norm of every document."""
        self.ranker.compute_doc_norms(self.index)
        self._norms_stale = False

    def preprocess_query(self, query: str) -> List[str]:
        """
        Normalize a query and correct terms missing from the vocabulary.

        Args:
            query: Raw query string.

        Returns:
            Query terms after correction.
        """
        terms = self.normalizer.tokenize(query)
        if not self.config.AUTO_CORRECT_ENABLED:
            self.last_corrections = []
            return terms

        corrected, changes, _ = self.auto_correct.autocorrect_query_words(
            terms, self.index.vocab, max_dist=self.config.MAX_EDIT_DISTANCE
        )
        self.last_corrections = changes
        return corrected

    def search(self, query: str, limit: int = 0) -> List[SearchResult]:
        """
        Search for documents matching the given query.

        Args:
            query: Search query string.
            limit: Maximum number of results; 0 or less means unlimited.

        Returns:
            List of SearchResult sorted by descending score.
        """
        if self._norms_stale:
            logger.warning("Searching with stale document norms; call compute_doc_lengths() "
                           "after adding documents")

        query_terms = self.preprocess_query(query)
        if not query_terms:
            return []

        ranked = self.ranker.cosine_rank(query_terms, self.index, limit=limit)
        logger.debug("Query %r -> terms %s, %d results", query, query_terms, len(ranked))
        return [SearchResult(self.index.documents[doc_id].text, score, doc_id) for doc_id, score in ranked]

    def suggest(self, word: str, top_k: int = 5) -> List[Tuple[str, int, int]]:
        """
        Get vocabulary terms close to ``word``.

        Args:
            word: Word to look up; normalized like a query before matching.
            top_k: Number of suggestions to return.

        Returns:
            List of (term, distance, document frequency) tuples.
        """
        terms = self.normalizer.tokenize(word)
        if not terms:
            return []
        return self.auto_correct.get_similar_words(
            terms[0], self.index.vocab, self.index.doc_freq,
            max_dist=self.config.MAX_EDIT_DISTANCE, top_k=top_k
        )

    def load_documents(self, corpus_dir, min_par_chars: Optional[int] = None) -> List[str]:
        """
        Read text files from a directory and split them into paragraphs.

        Files are read in name order so document IDs are reproducible.
        Nothing is indexed; pass the result to ``seed_documents``.

        Args:
            corpus_dir: Directory containing text files.
            min_par_chars: Minimum characters for a paragraph.

        Returns:
            List of paragraph texts.
        """
        if min_par_chars is None:
            min_par_chars = self.config.MIN_PARAGRAPH_CHARS

        corpus_dir = Path(corpus_dir)
        files = sorted(p for p in corpus_dir.iterdir()
                       if p.is_file() and p.suffix in self.config.TEXT_EXTENSIONS)

        paragraphs = []
        for path in files:
            text = path.read_text(encoding="utf-8", errors="ignore")
            paragraphs.extend(split_into_paragraphs(text, min_par_chars))

        logger.info("Loaded %d paragraphs from %d files in %s", len(paragraphs), len(files), corpus_dir)
        return paragraphs

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about the index.

        Returns:
            Dictionary containing various statistics.
        """
        docs = self.index.documents
        return {
            "num_documents": len(docs),
            "num_terms": len(self.index.vocab),
            "num_postings": sum(len(plist) for plist in self.index.postings.values()),
            "avg_document_length": sum(len(d.text) for d in docs.values()) / len(docs) if docs else 0,
            "norms_stale": self._norms_stale,
        }
