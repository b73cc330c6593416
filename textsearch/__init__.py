"""
TF-IDF Text Search

An in-memory full-text search engine with TF-IDF cosine ranking and
edit-distance correction of unknown query terms.

Main components:
- TextSearchEngine: Main search engine class
- TextNormalizer: Lowercasing, preprocessing, tokenization and stop words
- Indexer / InvertedIndex: Inverted index construction and storage
- Ranker: Document norms and TF-IDF cosine similarity ranking
- AutoCorrect: Query-term correction using Levenshtein distance
- Tokenizers: Whitespace, regex and SentencePiece BPE tokenizers
"""

from .search_engine import TextSearchEngine, SearchResult
from .utils import TextNormalizer, ResultFormatter
from .indexer import Indexer, InvertedIndex, Document, Posting
from .ranker import Ranker
from .autocorrect import AutoCorrect, edit_distance
from .tokenizer import WhitespaceTokenizer, RegexTokenizer, BPETokenizer

__version__ = "1.0.0"

__all__ = [
    "TextSearchEngine",
    "SearchResult",
    "TextNormalizer",
    "ResultFormatter",
    "Indexer",
    "InvertedIndex",
    "Document",
    "Posting",
    "Ranker",
    "AutoCorrect",
    "edit_distance",
    "WhitespaceTokenizer",
    "RegexTokenizer",
    "BPETokenizer",
]
