"""
Configuration settings for the TF-IDF text search engine.

This module contains all configurable parameters for the search engine.
Pass a ``config_dict`` to ``TextSearchEngine`` to override any of them.
"""

# Text processing settings
LOWERCASE = True  # Lowercase text before any other normalization step
MIN_PARAGRAPH_CHARS = 30  # Minimum characters for a paragraph loaded from disk

# Search settings
MAX_EDIT_DISTANCE = 2  # Maximum edit distance for query-term correction
TOP_K_RESULTS = 10  # Number of results the CLI asks for
AUTO_CORRECT_ENABLED = True  # Enable/disable query-term correction

# BPE (Byte Pair Encoding) settings, only used by BPETokenizer
BPE_VOCAB_SIZE = 8000  # Target vocabulary size for BPE
BPE_MODEL_PREFIX = "bpe_model"  # Prefix for BPE model files

# Corpus settings
TEXT_EXTENSIONS = ['.txt']  # Supported text file extensions

# Logging settings
VERBOSE = False  # Log per-document and per-query detail
LOG_LEVEL = "INFO"  # Logging level: DEBUG, INFO, WARNING, ERROR

# Highlighting settings
SNIPPET_CHARS = 200  # Maximum characters in result snippets
HIGHLIGHT_START = "[["  # Start marker for highlighting
HIGHLIGHT_END = "]]"  # End marker for highlighting
HIGHLIGHT_CASE_SENSITIVE = False  # Case sensitivity for highlighting

# Result formatting
RESULT_FORMAT = "table"  # Result format: "table" or "simple"
SHOW_SCORES = True  # Show relevance scores in results
