"""
Utility classes for text normalization and result formatting.

This module contains the text normalization pipeline shared by indexing and
querying, paragraph splitting for corpora loaded from disk, and highlighting
and result formatting for display.
"""

import re
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from .tokenizer import WhitespaceTokenizer


class TextNormalizer:
    """
    Turns raw text into index terms.

    Text is lowercased (when ``config.LOWERCASE`` is set), passed through the
    extra preprocessing steps in order, tokenized once, and stripped of stop
    words. Stop words are matched verbatim against the tokens, so they must be
    given in the case the preprocessing produces.
    """

    def __init__(self, config, stop_words: Optional[Iterable[str]] = None,
                 preprocessors: Optional[Sequence[Callable[[str], str]]] = None,
                 tokenizer: Optional[Callable[[str], List[str]]] = None):
        """Initialize with configuration; ``None`` options fall back to defaults."""
        self.config = config
        self.stop_words = frozenset(stop_words or ())
        self.preprocessors = list(preprocessors or ())
        self.tokenizer = tokenizer if tokenizer is not None else WhitespaceTokenizer()

    def preprocess(self, text: str) -> str:
        """Apply lowercasing and the configured preprocessing steps."""
        if self.config.LOWERCASE:
            text = text.lower()
        for step in self.preprocessors:
            text = step(text)
        return text

    def filter_stop_words(self, tokens: List[str]) -> List[str]:
        """Drop tokens that are in the stop-word set."""
        if not self.stop_words:
            return list(tokens)
        return [tok for tok in tokens if tok not in self.stop_words]

    def normalize(self, text: str) -> Tuple[str, List[str]]:
        """
        Run the full pipeline on a piece of text.

        Args:
            text: Raw input text.

        Returns:
            Tuple of (preprocessed_text, tokens). The token list may be empty.
        """
        processed = self.preprocess(text)
        tokens = self.filter_stop_words(self.tokenizer(processed))
        return processed, tokens

    def tokenize(self, text: str) -> List[str]:
        """Return the filtered tokens of ``text``."""
        return self.normalize(text)[1]


def split_into_paragraphs(text: str, min_par_chars: int) -> List[str]:
    """
    Split raw text into paragraphs using 2+ newline boundaries.

    Args:
        text: Raw text to split.
        min_par_chars: Minimum characters for a valid paragraph.

    Returns:
        List of paragraph strings, order preserved.
    """
    paras = []
    for seg in re.split(r'\n{2,}', text):
        p = seg.strip()
        if len(p) >= min_par_chars:
            paras.append(p)
    return paras


class ResultFormatter:
    """Handles result formatting and display."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config

    def _format_tokens(self, tokens: List[str], maxn: int = 12) -> str:
        """Return tokens as a compact string; truncate long lists with an ellipsis."""
        if len(tokens) <= maxn:
            return "[" + ", ".join(tokens) + "]"
        head = ", ".join(tokens[:maxn//2])
        tail = ", ".join(tokens[-maxn//2:])
        return "[" + head + ", …, " + tail + "]"

    def highlight_words(self, text: str, words: List[str]) -> str:
        """
        Naive console-safe highlighter: wraps whole-word matches with the
        configured markers.

        Args:
            text: Text to highlight.
            words: List of words to highlight.

        Returns:
            Highlighted text.
        """
        # Longer words first so they are not shadowed by their prefixes
        uniq = sorted({w for w in words if w}, key=len, reverse=True)
        if not uniq:
            return text

        def repl(match):
            return f"{self.config.HIGHLIGHT_START}{match.group(0)}{self.config.HIGHLIGHT_END}"

        patterns = [r"(?<!\w)" + re.escape(w) + r"(?!\w)" for w in uniq]
        flags = re.IGNORECASE if not self.config.HIGHLIGHT_CASE_SENSITIVE else 0
        regex = re.compile("|".join(patterns), flags=flags)
        return regex.sub(repl, text)

    def make_snippet(self, text: str, query_words: List[str], max_chars: int = None) -> str:
        """
        Produce a snippet with highlighted query words and trimmed to max_chars.

        Args:
            text: Text to create snippet from.
            query_words: Words to highlight in snippet.
            max_chars: Maximum characters in snippet.

        Returns:
            Highlighted snippet string.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        # Highlight first, then trim so markers stay visible
        highlighted = self.highlight_words(text, query_words)
        if len(highlighted) <= max_chars:
            return highlighted.replace("\n", " ")

        marker = highlighted.find(self.config.HIGHLIGHT_START)
        if marker == -1:
            return highlighted[:max_chars].replace("\n", " ")

        # Center window around the first marker
        start = max(0, marker - max_chars // 3)
        end = min(len(highlighted), start + max_chars)
        snippet = highlighted[start:end]

        if start > 0:
            snippet = "…" + snippet
        if end < len(highlighted):
            snippet = snippet + "…"

        return snippet.replace("\n", " ")

    def print_results_table(self, results, query_tokens: List[str], max_chars: int = None) -> None:
        """
        Render results as a clean ASCII table.

        Args:
            results: List of SearchResult.
            query_tokens: Query terms used for search; also highlighted.
            max_chars: Maximum characters in snippet.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not results:
            print("No matching documents found.")
            return

        rows = []
        for rank, res in enumerate(results, start=1):
            snippet = self.make_snippet(res.text, query_tokens, max_chars=max_chars)
            rows.append([str(rank), str(res.doc_id), f"{res.score:.4f}", snippet])

        headers = ["#", "Doc", "Score", "Snippet"]

        # Compute column widths with a cap on the snippet column
        max_widths = [4, 8, 8, max_chars]
        col_widths = []
        for j, h in enumerate(headers):
            width = len(h)
            for row in rows:
                width = max(width, len(row[j]))
            col_widths.append(min(width, max_widths[j]))

        def clip_pad(s, w):
            if len(s) > w:
                return s[: max(0, w - 1)] + "…" if w >= 2 else s[:w]
            return s.ljust(w)

        line = " | ".join(clip_pad(h, col_widths[i]) for i, h in enumerate(headers))
        sep = "-+-".join("-" * col_widths[i] for i in range(len(headers)))
        print("\n=== Top Results ===")
        print(line)
        print(sep)

        for row in rows:
            print(" | ".join(clip_pad(row[i], col_widths[i]) for i in range(len(headers))))

        print(f"\n(query terms used: {self._format_tokens(query_tokens)})\n")

    def print_results_simple(self, results, query_tokens: List[str], max_chars: int = None) -> None:
        """
        Print a simple view of ranked results.

        Args:
            results: List of SearchResult.
            query_tokens: Query terms used for search; also highlighted.
            max_chars: Maximum characters in snippet.
        """
        if max_chars is None:
            max_chars = self.config.SNIPPET_CHARS

        if not results:
            print("No matching documents found.")
            return

        print("\n=== Top Results ===")
        for rank, res in enumerate(results, start=1):
            snippet = self.make_snippet(res.text, query_tokens, max_chars=max_chars)
            if self.config.SHOW_SCORES:
                print(f"#{rank}  doc={res.doc_id}  score={res.score:.4f}")
            else:
                print(f"#{rank}  doc={res.doc_id}")
            print(f"     {snippet}")

        print(f"\n(query terms used: {self._format_tokens(query_tokens)})\n")
