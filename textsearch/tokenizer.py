"""
Tokenization strategies.

A tokenizer is any callable that turns a string into a list of tokens.
This module provides the default whitespace tokenizer, a regex word
tokenizer, and a BPE (Byte Pair Encoding) tokenizer backed by SentencePiece.
"""

import logging
import os
import re
import tempfile
from typing import Iterable, List

import sentencepiece as spm

logger = logging.getLogger(__name__)


class WhitespaceTokenizer:
    """Splits text on runs of whitespace."""

    def __call__(self, text: str) -> List[str]:
        return text.split()


class RegexTokenizer:
    """Extracts words matching a regular expression."""

    def __init__(self, pattern: str = r"[a-z0-9']+"):
        self.word_regex = re.compile(pattern)

    def __call__(self, text: str) -> List[str]:
        return self.word_regex.findall(text)


class BPETokenizer:
    """Handles BPE tokenization and model management."""

    def __init__(self, config):
        """Initialize with configuration."""
        self.config = config
        self.sp = None

    def train(self, texts: Iterable[str], model_prefix: str = None, vocab_size: int = None) -> str:
        """
        Train a SentencePiece BPE model on the provided texts.

        Texts are lowercased when ``config.LOWERCASE`` is set, so the model
        sees the same form the normalizer hands to the tokenizer.

        Args:
            texts: Training texts.
            model_prefix: Prefix for model files.
            vocab_size: Target vocabulary size.

        Returns:
            Path to the trained model file.
        """
        if model_prefix is None:
            model_prefix = self.config.BPE_MODEL_PREFIX
        if vocab_size is None:
            vocab_size = self.config.BPE_VOCAB_SIZE

        if self.config.LOWERCASE:
            corpus_text = "\n".join(text.lower() for text in texts)
        else:
            corpus_text = "\n".join(texts)

        # SentencePieceTrainer expects a file path
        with tempfile.NamedTemporaryFile(mode="w", delete=False, encoding="utf-8") as tmp:
            tmp.write(corpus_text)
            tmp_path = tmp.name

        try:
            spm.SentencePieceTrainer.train(
                input=tmp_path,
                model_prefix=model_prefix,
                vocab_size=vocab_size,
                model_type="bpe",
                character_coverage=1.0,
                input_sentence_size=0,
                shuffle_input_sentence=False,
                hard_vocab_limit=False,
            )
        finally:
            os.unlink(tmp_path)

        model_path = f"{model_prefix}.model"
        logger.info("Trained BPE model %s (vocab_size=%d)", model_path, vocab_size)
        return model_path

    def load(self, model_path: str) -> spm.SentencePieceProcessor:
        """
        Load a trained SentencePiece model from disk.

        Args:
            model_path: Path to the model file.

        Returns:
            Loaded SentencePiece processor.
        """
        sp = spm.SentencePieceProcessor()
        sp.load(model_path)
        self.sp = sp
        return sp

    def __call__(self, text: str) -> List[str]:
        if self.sp is None:
            raise RuntimeError("BPE model not loaded. Call load() first.")
        return self.sp.encode(text, out_type=str)
