#!/usr/bin/env python3
"""
Example usage of the TF-IDF text search engine.

This script demonstrates how to use the search engine programmatically.
"""

import sys
from pathlib import Path

# Add parent directory to path to import textsearch
sys.path.append(str(Path(__file__).parent.parent))

from textsearch import RegexTokenizer, TextSearchEngine

COMPANIES = [
    "Hello world",
    "Ameren (St. Louis)",
    "Anheuser-Busch (St. Louis)",
    "Bass Pro Shops (Springfield)",
    "Centene Corporation (St. Louis)",
    "Commerce Bancshares (Kansas City)",
    "Edward Jones Investments (St. Louis)",
    "Emerson Electric (Ferguson)",
    "H&R Block (Kansas City)",
    "PT Bank Mandiri (Persero) Tbk (Jakarta)",
]


def basic_search_example():
    """Demonstrate basic search functionality."""
    print("=== Basic Search Example ===")

    engine = TextSearchEngine()
    engine.seed_documents(COMPANIES)

    for query in ["hello", "corpration", "mandiri", "kansas city"]:
        results = engine.search(query, limit=3)
        print(f"\nSearching for: '{query}'")
        if engine.last_corrections:
            print(f"  corrected: {engine.last_corrections}")
        for res in results:
            print(f"  [{res.doc_id}] {res.score:.4f}  {res.text}")


def custom_pipeline_example():
    """Demonstrate stop words, preprocessing and a regex tokenizer."""
    print("\n=== Custom Pipeline Example ===")

    engine = TextSearchEngine(
        stop_words=["st", "the"],
        preprocessors=[lambda s: s.replace("&", " and ")],
        tokenizer=RegexTokenizer(),
    )
    engine.seed_documents(COMPANIES)

    for res in engine.search("louis", limit=5):
        print(f"  [{res.doc_id}] {res.score:.4f}  {res.text}")
    print(f"  did you mean: {engine.suggest('bloc')}")


def incremental_example():
    """Add documents one at a time, then finalize the norms."""
    print("\n=== Incremental Example ===")

    engine = TextSearchEngine()
    for text in COMPANIES:
        engine.add_document(text)

    print(f"  before compute_doc_lengths: {engine.search('bank')}")
    engine.compute_doc_lengths()
    print(f"  after compute_doc_lengths:  {engine.search('bank')}")
    print(f"  stats: {engine.get_stats()}")


def main():
    """Run all examples."""
    basic_search_example()
    custom_pipeline_example()
    incremental_example()


if __name__ == "__main__":
    main()
