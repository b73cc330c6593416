"""
Command-line interface for the TF-IDF text search engine.
"""

import argparse
import logging
import sys
from pathlib import Path

from .search_engine import TextSearchEngine
from .utils import ResultFormatter


def read_stop_words(path: str):
    """Read one stop word per line, skipping blanks and # comments."""
    words = []
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            words.append(line)
    return words


def print_results(engine: TextSearchEngine, formatter: ResultFormatter, query: str, top_k: int, fmt: str) -> None:
    """Run one query and print its results."""
    results = engine.search(query, limit=top_k)

    if engine.last_corrections:
        fixes = ", ".join(f"{orig} -> {new}" for orig, new in engine.last_corrections)
        print(f"Query corrections: {fixes}")

    if not results:
        print("No matching documents found.")
        return

    query_terms = engine.preprocess_query(query)
    if fmt == "simple":
        formatter.print_results_simple(results, query_terms)
    else:
        formatter.print_results_table(results, query_terms)


def interactive_search(engine: TextSearchEngine, formatter: ResultFormatter, top_k: int, fmt: str) -> None:
    """
    Start an interactive search session.

    Type 'exit' or 'quit' to end the session.
    """
    print("\n=== Interactive Search ===")
    print("Type 'exit' or 'quit' to quit.")

    while True:
        try:
            query = input("Enter search query: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nExiting.")
            break

        if not query:
            continue
        if query.lower() in ('exit', 'quit'):
            print("Goodbye!")
            break

        print_results(engine, formatter, query, top_k, fmt)


def main(argv=None):
    """Main entry point for the search engine."""
    parser = argparse.ArgumentParser(
        description="In-memory TF-IDF text search with fuzzy query correction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  text-search --corpus-dir ./books                    # Start interactive search
  text-search --corpus-dir ./books --query "bank"     # Single query mode
  text-search --corpus-dir ./books --stats            # Show index statistics
        """
    )

    parser.add_argument(
        "--corpus-dir",
        type=str,
        required=True,
        help="Directory containing text files; each paragraph becomes a document"
    )

    parser.add_argument(
        "--query",
        type=str,
        default=None,
        help="Single query to process (non-interactive mode)"
    )

    parser.add_argument(
        "--top-k",
        type=int,
        default=None,
        help="Number of results to return (default: 10, 0 for all)"
    )

    parser.add_argument(
        "--stop-words",
        type=str,
        default=None,
        help="File with one stop word per line"
    )

    parser.add_argument(
        "--format",
        choices=["table", "simple"],
        default=None,
        help="Result format (default: table)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show index statistics after building"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    config_dict = {"VERBOSE": True, "LOG_LEVEL": "DEBUG"} if args.verbose else {}

    try:
        stop_words = read_stop_words(args.stop_words) if args.stop_words else None
        engine = TextSearchEngine(stop_words=stop_words, config_dict=config_dict)
    except Exception as e:
        print(f"Error initializing search engine: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, engine.config.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        paragraphs = engine.load_documents(args.corpus_dir)
        engine.seed_documents(paragraphs)
    except Exception as e:
        print(f"Error building index: {e}")
        sys.exit(1)

    if args.stats:
        print("\n=== Index Statistics ===")
        for key, value in engine.get_stats().items():
            print(f"{key}: {value}")
        engine.index.summarize_index()
        engine.ranker.summarize_ranking_stats(engine.index)

    top_k = args.top_k if args.top_k is not None else engine.config.TOP_K_RESULTS
    fmt = args.format or engine.config.RESULT_FORMAT
    formatter = ResultFormatter(engine.config)

    if args.query is not None:
        print_results(engine, formatter, args.query, top_k, fmt)
    elif not args.stats:
        interactive_search(engine, formatter, top_k, fmt)


if __name__ == "__main__":
    main()
