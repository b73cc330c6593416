#!/usr/bin/env python3
"""
Main entry point for the TF-IDF text search engine.

This script provides a command-line interface for the search engine.
"""

from textsearch.cli import main


if __name__ == "__main__":
    main()
