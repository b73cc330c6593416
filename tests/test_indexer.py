import math

import pytest

from textsearch.indexer import Document, Indexer, InvertedIndex, Posting
from textsearch.ranker import Ranker
from textsearch.search_engine import load_config


@pytest.fixture
def config():
    return load_config()


@pytest.fixture
def index(config):
    idx = InvertedIndex()
    indexer = Indexer(config)
    indexer.add_document(idx, "a b a c", ["a", "b", "a", "c"])
    indexer.add_document(idx, "b d", ["b", "d"])
    return idx


def test_add_document_records_postings_and_frequencies(index):
    assert index.doc_count == 2
    assert index.documents == {1: Document(1, "a b a c"), 2: Document(2, "b d")}
    assert index.get_posting_list("a") == [Posting(1, 0.5)]
    assert index.get_posting_list("b") == [Posting(1, 0.25), Posting(2, 0.5)]
    assert index.get_posting_list("missing") == []
    # Document-level counts, not occurrences
    assert index.doc_freq == {"a": 1, "b": 2, "c": 1, "d": 1}
    assert list(index.vocab) == ["a", "b", "c", "d"]


def test_empty_token_list_is_skipped(config, index):
    assert Indexer(config).add_document(index, "", []) is None
    assert index.doc_count == 2
    assert len(index) == 2
    assert Indexer(config).add_document(index, "e", ["e"]) == 3


def test_add_document_never_touches_norms(config, index):
    assert index.doc_norms == {}
    Ranker(config).compute_doc_norms(index)
    before = dict(index.doc_norms)
    Indexer(config).add_document(index, "a", ["a"])
    assert index.doc_norms == before


def test_every_posting_is_consistent_with_the_tables(index):
    for term, postings in index.postings.items():
        assert term in index
        assert index.get_document_frequency(term) == len(postings)
        doc_ids = [p.doc_id for p in postings]
        assert len(doc_ids) == len(set(doc_ids))
        for p in postings:
            assert p.doc_id in index.documents
            assert 0 < p.tf <= 1


def test_read_helpers(index):
    assert index.get_collection_frequency("b") == pytest.approx(0.75)
    assert index.get_documents_containing(["a", "d"]) == {1, 2}
    assert index.get_documents_containing(["zzz"]) == set()
    assert index.get_document(2).text == "b d"
    assert index.get_document(99) is None


def test_compute_doc_norms(config, index):
    Ranker(config).compute_doc_norms(index)
    idf_a = math.log(2 / 2)  # df 1
    idf_b = math.log(2 / 3)  # df 2, negative
    expected_1 = math.sqrt((0.5 * idf_a) ** 2 + (0.25 * idf_b) ** 2 + (0.25 * idf_a) ** 2)
    expected_2 = math.sqrt((0.5 * idf_b) ** 2 + (0.5 * idf_a) ** 2)
    assert index.doc_norms[1] == pytest.approx(expected_1)
    assert index.doc_norms[2] == pytest.approx(expected_2)


def test_idf_can_be_negative(config, index):
    ranker = Ranker(config)
    assert ranker.idf(index, "b") < 0
    assert ranker.idf(index, "a") == 0
    assert ranker.idf(index, "unknown") == pytest.approx(math.log(2))


def test_top_tokens_for_document(config):
    idx = InvertedIndex()
    indexer = Indexer(config)
    indexer.add_document(idx, "x x y", ["x", "x", "y"])
    indexer.add_document(idx, "z", ["z"])
    indexer.add_document(idx, "w", ["w"])
    top = Ranker(config).get_top_tokens_for_document(1, idx, topk=1)
    assert top == [("x", pytest.approx((2 / 3) * math.log(3 / 2)))]


def test_summaries_log(config, index, caplog):
    caplog.set_level("INFO")
    index.summarize_index()
    Ranker(config).compute_doc_norms(index)
    Ranker(config).summarize_ranking_stats(index)
    assert "4 terms, 5 postings, 2 documents" in caplog.text
    assert "Document norm range" in caplog.text
