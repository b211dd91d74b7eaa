"""
Unit tests for similarity scoring and ranking.
"""

import itertools
import random

import pytest

from imgsim.models import CorpusEntry, ScoredPair, QueryMatch
from imgsim.similarity import similarity_score, rank_self, rank_query


def _flip(fingerprint: str, positions) -> str:
    bits = list(fingerprint)
    for position in positions:
        bits[position] = '0' if bits[position] == '1' else '1'
    return ''.join(bits)


@pytest.fixture
def random_fingerprints():
    rng = random.Random(42)
    return [''.join(rng.choice('01') for _ in range(256)) for _ in range(6)]


class TestSimilarityScore:
    """Test similarity_score function."""

    def test_example_three_bits(self):
        assert similarity_score("111", "101") == pytest.approx(1 - 1 / 3)

    def test_four_of_256_bits(self):
        a = "1" * 256
        b = _flip(a, [0, 17, 100, 255])
        assert similarity_score(a, b) == 0.984375

    def test_identity(self, random_fingerprints):
        for fingerprint in random_fingerprints:
            assert similarity_score(fingerprint, fingerprint) == 1.0

    def test_symmetry(self, random_fingerprints):
        for a, b in itertools.combinations(random_fingerprints, 2):
            assert similarity_score(a, b) == similarity_score(b, a)

    def test_range(self, random_fingerprints):
        for a, b in itertools.product(random_fingerprints, repeat=2):
            assert 0.0 <= similarity_score(a, b) <= 1.0

    def test_complement_scores_zero(self):
        assert similarity_score("1010", "0101") == 0.0

    def test_length_mismatch_scores_zero(self):
        assert similarity_score("1111", "111") == 0.0
        assert similarity_score("", "1") == 0.0

    def test_empty_scores_zero(self):
        assert similarity_score("", "") == 0.0

    def test_one_only_when_identical(self):
        assert similarity_score("1" * 256, _flip("1" * 256, [3])) < 1.0


class TestRankSelf:
    """Test rank_self function."""

    def test_empty_corpus_is_none(self):
        assert rank_self([]) is None

    def test_single_entry_matches_itself(self):
        result = rank_self([CorpusEntry("only.png", "0101")])
        assert result == [ScoredPair(1.0, "only.png", "only.png")]

    def test_two_entries_four_bits_apart(self):
        a = "0" * 256
        corpus = [CorpusEntry("a.png", a), CorpusEntry("b.png", _flip(a, [1, 2, 3, 4]))]
        assert rank_self(corpus) == [ScoredPair(0.984375, "a.png", "b.png")]

    def test_pair_count_and_order(self, random_fingerprints):
        corpus = [CorpusEntry(f"{i}.png", fp) for i, fp in enumerate(random_fingerprints)]
        result = rank_self(corpus)

        m = len(corpus)
        assert len(result) == m * (m - 1) // 2
        scores = [pair.score for pair in result]
        assert scores == sorted(scores, reverse=True)

    def test_each_unordered_pair_once(self, random_fingerprints):
        corpus = [CorpusEntry(f"{i}.png", fp) for i, fp in enumerate(random_fingerprints)]
        result = rank_self(corpus)

        seen = {frozenset((pair.identifier_a, pair.identifier_b)) for pair in result}
        assert len(seen) == len(result)
        # identifier_a always comes before identifier_b in corpus order
        order = {entry.identifier: index for index, entry in enumerate(corpus)}
        assert all(order[pair.identifier_a] < order[pair.identifier_b] for pair in result)

    def test_ties_keep_enumeration_order(self):
        corpus = [CorpusEntry(name, "1100") for name in ("a", "b", "c")]
        result = rank_self(corpus)
        assert [(p.identifier_a, p.identifier_b) for p in result] == [("a", "b"), ("a", "c"), ("b", "c")]

    def test_incomparable_lengths_rank_last(self):
        corpus = [
            CorpusEntry("a", "1111"),
            CorpusEntry("short", "11"),
            CorpusEntry("b", "1110"),
        ]
        result = rank_self(corpus)
        assert result[0] == ScoredPair(0.75, "a", "b")
        assert {pair.score for pair in result[1:]} == {0.0}

    def test_progress_callback(self):
        corpus = [CorpusEntry(str(i), "1") for i in range(200)]
        calls = []
        rank_self(corpus, progress_callback=lambda current, total: calls.append((current, total)))
        assert calls
        assert all(total == 200 * 199 // 2 for _, total in calls)


class TestRankQuery:
    """Test rank_query function."""

    def test_empty_corpus_is_none(self):
        assert rank_query("1010", []) is None

    def test_one_match_per_entry_sorted(self, random_fingerprints):
        query = random_fingerprints[0]
        corpus = [CorpusEntry(f"{i}.png", fp) for i, fp in enumerate(random_fingerprints)]
        result = rank_query(query, corpus)

        assert len(result) == len(corpus)
        assert result[0] == QueryMatch(1.0, "0.png")
        scores = [match.score for match in result]
        assert scores == sorted(scores, reverse=True)

    def test_results_unpack_like_tuples(self):
        score, identifier = rank_query("11", [CorpusEntry("x.png", "10")])[0]
        assert (score, identifier) == (0.5, "x.png")
