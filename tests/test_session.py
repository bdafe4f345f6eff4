"""
Unit tests for GraphSession loading and query delegation.
"""

import random

import pytest

from word_graph.config import GraphConfig
from word_graph.datatypes import Outcome
from word_graph.scoring import page_rank
from word_graph.session import GraphSession


@pytest.fixture
def session(sample_text) -> GraphSession:
    s = GraphSession(GraphConfig(seed=42))
    s.load_text(sample_text)
    return s


class TestConfig:
    """Test GraphConfig validation."""

    def test_defaults(self):
        config = GraphConfig()
        assert config.damping == 0.85
        assert config.iterations == 100
        assert config.use_tfidf_seed is False
        assert config.seed is None

    def test_invalid_damping(self):
        with pytest.raises(ValueError):
            GraphConfig(damping=1.2)

    def test_invalid_iterations(self):
        with pytest.raises(ValueError):
            GraphConfig(iterations=-5)


class TestLoading:
    """Test the load/replace transition."""

    def test_starts_empty(self):
        s = GraphSession()
        assert s.is_empty
        assert s.random_walk().outcome is Outcome.EMPTY_GRAPH

    def test_load_text(self, session):
        assert not session.is_empty
        assert session.graph.node_count == 18

    def test_reload_replaces_graph(self, session):
        session.load_text("completely different words")
        assert session.graph.all_words() == {"completely", "different", "words"}

    def test_load_file(self, tmp_path):
        path = tmp_path / "doc.md"
        path.write_text("# Hello\n\nHello **world**!", encoding="utf-8")
        s = GraphSession()
        s.load_file(path)
        assert s.graph.outgoing_edges("hello") == {"hello": 1, "world": 1}

    def test_failed_load_keeps_graph(self, session, tmp_path):
        before = session.graph
        with pytest.raises(OSError):
            session.load_file(tmp_path / "missing.txt")
        assert session.graph is before

    def test_failed_first_load_leaves_empty_graph(self, tmp_path):
        s = GraphSession()
        with pytest.raises(OSError):
            s.load_file(tmp_path / "missing.txt")
        assert s.is_empty

    def test_load_empty_text(self, session):
        session.load_text("")
        assert session.is_empty


class TestQueries:
    """Test the operations exposed by the session."""

    def test_show_graph(self, session):
        lines = session.show_graph()
        assert len(lines) == 21
        assert "explore -> strange [Weight: 1]" in lines

    def test_to_dot(self, session):
        assert '"new" -> "life" [label="1"];' in session.to_dot()

    def test_bridge_words(self, session):
        assert session.query_bridge_words("new", "and").bridges == {"life"}

    def test_generate_new_text(self, session):
        assert session.generate_new_text("explore new") == "explore strange new"

    def test_shortest_path_single(self, session):
        results = session.calc_shortest_path("to", "boldly")
        assert len(results) == 1
        assert results[0].path == ["to", "boldly"]

    def test_shortest_path_batch(self, session):
        results = session.calc_shortest_path("to")
        assert len(results) == 17
        assert {r.end for r in results} == session.graph.all_words() - {"to"}

    def test_page_rank(self, session):
        expected = page_rank(session.graph)["new"]
        assert session.cal_page_rank("NEW") == pytest.approx(expected)
        assert session.cal_page_rank("planet") is None

    def test_ranks_recomputed_after_load(self, session):
        first = session.page_ranks()
        session.load_text("a b c")
        assert session.page_ranks() != first
        assert set(session.page_ranks()) == {"a", "b", "c"}

    def test_reconfigure(self, session):
        uniform = session.page_ranks()
        session.reconfigure(GraphConfig(iterations=0, seed=42))
        assert session.cal_page_rank("new") == pytest.approx(1 / 18)
        assert session.page_ranks() != uniform

    def test_tfidf_seed_config(self, sample_text):
        s = GraphSession(GraphConfig(iterations=0, use_tfidf_seed=True))
        s.load_text(sample_text)
        assert s.cal_page_rank("before") == 0.0
        assert sum(s.page_ranks().values()) == pytest.approx(1.0)

    def test_seeded_sessions_agree(self, sample_text):
        walks = []
        for _ in range(2):
            s = GraphSession(GraphConfig(seed=7))
            s.load_text(sample_text)
            walks.append([s.random_walk().words for _ in range(5)])
        assert walks[0] == walks[1]

    def test_injected_rng(self, sample_text, first_choice):
        s = GraphSession(rng=first_choice)
        s.load_text(sample_text)
        assert s.random_walk().words[0] == "to"

    def test_walk_respects_edges(self, session):
        result = session.random_walk()
        for src, dst in zip(result.words, result.words[1:]):
            assert dst in session.graph.outgoing_edges(src)
