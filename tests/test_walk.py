"""
Unit tests for random walks.
"""

import random

from word_graph.datatypes import Outcome, WordGraph
from word_graph.graphing import build_graph
from word_graph.walk import random_walk


class TestRandomWalk:
    """Test walk termination and edge rules."""

    def test_empty_graph(self, rng):
        result = random_walk(WordGraph(), rng)
        assert result.outcome is Outcome.EMPTY_GRAPH
        assert result.words == []
        assert result.render() == "Graph is empty."

    def test_stops_before_repeating_edge(self, sample_graph, first_choice):
        """Always taking the first successor loops back through to -> explore."""
        result = random_walk(sample_graph, first_choice)
        assert result.words == ["to", "explore", "strange", "new", "worlds", "to"]
        assert result.steps == 5
        assert result.render() == "to -> explore -> strange -> new -> worlds -> to"

    def test_stops_at_dangling_word(self, first_choice):
        graph = build_graph(["a", "b", "c"])
        assert random_walk(graph, first_choice).words == ["a", "b", "c"]

    def test_single_word(self, rng):
        result = random_walk(build_graph(["solo"]), rng)
        assert result.outcome is Outcome.OK
        assert result.words == ["solo"]
        assert result.steps == 0

    def test_self_loop_used_once(self, first_choice):
        graph = build_graph(["go", "go"])
        assert random_walk(graph, first_choice).words == ["go", "go"]

    def test_walk_invariants(self, sample_graph):
        for seed in range(200):
            result = random_walk(sample_graph, random.Random(seed))
            pairs = list(zip(result.words, result.words[1:]))
            assert len(pairs) == len(set(pairs))
            assert result.steps <= sample_graph.edge_count
            for src, dst in pairs:
                assert dst in sample_graph.outgoing_edges(src)

    def test_walk_ends_for_a_reason(self):
        """The last word is dangling or its chosen next edge was already used."""
        graph = build_graph(list("abcabdacbd"))
        for seed in range(100):
            words = random_walk(graph, random.Random(seed)).words
            used = set(zip(words, words[1:]))
            last = words[-1]
            successors = graph.outgoing_edges(last)
            assert not successors or any((last, nxt) in used for nxt in successors)

    def test_seeded_walks_repeat(self, sample_graph):
        first = random_walk(sample_graph, random.Random(5))
        second = random_walk(sample_graph, random.Random(5))
        assert first.words == second.words

    def test_every_start_reachable(self, sample_graph):
        starts = {random_walk(sample_graph, random.Random(seed)).words[0] for seed in range(500)}
        assert starts == sample_graph.all_words()
