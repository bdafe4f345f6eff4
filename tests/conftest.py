"""
Pytest configuration and shared fixtures.
"""

import random

import pytest

from word_graph.graphing import build_graph, build_graph_from_text


class FirstChoice:
    """Random source stub that always takes the first candidate."""

    def choice(self, seq):
        return seq[0]

    def randrange(self, n):
        return 0


@pytest.fixture
def sample_text() -> str:
    """The example text from the original assignment."""
    return ("To explore strange new worlds, To seek out new life and new civilizations, "
            "to boldly go where no one has gone before.")


@pytest.fixture
def sample_graph(sample_text):
    return build_graph_from_text(sample_text)


@pytest.fixture
def abc_graph():
    """Tokens a b c a d c: two equal-length routes from a to c."""
    return build_graph(["a", "b", "c", "a", "d", "c"])


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()
