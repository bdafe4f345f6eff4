from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterator, List, Optional, Set, Tuple


class Outcome(str, Enum):
    OK = "ok"
    WORD_NOT_FOUND = "word_not_found"
    NO_BRIDGE_WORDS = "no_bridge_words"
    NO_PATH = "no_path"
    EMPTY_GRAPH = "empty_graph"


@dataclass
class WordGraph:
    """
    Directed word-adjacency graph stored as an arena.

    Node ids are positions in `words` (first-seen order). `adjacency[i]` maps
    a successor id to the number of times it follows word i in the text.
    """
    words: List[str] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    adjacency: List[Dict[int, int]] = field(default_factory=list)

    def _intern(self, word: str) -> int:
        node = self.index.get(word)
        if node is None:
            node = len(self.words)
            self.words.append(word)
            self.index[word] = node
            self.adjacency.append({})
        return node

    def _increment(self, src: int, dst: int) -> None:
        succ = self.adjacency[src]
        succ[dst] = succ.get(dst, 0) + 1

    @property
    def node_count(self) -> int:
        return len(self.words)

    @property
    def edge_count(self) -> int:
        return sum(len(succ) for succ in self.adjacency)

    def has_word(self, word: str) -> bool:
        return word in self.index

    def outgoing_edges(self, word: str) -> Dict[str, int]:
        node = self.index.get(word)
        if node is None:
            return {}
        return {self.words[j]: w for j, w in self.adjacency[node].items()}

    def out_degree(self, word: str) -> int:
        node = self.index.get(word)
        return 0 if node is None else len(self.adjacency[node])

    def all_words(self) -> Set[str]:
        return set(self.words)

    def edges(self) -> Iterator[Tuple[str, str, int]]:
        for i, succ in enumerate(self.adjacency):
            for j, w in succ.items():
                yield self.words[i], self.words[j], w


@dataclass
class BridgeResult:
    outcome: Outcome
    word1: str
    word2: str
    bridges: FrozenSet[str] = frozenset()
    missing: Tuple[str, ...] = ()

    def describe(self) -> str:
        if self.outcome is Outcome.WORD_NOT_FOUND:
            return "No " + " and ".join(self.missing) + " in the graph!"
        if self.outcome is Outcome.NO_BRIDGE_WORDS:
            return f"No bridge words from {self.word1} to {self.word2}!"
        words = sorted(self.bridges)
        if len(words) == 1:
            return f"The bridge word from {self.word1} to {self.word2} is: {words[0]}."
        sep = ", and " if len(words) > 2 else " and "
        listed = ", ".join(words[:-1]) + sep + words[-1]
        return f"The bridge words from {self.word1} to {self.word2} are: {listed}."


@dataclass
class PathResult:
    outcome: Outcome
    start: str
    end: str
    path: List[str] = field(default_factory=list)
    distance: Optional[int] = None
    missing: Tuple[str, ...] = ()

    def describe(self) -> str:
        if self.outcome is Outcome.WORD_NOT_FOUND:
            return "No " + " and ".join(self.missing) + " in the graph!"
        if self.outcome is Outcome.NO_PATH:
            return f"No path from {self.start} to {self.end}."
        return f"Shortest path: {' -> '.join(self.path)}\nPath length: {self.distance}"


@dataclass
class WalkResult:
    outcome: Outcome
    words: List[str] = field(default_factory=list)

    @property
    def steps(self) -> int:
        return max(0, len(self.words) - 1)

    def render(self) -> str:
        if self.outcome is Outcome.EMPTY_GRAPH:
            return "Graph is empty."
        return " -> ".join(self.words)
