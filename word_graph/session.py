from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import Dict, List, Optional, Union

from .bridges import bridge_words, generate_bridged_text
from .config import GraphConfig
from .datatypes import BridgeResult, PathResult, WalkResult, WordGraph
from .features import tfidf_seed
from .graphing import build_graph_from_text, describe_edges, to_dot
from .paths import find_paths
from .preprocessing import read_text_file
from .scoring import page_rank
from .walk import random_walk

logger = logging.getLogger(__name__)


class GraphSession:
    """
    Owns the graph built from the most recently loaded document.

    Loading swaps in a freshly built graph only after construction succeeds,
    so a failed read leaves whatever was loaded before untouched. Queries
    never modify the graph.
    """

    def __init__(self, config: Optional[GraphConfig] = None, rng: Optional[random.Random] = None) -> None:
        self.config = config or GraphConfig()
        self._rng = rng or random.Random(self.config.seed)
        self._graph = WordGraph()
        self._ranks: Optional[Dict[str, float]] = None

    @property
    def graph(self) -> WordGraph:
        return self._graph

    @property
    def is_empty(self) -> bool:
        return self._graph.node_count == 0

    def load_text(self, text: str) -> WordGraph:
        graph = build_graph_from_text(text)
        self._graph = graph
        self._ranks = None
        return graph

    def reconfigure(self, config: GraphConfig) -> None:
        """Apply new settings to the loaded graph; cached ranks are recomputed."""
        self.config = config
        self._rng = random.Random(config.seed)
        self._ranks = None

    def load_file(self, path: Union[str, Path]) -> WordGraph:
        try:
            text = read_text_file(path)
        except OSError as e:
            logger.error(f"Could not read {path}: {e}; keeping the current graph")
            raise
        return self.load_text(text)

    def show_graph(self) -> List[str]:
        return describe_edges(self._graph)

    def to_dot(self) -> str:
        return to_dot(self._graph)

    def query_bridge_words(self, word1: str, word2: str) -> BridgeResult:
        return bridge_words(self._graph, word1, word2)

    def generate_new_text(self, text: str) -> str:
        return generate_bridged_text(self._graph, text, self._rng)

    def calc_shortest_path(self, word1: str, word2: Optional[str] = None) -> List[PathResult]:
        return find_paths(self._graph, word1, word2)

    def page_ranks(self) -> Dict[str, float]:
        if self._ranks is None:
            initial = tfidf_seed(self._graph) if self.config.use_tfidf_seed else None
            self._ranks = page_rank(self._graph,
                                    damping=self.config.damping,
                                    iterations=self.config.iterations,
                                    initial=initial)
        return self._ranks

    def cal_page_rank(self, word: str) -> Optional[float]:
        return self.page_ranks().get(word.lower())

    def random_walk(self) -> WalkResult:
        return random_walk(self._graph, self._rng)
