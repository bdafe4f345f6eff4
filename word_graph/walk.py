from __future__ import annotations
import logging
import random
from typing import List, Optional, Set, Tuple

from .datatypes import Outcome, WalkResult, WordGraph

logger = logging.getLogger(__name__)


def random_walk(graph: WordGraph, rng: Optional[random.Random] = None) -> WalkResult:
    """
    Follow uniformly chosen edges from a random start word.

    Edge weights do not bias the choice. The walk ends at a word without
    successors, or right before an edge would be traversed a second time, so
    it takes at most `graph.edge_count` steps.
    """
    rng = rng or random.Random()
    if graph.node_count == 0:
        return WalkResult(Outcome.EMPTY_GRAPH)

    current = rng.randrange(graph.node_count)
    path: List[int] = [current]
    used: Set[Tuple[int, int]] = set()
    while graph.adjacency[current]:
        nxt = rng.choice(list(graph.adjacency[current]))
        edge = (current, nxt)
        if edge in used:
            break
        used.add(edge)
        path.append(nxt)
        current = nxt

    words = [graph.words[i] for i in path]
    logger.debug(f"Random walk of {len(used)} steps from {words[0]}")
    return WalkResult(Outcome.OK, words)
