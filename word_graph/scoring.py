from __future__ import annotations
import logging
from typing import Dict, List, Mapping, Optional
from .datatypes import WordGraph
from .features import tfidf_seed

logger = logging.getLogger(__name__)


def _initial_scores(graph: WordGraph, initial: Optional[Mapping[str, float]]) -> List[float]:
    n = graph.node_count
    if initial:
        raw = [max(0.0, float(initial.get(w, 0.0))) for w in graph.words]
        total = sum(raw)
        if total > 0:
            return [r / total for r in raw]
        logger.debug("Initial distribution sums to zero, falling back to uniform")
    return [1.0 / n] * n


def page_rank(graph: WordGraph,
              damping: float = 0.85,
              iterations: int = 100,
              initial: Optional[Mapping[str, float]] = None) -> Dict[str, float]:
    """
    Compute PageRank scores for every word in the graph.

    PageRank Formula: PR(v) = (1-d)/N + d × (Σ PR(u)/C(u) + D/N)

    where u ranges over the predecessors of v, C(u) is the number of distinct
    successors of u and D is the total rank held by dangling words (no
    successors). Every pass reads only the previous pass's scores, and exactly
    `iterations` passes run; there is no convergence check.

    Args:
        graph: Word graph to score
        damping: Damping factor (typically 0.85)
        iterations: Number of update passes
        initial: Optional starting distribution (e.g. a TF-IDF seed). It is
            normalised to sum to 1; words missing from it start at 0.

    Returns:
        Dict mapping each word to its score
    """
    if not 0.0 <= damping <= 1.0:
        raise ValueError(f"damping must be in [0, 1], got {damping}")
    if iterations < 0:
        raise ValueError(f"iterations must be >= 0, got {iterations}")
    n = graph.node_count
    if n == 0:
        return {}

    pr_scores = _initial_scores(graph, initial)

    # Inbound lists so each pass is O(E) instead of O(N^2)
    in_list: List[List[int]] = [[] for _ in range(n)]
    out_degree = [len(succ) for succ in graph.adjacency]
    for i, succ in enumerate(graph.adjacency):
        for j in succ:
            in_list[j].append(i)
    dangling = [i for i in range(n) if out_degree[i] == 0]

    for _ in range(iterations):
        dangling_sum = sum(pr_scores[i] for i in dangling)
        base = (1.0 - damping) / n + damping * dangling_sum / n
        pr_scores = [
            base + damping * sum(pr_scores[u] / out_degree[u] for u in in_list[v])
            for v in range(n)
        ]

    logger.debug(f"PageRank over {n} words, d={damping}, {iterations} iterations")
    return dict(zip(graph.words, pr_scores))


def rank_word(graph: WordGraph,
              word: str,
              damping: float = 0.85,
              iterations: int = 100,
              use_tfidf_seed: bool = False) -> Optional[float]:
    word = word.lower()
    if not graph.has_word(word):
        return None
    initial = tfidf_seed(graph) if use_tfidf_seed else None
    return page_rank(graph, damping=damping, iterations=iterations, initial=initial)[word]
