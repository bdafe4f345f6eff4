from __future__ import annotations
import heapq
import logging
from typing import Dict, List, Optional, Tuple

from .datatypes import Outcome, PathResult, WordGraph

logger = logging.getLogger(__name__)


def _dijkstra(graph: WordGraph, start: int, target: Optional[int] = None) -> Tuple[Dict[int, int], Dict[int, int]]:
    """
    Single-source Dijkstra over node ids.

    Returns (dist, prev) for every node reached. When `target` is given the
    search stops as soon as it is settled. Heap entries are (distance, word),
    so equal-distance candidates pop in word order; with several shortest
    paths the one returned depends on that order and is otherwise arbitrary.
    """
    words = graph.words
    dist: Dict[int, int] = {start: 0}
    prev: Dict[int, int] = {}
    settled = set()
    heap = [(0, words[start], start)]
    while heap:
        d, _, node = heapq.heappop(heap)
        if node in settled:
            continue  # stale entry
        settled.add(node)
        if node == target:
            break
        for nxt, w in graph.adjacency[node].items():
            if nxt in settled:
                continue
            nd = d + w
            if nd < dist.get(nxt, float("inf")):
                dist[nxt] = nd
                prev[nxt] = node
                heapq.heappush(heap, (nd, words[nxt], nxt))
    return dist, prev


def _reconstruct(graph: WordGraph, prev: Dict[int, int], start: int, end: int) -> List[str]:
    path = [end]
    while path[-1] != start:
        path.append(prev[path[-1]])
    return [graph.words[i] for i in reversed(path)]


def _missing(graph: WordGraph, *words: str) -> Tuple[str, ...]:
    return tuple(w for w in words if not graph.has_word(w))


def shortest_path(graph: WordGraph, start: str, end: str) -> PathResult:
    start, end = start.lower(), end.lower()
    missing = _missing(graph, start, end)
    if missing:
        return PathResult(Outcome.WORD_NOT_FOUND, start, end, missing=missing)
    src, dst = graph.index[start], graph.index[end]
    dist, prev = _dijkstra(graph, src, target=dst)
    if dst not in dist:
        return PathResult(Outcome.NO_PATH, start, end)
    path = _reconstruct(graph, prev, src, dst)
    logger.debug(f"Shortest path {start} -> {end}: {path} ({dist[dst]})")
    return PathResult(Outcome.OK, start, end, path=path, distance=dist[dst])


def shortest_paths_from(graph: WordGraph, start: str) -> List[PathResult]:
    start = start.lower()
    if not graph.has_word(start):
        return [PathResult(Outcome.WORD_NOT_FOUND, start, "", missing=(start,))]
    src = graph.index[start]
    dist, prev = _dijkstra(graph, src)
    results = []
    for word in sorted(graph.words):
        if word == start:
            continue
        dst = graph.index[word]
        if dst not in dist:
            results.append(PathResult(Outcome.NO_PATH, start, word))
        else:
            results.append(PathResult(Outcome.OK, start, word,
                                      path=_reconstruct(graph, prev, src, dst),
                                      distance=dist[dst]))
    return results


def find_paths(graph: WordGraph, start: str, end: Optional[str] = None) -> List[PathResult]:
    if not end or not end.strip():
        return shortest_paths_from(graph, start)
    return [shortest_path(graph, start, end.strip())]
