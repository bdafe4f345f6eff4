from __future__ import annotations
import logging
import random
from typing import List, Optional, Set

from .datatypes import BridgeResult, Outcome, WordGraph
from .preprocessing import tokenize

logger = logging.getLogger(__name__)


def _bridges(graph: WordGraph, word1: str, word2: str) -> Set[str]:
    src = graph.index.get(word1)
    dst = graph.index.get(word2)
    if src is None or dst is None:
        return set()
    return {graph.words[mid] for mid in graph.adjacency[src] if dst in graph.adjacency[mid]}


def bridge_words(graph: WordGraph, word1: str, word2: str) -> BridgeResult:
    word1, word2 = word1.lower(), word2.lower()
    missing = tuple(w for w in (word1, word2) if not graph.has_word(w))
    if missing:
        return BridgeResult(Outcome.WORD_NOT_FOUND, word1, word2, missing=missing)
    found = _bridges(graph, word1, word2)
    logger.debug(f"Bridge words {word1} -> {word2}: {sorted(found)}")
    if not found:
        return BridgeResult(Outcome.NO_BRIDGE_WORDS, word1, word2)
    return BridgeResult(Outcome.OK, word1, word2, bridges=frozenset(found))


def generate_bridged_text(graph: WordGraph, text: str, rng: Optional[random.Random] = None) -> str:
    rng = rng or random.Random()
    tokens = tokenize(text)
    if not tokens:
        return ""
    out: List[str] = []
    for w1, w2 in zip(tokens, tokens[1:]):
        out.append(w1)
        # sorted so a seeded rng always picks the same word
        candidates = sorted(_bridges(graph, w1, w2))
        if candidates:
            out.append(rng.choice(candidates))
    out.append(tokens[-1])
    return " ".join(out)
