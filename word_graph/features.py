from __future__ import annotations
from typing import Dict
import math
from .datatypes import WordGraph

def compute_tf(graph: WordGraph) -> Dict[str, float]:
    """
    TF(w) = outdeg(w) / total number of distinct edges.
    Words without successors are left out (treated as 0 by callers).
    """
    total = graph.edge_count
    if total == 0:
        return {}
    return {graph.words[i]: len(succ) / total
            for i, succ in enumerate(graph.adjacency) if succ}


def compute_idf(graph: WordGraph) -> Dict[str, float]:
    """
    IDF(w) = ln(N / (DF(w) + 1)) + 1
    Each node's successor set is one 'document'; DF(w) counts the nodes that
    have w as an immediate successor. Words never reached are left out.
    """
    N = graph.node_count
    df: Dict[int, int] = {}
    for succ in graph.adjacency:
        for j in succ:
            df[j] = df.get(j, 0) + 1
    return {graph.words[j]: math.log(N / (c + 1)) + 1.0 for j, c in df.items()}


def tfidf_seed(graph: WordGraph) -> Dict[str, float]:
    """TF-IDF(w) = TF(w) * IDF(w), 0.0 where either side is missing."""
    tf = compute_tf(graph)
    idf = compute_idf(graph)
    return {w: tf.get(w, 0.0) * idf.get(w, 0.0) for w in graph.words}
