from __future__ import annotations
import logging
from typing import Iterable, List

import networkx as nx

from .datatypes import WordGraph
from .preprocessing import tokenize

logger = logging.getLogger(__name__)


def build_graph(tokens: Iterable[str]) -> WordGraph:
    graph = WordGraph()
    prev = None
    for tok in tokens:
        if not tok:
            prev = None
            continue
        node = graph._intern(tok)
        if prev is not None:
            graph._increment(prev, node)
        prev = node
    logger.info(f"Built word graph with {graph.node_count} nodes and {graph.edge_count} edges")
    return graph


def build_graph_from_text(text: str) -> WordGraph:
    return build_graph(tokenize(text))


def describe_edges(graph: WordGraph) -> List[str]:
    return [f"{src} -> {dst} [Weight: {w}]" for src, dst, w in graph.edges()]


def to_dot(graph: WordGraph) -> str:
    """Graphviz description of the graph, one edge per line, weights as labels."""
    lines = ["digraph G {"]
    for word in graph.words:
        # words without successors still get their own node line
        if graph.out_degree(word) == 0:
            lines.append(f'    "{word}";')
    for src, dst, w in graph.edges():
        lines.append(f'    "{src}" -> "{dst}" [label="{w}"];')
    lines.append("}")
    return "\n".join(lines) + "\n"


def to_networkx(graph: WordGraph) -> nx.DiGraph:
    G = nx.DiGraph()
    G.add_nodes_from(graph.words)
    for src, dst, w in graph.edges():
        G.add_edge(src, dst, weight=w)
    return G
