from __future__ import annotations
import streamlit as st
import os
import logging
import pandas as pd
import numpy as np
from typing import Optional, Sequence
import matplotlib.pyplot as plt
import networkx as nx
import io

from word_graph.config import GraphConfig, DEFAULT_DAMPING, DEFAULT_ITERATIONS
from word_graph.datatypes import Outcome, WordGraph
from word_graph.graphing import to_networkx
from word_graph.preprocessing import load_text_from_bytes
from word_graph.session import GraphSession

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def draw_graph_visualization(graph: WordGraph, highlight: Optional[Sequence[str]] = None):
    """Draw the directed word graph, optionally highlighting a path or walk."""
    G = to_networkx(graph)

    fig, ax = plt.subplots(figsize=(12, 9))
    ax.set_title("Word Graph", fontsize=14, fontweight='bold')

    if len(G.nodes) > 0:
        pos = nx.spring_layout(G, k=2, iterations=50, seed=42)

        nx.draw_networkx_nodes(G, pos, ax=ax,
                              node_color='lightblue',
                              node_size=900,
                              alpha=0.7)

        # Edge thickness follows how often the pair occurs
        edges = G.edges(data=True)
        if edges:
            weights = [d['weight'] for _, _, d in edges]
            max_weight = max(weights)
            edge_widths = [1 + 3 * (w / max_weight) for w in weights]
            nx.draw_networkx_edges(G, pos, ax=ax,
                                  width=edge_widths,
                                  alpha=0.6,
                                  edge_color='gray',
                                  arrows=True,
                                  arrowsize=15,
                                  connectionstyle='arc3,rad=0.1')

        if highlight and len(highlight) > 1:
            hl_edges = list(zip(highlight, highlight[1:]))
            nx.draw_networkx_edges(G, pos, hl_edges, ax=ax,
                                  width=3,
                                  alpha=0.9,
                                  edge_color='red',
                                  arrows=True,
                                  arrowsize=20,
                                  connectionstyle='arc3,rad=0.1')
            nx.draw_networkx_nodes(G, pos, nodelist=list(dict.fromkeys(highlight)), ax=ax,
                                  node_color='yellow',
                                  node_size=1000,
                                  alpha=0.8)

        nx.draw_networkx_labels(G, pos, ax=ax, font_size=10, font_weight='bold')

        # Weight labels only while they stay readable
        if len(G.nodes) <= 30:
            edge_labels = {(u, v): str(d['weight']) for u, v, d in G.edges(data=True)}
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax, font_size=8)

    ax.axis('off')
    plt.tight_layout()

    buf = io.BytesIO()
    plt.savefig(buf, format='png', dpi=150, bbox_inches='tight')
    buf.seek(0)
    plt.close()

    return buf


def create_sidebar_controls() -> GraphConfig:
    """Create sidebar controls for parameters."""
    st.sidebar.header("PageRank")
    damping = st.sidebar.slider(
        "Damping factor",
        min_value=0.05,
        max_value=0.95,
        value=DEFAULT_DAMPING,
        step=0.05,
        help="Probability of following an edge instead of jumping"
    )
    iterations = st.sidebar.number_input(
        "Iterations",
        min_value=0,
        max_value=1000,
        value=DEFAULT_ITERATIONS,
        step=10,
        help="Fixed number of update passes"
    )
    use_tfidf = st.sidebar.checkbox("TF-IDF initial ranks", value=False,
                                    help="Seed the iteration with TF-IDF instead of 1/N")

    st.sidebar.header("Randomness")
    seed_text = st.sidebar.text_input("Random seed", value="",
                                      help="Leave empty for a different result on every run")
    seed = int(seed_text) if seed_text.strip().lstrip('-').isdigit() else None

    return GraphConfig(damping=damping, iterations=int(iterations), use_tfidf_seed=use_tfidf, seed=seed)


def get_session(config: GraphConfig) -> GraphSession:
    """Keep one session per browser tab."""
    session: Optional[GraphSession] = st.session_state.get("session")
    if session is None:
        session = GraphSession(config)
        st.session_state["session"] = session
    elif session.config != config:
        session.reconfigure(config)
    return session


def show_graph_tab(session: GraphSession):
    graph = session.graph
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Words", graph.node_count)
    with col2:
        st.metric("Edges", graph.edge_count)
    with col3:
        max_possible = graph.node_count * (graph.node_count - 1)
        density = graph.edge_count / max_possible if max_possible > 0 else 0
        st.metric("Density", f"{density:.2%}")

    edges_df = pd.DataFrame(
        [{"From": s, "To": d, "Weight": w} for s, d, w in graph.edges()],
        columns=["From", "To", "Weight"],
    )
    st.dataframe(edges_df, use_container_width=True)

    if graph.node_count <= 60:
        try:
            with st.spinner("Generating graph visualization..."):
                image = draw_graph_visualization(graph)
            st.image(image, caption="Directed word graph", use_column_width=True)
        except Exception as e:
            st.error(f"Could not generate graph visualization: {str(e)}")
    else:
        st.info(f"Graph too large to visualize ({graph.node_count} words). Download the DOT file instead.")

    st.download_button("Download DOT", session.to_dot(), file_name="graph.dot", mime="text/vnd.graphviz")


def bridge_tab(session: GraphSession):
    col1, col2 = st.columns(2)
    with col1:
        word1 = st.text_input("Word 1", key="bridge_w1")
    with col2:
        word2 = st.text_input("Word 2", key="bridge_w2")
    if st.button("Query Bridge Words") and word1 and word2:
        result = session.query_bridge_words(word1, word2)
        if result.outcome is Outcome.OK:
            st.success(result.describe())
        else:
            st.warning(result.describe())

    st.subheader("Generate New Text")
    text = st.text_area("Input text", key="new_text_input", height=100)
    if st.button("Generate") and text.strip():
        st.text_area("Generated text", session.generate_new_text(text), height=100, disabled=True)


def shortest_path_tab(session: GraphSession):
    col1, col2 = st.columns(2)
    with col1:
        start = st.text_input("Start word", key="path_start")
    with col2:
        end = st.text_input("End word (empty = all words)", key="path_end")
    if st.button("Calculate Shortest Path") and start:
        results = session.calc_shortest_path(start, end)
        if len(results) == 1:
            result = results[0]
            if result.outcome is Outcome.OK:
                st.success(result.describe())
                if session.graph.node_count <= 60:
                    st.image(draw_graph_visualization(session.graph, highlight=result.path),
                             caption="Shortest path", use_column_width=True)
            else:
                st.warning(result.describe())
        else:
            rows = [{
                "To": r.end,
                "Path": " -> ".join(r.path) if r.outcome is Outcome.OK else "unreachable",
                "Length": r.distance,
            } for r in results]
            st.dataframe(pd.DataFrame(rows), use_container_width=True)


def page_rank_tab(session: GraphSession):
    word = st.text_input("Word", key="pr_word")
    if st.button("Calculate PageRank") and word:
        value = session.cal_page_rank(word)
        if value is None:
            st.warning(f"No {word.lower()} in the graph!")
        else:
            st.success(f"PageRank of {word.lower()}: {value:.6f}")

    ranks = session.page_ranks()
    if ranks:
        values = np.array(list(ranks.values()))
        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Sum", f"{values.sum():.4f}")
        with col2:
            st.metric("Max", f"{values.max():.4f}")
        with col3:
            st.metric("Std", f"{values.std():.4f}")
        ranks_df = pd.DataFrame(sorted(ranks.items(), key=lambda x: x[1], reverse=True),
                                columns=["Word", "PageRank"])
        st.dataframe(ranks_df, use_container_width=True)


def random_walk_tab(session: GraphSession):
    if st.button("Random Walk"):
        result = session.random_walk()
        st.session_state["last_walk"] = result
    result = st.session_state.get("last_walk")
    if result is None:
        return
    if result.outcome is Outcome.EMPTY_GRAPH:
        st.warning(result.render())
        return
    st.code(result.render(), language=None)
    st.metric("Steps", result.steps)
    st.download_button("Download walk", result.render() + "\n", file_name="random_walk.txt")


def main():
    st.title("Word Graph Explorer")
    st.write("Upload a text file to build a directed word graph and explore it")

    config = create_sidebar_controls()
    session = get_session(config)

    uploaded_file = st.file_uploader(
        "Choose a text file",
        type=['txt', 'rtf', 'md'],
        help="Supports .txt, .rtf, .md formats"
    )

    if uploaded_file is not None and st.session_state.get("loaded_name") != uploaded_file.name:
        try:
            text = load_text_from_bytes(uploaded_file.name, uploaded_file.read())
            session.load_text(text)
            st.session_state["loaded_name"] = uploaded_file.name
            st.session_state.pop("last_walk", None)
            logger.info(f"Loaded {uploaded_file.name}")
        except Exception as e:
            st.error(f"Error loading file: {str(e)}")
            st.exception(e)

    if session.is_empty:
        st.info("No graph loaded yet.")
        return

    tabs = st.tabs(["Graph", "Bridge Words", "Shortest Path", "PageRank", "Random Walk"])
    handlers = [show_graph_tab, bridge_tab, shortest_path_tab, page_rank_tab, random_walk_tab]
    for tab, handler in zip(tabs, handlers):
        with tab:
            try:
                handler(session)
            except Exception as e:
                st.error(f"Error: {str(e)}")
                st.exception(e)


if __name__ == "__main__":
    main()
