from .datatypes import Outcome, WordGraph, BridgeResult, PathResult, WalkResult
from .config import GraphConfig
from .preprocessing import tokenize, load_text_from_bytes, read_text_file
from .graphing import build_graph, build_graph_from_text, describe_edges, to_dot, to_networkx
from .bridges import bridge_words, generate_bridged_text
from .paths import shortest_path, shortest_paths_from, find_paths
from .features import compute_tf, compute_idf, tfidf_seed
from .scoring import page_rank, rank_word
from .walk import random_walk
from .session import GraphSession
