from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

DEFAULT_DAMPING = 0.85
DEFAULT_ITERATIONS = 100


@dataclass
class GraphConfig:
    damping: float = DEFAULT_DAMPING
    iterations: int = DEFAULT_ITERATIONS
    use_tfidf_seed: bool = False  # seed rank iteration with TF-IDF instead of 1/N
    seed: Optional[int] = None    # fixes bridge picks and random walks

    def __post_init__(self) -> None:
        if not 0.0 <= self.damping <= 1.0:
            raise ValueError(f"damping must be in [0, 1], got {self.damping}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")
