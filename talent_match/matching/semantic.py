"""Embedding similarity scoring."""

import logging
from typing import Sequence

import numpy as np

from talent_match.utils.text_processing import clamp_percent

logger = logging.getLogger("talent_match.matching.semantic")


class DimensionMismatch(ValueError):
    """Two embeddings of different lengths were compared."""

    def __init__(self, left: int, right: int):
        super().__init__(f"Cannot compute similarity: dimension mismatch ({left} vs {right})")
        self.left = left
        self.right = right


def cosine_similarity(a: Sequence[float], b: Sequence[float]) -> float:
    """Cosine of the angle between two vectors; 0.0 if either is all zeros.

    Raises DimensionMismatch rather than truncating the longer vector.
    """
    va = np.asarray(a, dtype=float)
    vb = np.asarray(b, dtype=float)
    if va.shape != vb.shape:
        logger.error("Dimension mismatch: vector A=%dd, vector B=%dd", va.size, vb.size)
        raise DimensionMismatch(va.size, vb.size)

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0 or norm_b == 0:
        return 0.0
    return float(np.dot(va, vb) / (norm_a * norm_b))


def score_from_embeddings(job_embedding: Sequence[float], candidate_embedding: Sequence[float]) -> int:
    """Map cosine similarity onto a 0-100 score."""
    return clamp_percent(cosine_similarity(job_embedding, candidate_embedding) * 100)
