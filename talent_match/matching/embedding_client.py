"""Client for the local embedding server (optional, enables semantic scoring)."""

import logging
from typing import Optional

import requests

from talent_match.config import SemanticConfig
from talent_match.utils.http_client import create_session, post_json

logger = logging.getLogger("talent_match.matching.embeddings")

MAX_EMBED_CHARS = 10000
EMBEDDING_ROLES = ("query", "passage")


class EmbeddingError(RuntimeError):
    """The embedding server could not produce a vector."""


def generate_embedding(
    text: str,
    role: str,
    config: SemanticConfig,
    session: Optional[requests.Session] = None,
) -> list[float]:
    """Embed text via the embedding server.

    role is "query" for job postings and "passage" for resumes.
    Raises EmbeddingError so the caller can fall back to heuristic scoring.
    """
    if role not in EMBEDDING_ROLES:
        raise ValueError(f"Unknown embedding role: {role!r} (expected one of {EMBEDDING_ROLES})")
    if not config.embedding_url:
        raise EmbeddingError("No embedding server URL configured")

    if session is None:
        session = create_session(max_retries=config.max_retries)

    url = f"{config.embedding_url.rstrip('/')}/embed"
    try:
        data = post_json(
            url,
            {"text": text[:MAX_EMBED_CHARS], "type": role},
            timeout=config.timeout,
            session=session,
        )
        embedding = [float(v) for v in data["embedding"]]
    except requests.ConnectionError as e:
        raise EmbeddingError(
            f"Embedding server is not reachable at {config.embedding_url}. Start it and retry."
        ) from e
    except (requests.RequestException, ValueError, KeyError, TypeError) as e:
        raise EmbeddingError(f"Embedding request failed: {e}") from e

    if not embedding:
        raise EmbeddingError("Embedding server returned an empty vector")

    if config.expected_dimension and len(embedding) != config.expected_dimension:
        logger.warning(
            "Unexpected embedding dimension: %d, expected %d",
            len(embedding), config.expected_dimension,
        )

    return embedding
