"""
Query scoring and top-K ranking.

Scores each chunk by the dot product of the query's term frequencies with the
chunk's TF-IDF table.

Dependencies: parsebot.core.tokenizer, parsebot.core.exceptions
System role: Retrieval ranking logic
"""

from typing import Mapping, Sequence

from parsebot.core.exceptions import ValidationError
from parsebot.core.tokenizer import query_vector
from parsebot.models.chunk import Chunk, ScoredChunk


def score_chunk(query_terms: Mapping[str, int], weights: Mapping[str, float]) -> float:
    """Sum of query frequency times chunk weight over the query terms."""
    return sum(freq * weights.get(term, 0.0) for term, freq in query_terms.items())


def find_relevant(
    query: str,
    chunks: Sequence[Chunk],
    weight_tables: Sequence[Mapping[str, float]],
    top_k: int = 3,
) -> list[ScoredChunk]:
    """
    Rank chunks against a free-text query.

    Args:
        query: Query text
        chunks: Chunks of one document
        weight_tables: TF-IDF tables index-aligned with chunks
        top_k: Maximum number of results

    Returns:
        list[ScoredChunk]: Positive-score chunks, best first, ties by chunk order

    Raises:
        ValidationError: When top_k < 1 or the inputs are misaligned
    """
    if top_k < 1:
        raise ValidationError("top_k must be at least 1", field="top_k")
    if len(chunks) != len(weight_tables):
        raise ValidationError(
            "chunks and weight tables are misaligned",
            details={"chunks": len(chunks), "weight_tables": len(weight_tables)},
        )

    query_terms = query_vector(query)
    if not query_terms:
        return []

    scored = [
        ScoredChunk(chunk=chunk, score=score_chunk(query_terms, weights), index=index)
        for index, (chunk, weights) in enumerate(zip(chunks, weight_tables))
    ]
    # sort is stable, so equal scores keep ascending chunk order
    ranked = sorted(scored, key=lambda item: -item.score)
    return [item for item in ranked if item.score > 0][:top_k]
