"""
Per-document TF-IDF indexer.

Treats the chunks of a single document as the corpus and produces one sparse
term-weight table per chunk.

Dependencies: parsebot.core.tokenizer
System role: Second stage of document indexing
"""

import math
from collections import Counter
from typing import Sequence

from parsebot.core.tokenizer import analyze
from parsebot.models.chunk import Chunk


def inverse_document_frequency(num_chunks: int, doc_freq: int) -> float:
    """
    Compute log(N / df).

    Args:
        num_chunks: Number of chunks in the document
        doc_freq: Number of chunks containing the term (>= 1)

    Returns:
        float: IDF, zero for a term found in every chunk
    """
    return math.log(num_chunks / doc_freq)


def compute_weights(chunks: Sequence[Chunk]) -> list[dict[str, float]]:
    """
    Compute TF-IDF weight tables for a document's chunks.

    Only terms occurring in a chunk appear in its table. A term present in
    every chunk is kept with weight 0.0.

    Args:
        chunks: Chunks of one document

    Returns:
        list[dict[str, float]]: Term weights, index-aligned with chunks
    """
    term_counts = [Counter(analyze(chunk.text)) for chunk in chunks]

    doc_freq: Counter = Counter()
    for counts in term_counts:
        doc_freq.update(counts.keys())

    num_chunks = len(chunks)
    idf = {
        term: inverse_document_frequency(num_chunks, df)
        for term, df in doc_freq.items()
    }

    return [
        {term: tf * idf[term] for term, tf in counts.items()}
        for counts in term_counts
    ]
