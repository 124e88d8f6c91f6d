"""
Boundary-aware overlapping text chunker.

Splits document text into windows of up to chunk_size characters, preferring
to end a window on the last sentence or line break past its midpoint.

Dependencies: parsebot.models.chunk, parsebot.core.exceptions
System role: First stage of document indexing
"""

import logging

from parsebot.core.exceptions import ValidationError
from parsebot.models.chunk import Chunk

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200
MIN_CHUNK_LENGTH = 50


class TextChunker:
    """Split text into overlapping chunks using sentence/newline break points."""

    def __init__(
        self,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_CHUNK_OVERLAP,
        min_length: int = MIN_CHUNK_LENGTH,
    ) -> None:
        """
        Initialize chunker configuration.

        Args:
            chunk_size: Maximum chunk size in characters
            overlap: Characters shared between consecutive windows
            min_length: Trimmed chunks must be longer than this to be kept

        Raises:
            ValidationError: When chunk_size is not positive
        """
        if chunk_size <= 0:
            raise ValidationError(
                "chunk_size must be positive",
                field="chunk_size",
                details={"chunk_size": chunk_size},
            )
        self.chunk_size = chunk_size
        self.overlap = overlap
        self.min_length = min_length

    def chunk(self, text: str) -> list[Chunk]:
        """
        Split text into chunks.

        Args:
            text: Document text

        Returns:
            list[Chunk]: Chunks in document order, offsets into the original text
        """
        chunks: list[Chunk] = []
        length = len(text)
        start = 0

        while start < length:
            window_end = min(start + self.chunk_size, length)

            if window_end < length:
                window = text[start:window_end]
                break_point = start + max(window.rfind("."), window.rfind("\n"))
                if break_point > start + self.chunk_size * 0.5:
                    chunk_end = break_point + 1
                    next_start = break_point + 1 - self.overlap
                else:
                    chunk_end = window_end
                    next_start = window_end - self.overlap
            else:
                chunk_end = length
                next_start = length

            chunk = self._make_chunk(text, start, chunk_end)
            if chunk is not None:
                chunks.append(chunk)

            # Cursor must move forward even when overlap >= chunk_size
            start = max(start + 1, next_start)

        logger.debug(
            "Chunked text",
            extra={"text_length": length, "num_chunks": len(chunks)},
        )
        return chunks

    def _make_chunk(self, text: str, start: int, end: int) -> Chunk | None:
        """Trim a raw span and compute its exact offsets, or None if too short."""
        raw = text[start:end]
        stripped = raw.strip()
        if len(stripped) <= self.min_length:
            return None
        offset = start + (len(raw) - len(raw.lstrip()))
        return Chunk(text=stripped, start=offset, end=offset + len(stripped))


def chunk_text(
    text: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    overlap: int = DEFAULT_CHUNK_OVERLAP,
) -> list[Chunk]:
    """Split text into chunks with a one-off TextChunker."""
    return TextChunker(chunk_size=chunk_size, overlap=overlap).chunk(text)
