from __future__ import annotations
from typing import Any, AsyncIterable, AsyncIterator, Optional


async def accumulate_stream(fragments: AsyncIterable[Optional[str]]) -> str:
    """Drain a stream of text fragments and join them in arrival order.

    Empty or missing fragments contribute nothing. Errors raised by the stream
    propagate to the caller; no partial result is returned.
    """
    collected: list[str] = []
    async for fragment in fragments:
        if fragment:
            collected.append(fragment)
    return "".join(collected)


async def iter_chunk_text(chunks: AsyncIterable[Any]) -> AsyncIterator[Optional[str]]:
    """Yield the `.text` attribute of each streamed response chunk."""
    async for chunk in chunks:
        yield getattr(chunk, "text", None)
