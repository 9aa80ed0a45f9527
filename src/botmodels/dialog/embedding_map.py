import asyncio
from typing import Dict, List, Optional

from .record import Record
from ..config import MAX_WORKERS
from ..logger import get_logger

logger = get_logger("dialog.embedding_map")


async def build_embedding_map(
    query_map: Dict[str, Record],
    embedder,
    max_workers: Optional[int] = None,
) -> Dict[str, List[float]]:
    """
    Embed the query of every entry in query_map, keyed the same way.

    Entries whose Query is None (the any-query rows) get no embedding.
    Each query is sent to embedder.embed as its own single-item batch; at most
    max_workers calls run at once. The first failing call propagates and the
    calls that have not started yet are cancelled.
    """
    keys = [k for k, rec in query_map.items() if rec.Query is not None]
    if not keys:
        return {}

    workers = max(1, max_workers or MAX_WORKERS)
    slots = asyncio.Semaphore(workers)

    def _embed_one(text: str) -> List[float]:
        return list(embedder.embed([text])[0])

    async def _embed_key(key: str) -> List[float]:
        async with slots:
            return await asyncio.to_thread(_embed_one, query_map[key].Query)

    tasks = [asyncio.ensure_future(_embed_key(k)) for k in keys]
    try:
        vectors = await asyncio.gather(*tasks)
    except BaseException:
        for t in tasks:
            t.cancel()
        raise

    logger.debug(f"Embedded {len(keys)} queries with {workers} workers")
    return dict(zip(keys, vectors))
