"""
Query keys and the deduplicated query -> record map.

A query key is the JSON array [query] or [query, states]; query is null for
rows that answer any query. The serialized form is compact JSON so it reads
the same as JSON.stringify output on the client.
"""

import json
from typing import Dict, Iterable, List, Optional

from .record import Record
from ..logger import get_logger

logger = get_logger("dialog.query_map")

ANY_QUERY = "{{any}}"


def normalize_query(raw: Optional[str]) -> Optional[str]:
    return None if raw == ANY_QUERY else raw


def make_query_key(query: Optional[str], states: Optional[str] = None) -> List[Optional[str]]:
    key = [query]
    if states:
        key.append(states)
    return key


def serialize_query_key(key: List[Optional[str]]) -> str:
    return json.dumps(key, separators=(",", ":"), ensure_ascii=False)


def parse_query_key(serialized: str) -> List[Optional[str]]:
    key = json.loads(serialized)
    if not isinstance(key, list) or not 1 <= len(key) <= 2:
        raise ValueError(f"Not a query key: {serialized!r}")
    return key


def build_query_map(records: Iterable[Record]) -> Dict[str, Record]:
    """Key every record by its serialized query key. Later rows win."""
    query_map: Dict[str, Record] = {}
    overwritten = 0
    for rec in records:
        query = normalize_query(rec.Query)
        key = serialize_query_key(make_query_key(query, rec.States))
        if key in query_map:
            overwritten += 1
        query_map[key] = Record(Query=query, Response=rec.Response, States=rec.States, NewState=rec.NewState)

    if overwritten:
        logger.info(f"{overwritten} rows replaced an earlier row with the same query key")
    return query_map
