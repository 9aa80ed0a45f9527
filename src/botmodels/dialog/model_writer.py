import json
from pathlib import Path
from typing import Dict, List, Optional, Union

from .record import Record
from ..config import OUTPUT_DIR
from ..logger import get_logger

logger = get_logger("dialog.model_writer")

MODEL_SUFFIX = ".model.json"


def bot_model_path(bot_name: str, output_dir: Optional[Union[str, Path]] = None) -> Path:
    return Path(output_dir or OUTPUT_DIR) / f"{bot_name}{MODEL_SUFFIX}"


def dump_bot_model(query_map: Dict[str, Record], embedding_map: Dict[str, List[float]]) -> str:
    payload = {
        "queryMap": {k: rec.to_dict() for k, rec in query_map.items()},
        "embeddingMap": {k: [float(x) for x in vec] for k, vec in embedding_map.items()},
    }
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


def write_bot_model(
    path: Union[str, Path],
    query_map: Dict[str, Record],
    embedding_map: Dict[str, List[float]],
) -> Path:
    """Write {queryMap, embeddingMap} as compact JSON. Not atomic."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w", encoding="utf8") as f:
        f.write(dump_bot_model(query_map, embedding_map))
    logger.info(f"Saved {len(query_map)} queries / {len(embedding_map)} embeddings → {p}")
    return p
