# src/botmodels/generate_models.py
"""
Generate the JSON dialog model of each bot for the web client.

For every bot: read <data_dir>/<bot>.csv, key rows by [query, states],
precompute an embedding for each distinct non-"{{any}}" query and write
<output_dir>/<bot>.model.json as {"queryMap": ..., "embeddingMap": ...}.

Usage:
    python -m botmodels.generate_models
    python -m botmodels.generate_models --bots maid chef --max-workers 8
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .config import DATA_DIR, DEFAULT_BOTS, DEFAULT_EMBEDDING, MAX_WORKERS, OUTPUT_DIR
from .data.loader import bot_csv_path, load_dialog_records
from .dialog.embedding_map import build_embedding_map
from .dialog.model_writer import bot_model_path, write_bot_model
from .dialog.query_map import build_query_map
from .logger import get_logger

logger = get_logger("generate_models")


async def generate_bot_model(
    bot_name: str,
    embedder,
    data_dir: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
    max_workers: Optional[int] = None,
) -> Path:
    """Run the CSV -> query map -> embeddings -> JSON pipeline for one bot."""
    records = await asyncio.to_thread(load_dialog_records, bot_csv_path(bot_name, data_dir))
    query_map = build_query_map(records)
    embedding_map = await build_embedding_map(query_map, embedder, max_workers=max_workers)
    return write_bot_model(bot_model_path(bot_name, output_dir), query_map, embedding_map)


async def generate_all(
    bot_names: Iterable[str],
    embedder,
    data_dir: Optional[Union[str, Path]] = None,
    output_dir: Optional[Union[str, Path]] = None,
    max_workers: Optional[int] = None,
) -> Dict[str, Union[Path, BaseException]]:
    """
    Generate every bot concurrently. A failing bot does not stop the others;
    its exception is logged and returned in place of the output path.
    """
    bot_names = list(bot_names)
    results = await asyncio.gather(
        *(generate_bot_model(b, embedder, data_dir, output_dir, max_workers) for b in bot_names),
        return_exceptions=True,
    )
    for bot, res in zip(bot_names, results):
        if isinstance(res, BaseException):
            logger.error(f"Model generation failed for '{bot}'", exc_info=res)
    return dict(zip(bot_names, results))


def main(args) -> int:
    # imported here so --help works without loading torch
    from .embeddings.embedder import Embedder

    embedder = Embedder(args.model_name)
    results = asyncio.run(
        generate_all(args.bots, embedder, args.data_dir, args.output_dir, args.max_workers)
    )

    failed = [b for b, r in results.items() if isinstance(r, BaseException)]
    for bot, res in results.items():
        if bot in failed:
            print(f"❌ {bot}: {type(res).__name__}: {res}")
        else:
            print(f"✅ {bot} → {res}")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Precompute bot dialog models (query map + embeddings)")
    parser.add_argument("--bots", nargs="+", default=DEFAULT_BOTS, help="Bot names, one <bot>.csv each")
    parser.add_argument("--data-dir", type=str, default=DATA_DIR)
    parser.add_argument("--output-dir", type=str, default=OUTPUT_DIR)
    parser.add_argument("--model-name", type=str, default=DEFAULT_EMBEDDING)
    parser.add_argument("--max-workers", type=int, default=MAX_WORKERS, help="Concurrent embedding calls per bot")
    return parser


if __name__ == "__main__":
    sys.exit(main(build_parser().parse_args()))
