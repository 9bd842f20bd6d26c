"""
Merge finalized records into the database and compute statistics
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

from ingestion.schema import (
    FilterOptions,
    Metadata,
    MythDatabase,
    MythRecord,
    SOURCE_ORDER,
    SourceWork,
    Stats,
)
from utils import config


def _timestamp() -> str:
    """UTC time in ISO-8601 with milliseconds, e.g. 2024-05-01T12:00:00.000Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def compute_stats(records_by_source: Dict[SourceWork, List[MythRecord]]) -> Stats:
    """Counts records per source, per theme and per book"""
    by_sources = {
        source.value: len(records_by_source.get(source, [])) for source in SOURCE_ORDER
    }
    themes: Dict[str, int] = {}
    books: Dict[str, int] = {}

    for source in SOURCE_ORDER:
        for record in records_by_source.get(source, []):
            for theme in record.themes:
                themes[theme] = themes.get(theme, 0) + 1
            if record.book:
                books[record.book] = books.get(record.book, 0) + 1

    return Stats(
        total=sum(by_sources.values()), by_sources=by_sources, themes=themes, books=books
    )


def build_filter_options(stats: Stats) -> FilterOptions:
    """
    Themes by descending frequency (ties keep first-seen order),
    books lexicographically, sources in their fixed order
    """
    return FilterOptions(
        sources=[source.value for source in SOURCE_ORDER],
        themes=sorted(stats.themes, key=lambda theme: -stats.themes[theme]),
        books=sorted(stats.books),
    )


def build_database(
    records_by_source: Dict[SourceWork, List[MythRecord]],
    version: str = config.DB_VERSION,
) -> MythDatabase:
    """
    Assembles the database

    Args:
        records_by_source: Finalized records of each source
        version: Version string for the metadata envelope

    Returns:
        MythDatabase with myths concatenated in SOURCE_ORDER
    """
    myths = []
    for source in SOURCE_ORDER:
        myths.extend(records_by_source.get(source, []))

    stats = compute_stats(records_by_source)
    metadata = Metadata(
        generated=_timestamp(),
        version=version,
        stats=stats,
        filter_options=build_filter_options(stats),
    )
    return MythDatabase(metadata=metadata, myths=myths)


def save_database(database: MythDatabase, output_path: str = config.OUTPUT_PATH):
    """Saves the database to JSON"""
    path = Path(output_path)
    path.parent.mkdir(exist_ok=True, parents=True)
    path.write_text(
        json.dumps(database.to_json_dict(), ensure_ascii=False, indent=2),
        encoding="utf-8",
    )

    abs_path = path.resolve()
    file_size = path.stat().st_size
    print(f"✓ Saved: {abs_path}")
    print(f"  Myths: {len(database.myths)}, File size: {file_size:,} bytes")


def print_summary(database: MythDatabase, top_themes: int = 15):
    """Prints totals, per-source counts and the most frequent themes"""
    stats = database.metadata.stats

    print(f"\n{'='*60}")
    print("Summary:")
    print(f"  Total myths/sections: {stats.total}")
    print("\n  By source:")
    for source, count in stats.by_sources.items():
        print(f"    {source}: {count}")
    print("\n  Top themes:")
    for theme in database.metadata.filter_options.themes[:top_themes]:
        print(f"    {theme}: {stats.themes[theme]}")
    print(f"\n  Books/Chapters found: {len(stats.books)}")
    print(f"{'='*60}")
