#!/usr/bin/env python3
"""
Script to run the full pipeline

Reads the three source texts, segments them into myths, annotates them and
writes the database JSON.

USAGE:
    python run_pipeline.py                       # Use MYTHS_DATA_DIR / MYTHS_OUTPUT_PATH
    python run_pipeline.py --data-dir texts/     # Read sources from another directory
    python run_pipeline.py --dry-run             # Build and summarize without writing
"""
import argparse
import sys
from typing import Dict, List

from ingestion.load_sources import load_all_sources
from ingestion.schema import MythDatabase, MythRecord, SourceWork
from ingestion.segment import DraftRecord, LegendsSegmenter, TreeOfSoulsSegmenter
from preprocess.aggregate import build_database, print_summary, save_database
from preprocess.finalize import finalize_records
from utils import config


def print_step(step_name: str, description: str):
    """Prints a pipeline step banner"""
    print(f"\n{'='*60}")
    print(f"Step: {step_name}")
    print(f"Description: {description}")
    print(f"{'='*60}\n")


def segment_sources(texts: Dict[SourceWork, str]) -> Dict[SourceWork, List[DraftRecord]]:
    """Runs each source through its segmenter"""
    drafts = {}

    print("Parsing Schwartz - Tree of Souls...")
    drafts[SourceWork.SCHWARTZ] = TreeOfSoulsSegmenter(
        texts[SourceWork.SCHWARTZ]
    ).segment()
    print(f"  Found {len(drafts[SourceWork.SCHWARTZ])} myths")

    for volume, source in ((1, SourceWork.GINZBERG_V1), (2, SourceWork.GINZBERG_V2)):
        print(f"\nParsing Ginzberg - Legends of the Jews, Volume {volume}...")
        drafts[source] = LegendsSegmenter(texts[source], volume).segment()
        print(f"  Found {len(drafts[source])} sections")

    return drafts


def finalize_sources(
    drafts: Dict[SourceWork, List[DraftRecord]]
) -> Dict[SourceWork, List[MythRecord]]:
    """Cleans and annotates the drafts of every source"""
    records = {}
    for source, source_drafts in drafts.items():
        records[source] = finalize_records(source_drafts)
        dropped = len(source_drafts) - len(records[source])
        print(f"✓ {source.value}: {len(records[source])} records ({dropped} dropped)")
    return records


def run_pipeline(
    data_dir: str = config.DATA_DIR,
    output_path: str = config.OUTPUT_PATH,
    dry_run: bool = False,
) -> MythDatabase:
    """
    Runs the full pipeline

    Raises:
        FileNotFoundError: If a source file is missing (nothing is written)
    """
    print("=" * 60)
    print("Jewish Mythology - Pipeline")
    print("=" * 60)

    print_step("1. Load sources", "Reads the source transcriptions")
    texts = load_all_sources(data_dir)

    print_step("2. Segment", "Splits each source into draft myths")
    drafts = segment_sources(texts)

    print_step("3. Finalize", "Cleans text, extracts references and themes")
    records = finalize_sources(drafts)

    print_step("4. Aggregate", "Merges records and computes statistics")
    database = build_database(records)
    print_summary(database)

    if not dry_run:
        print_step("5. Save", "Writes the database JSON")
        save_database(database, output_path)

    print("\n" + "=" * 60)
    print("✓ Pipeline completed successfully!")
    print("=" * 60)
    return database


def main(argv: List[str] = None):
    """Runs the full pipeline from the command line"""
    parser = argparse.ArgumentParser(description="Build the myth database")
    parser.add_argument("--data-dir", default=config.DATA_DIR, help="Source texts directory")
    parser.add_argument("--output", default=config.OUTPUT_PATH, help="Database JSON path")
    parser.add_argument("--dry-run", action="store_true", help="Do not write the database")
    args = parser.parse_args(argv)

    try:
        run_pipeline(args.data_dir, args.output, args.dry_run)
    except Exception as e:
        print(f"✗ Error: {e}")
        print("Pipeline stopped")
        sys.exit(1)


if __name__ == "__main__":
    main()
