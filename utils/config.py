"""
Pipeline configuration - read once from environment variables

Environment variables:
- MYTHS_DATA_DIR: Directory holding the source text files (default: data/raw)
- MYTHS_OUTPUT_PATH: Where the database JSON is written (default: data/myths.json)
- MYTHS_DB_VERSION: Version string stamped into the metadata (default: 1.0.0)
- SCHWARTZ_FILE / GINZBERG_V1_FILE / GINZBERG_V2_FILE: Source file names
- SCHWARTZ_START_OFFSET: Line to start looking for the first book header (default: 6000)
- SCHWARTZ_START_MARKER: The first book header line (default: BOOK ONE)
- GINZBERG_START_OFFSET: Line to start looking for the first chapter (default: 400)
- GINZBERG_CHAPTER_KEYWORDS: Comma separated words expected in the first chapter title
- GINZBERG_TITLE_MARKERS: Comma separated first chapter titles
"""

import os
from typing import Tuple


def _csv(value: str) -> Tuple[str, ...]:
    return tuple(part.strip() for part in value.split(",") if part.strip())


DATA_DIR = os.getenv("MYTHS_DATA_DIR", "data/raw")
OUTPUT_PATH = os.getenv("MYTHS_OUTPUT_PATH", "data/myths.json")
DB_VERSION = os.getenv("MYTHS_DB_VERSION", "1.0.0")

SCHWARTZ_FILE = os.getenv("SCHWARTZ_FILE", "schwartz-tree-of-souls.txt")
GINZBERG_V1_FILE = os.getenv("GINZBERG_V1_FILE", "ginzburg-legendofthejews-volume1.txt")
GINZBERG_V2_FILE = os.getenv("GINZBERG_V2_FILE", "ginzburg-legendofthejews-volume2.txt")

# The front matter (contents, preface) repeats the headings, so the search
# for the first structural marker starts past it
SCHWARTZ_START_OFFSET = int(os.getenv("SCHWARTZ_START_OFFSET", "6000"))
SCHWARTZ_START_MARKER = os.getenv("SCHWARTZ_START_MARKER", "BOOK ONE")

GINZBERG_START_OFFSET = int(os.getenv("GINZBERG_START_OFFSET", "400"))
GINZBERG_CHAPTER_KEYWORDS = _csv(
    os.getenv("GINZBERG_CHAPTER_KEYWORDS", "CREATION,JOSEPH")
)
GINZBERG_TITLE_MARKERS = _csv(
    os.getenv("GINZBERG_TITLE_MARKERS", "THE CREATION OF THE WORLD,JOSEPH")
)
