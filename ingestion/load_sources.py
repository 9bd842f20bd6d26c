"""
Locate and read the source transcriptions
"""

from pathlib import Path
from typing import Dict

from ingestion.schema import SourceWork, SOURCE_ORDER
from utils import config


SOURCE_FILES: Dict[SourceWork, str] = {
    SourceWork.SCHWARTZ: config.SCHWARTZ_FILE,
    SourceWork.GINZBERG_V1: config.GINZBERG_V1_FILE,
    SourceWork.GINZBERG_V2: config.GINZBERG_V2_FILE,
}


def load_source(source: SourceWork, data_dir: str = config.DATA_DIR) -> str:
    """
    Reads a single source text

    Args:
        source: Which anthology/volume to read
        data_dir: Directory holding the source files

    Returns:
        The full text of the file

    Raises:
        FileNotFoundError: If the file does not exist
    """
    file_path = Path(data_dir) / SOURCE_FILES[source]
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")

    return file_path.read_text(encoding="utf-8")


def load_all_sources(data_dir: str = config.DATA_DIR) -> Dict[SourceWork, str]:
    """
    Reads every source text up front, so a missing file aborts the run
    before anything is segmented or written
    """
    data_path = Path(data_dir).resolve()
    print(f"Reading sources from: {data_path}")

    texts = {}
    for source in SOURCE_ORDER:
        texts[source] = load_source(source, data_dir)
        line_count = texts[source].count("\n") + 1
        print(f"✓ Loaded: {SOURCE_FILES[source]} ({line_count:,} lines)")

    return texts
