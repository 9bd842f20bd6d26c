"""
Text normalization for OCR-derived source texts

The transcriptions come from scanned books, so a handful of misreads recur
throughout (the small caps "GOD" read as "COD" or "6OD", split words such as
"he aven"). Only this fixed list is repaired; everything else is left as is.

Title casing is deliberately naive: every space separated word gets its first
character upper-cased and the rest lower-cased. Small words are not kept
lower-case, acronyms are not preserved and hyphenated compounds are treated
as one word:

- "THE CREATION OF THE WORLD" → "The Creation Of The World"
- "ISAIAH'S VISION" → "Isaiah's Vision"
- "TREE-OF-LIFE" → "Tree-of-life"
"""

import re
from typing import Tuple


# Literal (search, replacement) pairs, applied in order
OCR_FIXES: Tuple[Tuple[str, str], ...] = (
    ("COD", "GOD"),
    ("6OD", "GOD"),
    ("600", "God"),
    ("CLORY", "GLORY"),
    ("6LORY", "GLORY"),
    ("cod", "god"),
    ("th e ", "the "),
    ("he aven", "heaven"),
    (" jvvhose ", " whose "),
    (" toglorify ", " to glorify "),
)

MAX_ID_LENGTH = 80


def fix_ocr_errors(line: str) -> str:
    """Repairs the known OCR misreads in a line"""
    for wrong, right in OCR_FIXES:
        line = line.replace(wrong, right)
    return line


def clean_text(text: str) -> str:
    """Basic text cleaning"""
    if not text:
        return ""

    text = text.replace("\r\n", "\n")

    # Clean whitespace runs (this also turns wrapped "-\n" into "- ")
    text = re.sub(r"\s+", " ", text)

    # Join words hyphenated across OCR line breaks
    text = text.replace("- ", "")

    return text.strip()


def title_case(text: str) -> str:
    """Capitalizes the first character of each word, lower-cases the rest"""
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


def slugify(*parts: str) -> str:
    """
    Builds a stable record id from its parts

    Args:
        parts: Id components (e.g. "ginzberg", "v1", "The Creation Of The World")

    Returns:
        Lower-case slug, at most MAX_ID_LENGTH characters
        (e.g. "ginzberg-v1-the-creation-of-the-world")
    """
    slug = re.sub(r"[^a-z0-9]+", "-", "-".join(parts).lower())
    return slug.strip("-")[:MAX_ID_LENGTH]
