"""
Biblical and rabbinic reference extraction

Best effort: a book name optionally followed by chapter, verse and an end
verse. Matches are not verified against the actual canon.
"""

import re
from typing import List, Tuple


BIBLICAL_BOOKS: Tuple[str, ...] = (
    "Genesis", "Exodus", "Leviticus", "Numbers", "Deuteronomy",
    "Joshua", "Judges", "Ruth", "1 Samuel", "2 Samuel", "1 Kings", "2 Kings",
    "1 Chronicles", "2 Chronicles", "Ezra", "Nehemiah", "Esther",
    "Job", "Psalms", "Proverbs", "Ecclesiastes", "Song of Songs", "Song of Solomon",
    "Isaiah", "Jeremiah", "Lamentations", "Ezekiel", "Daniel",
    "Hosea", "Joel", "Amos", "Obadiah", "Jonah", "Micah", "Nahum",
    "Habakkuk", "Zephaniah", "Haggai", "Zechariah", "Malachi",
    # Hebrew names
    "Bereishit", "Shemot", "Vayikra", "Bamidbar", "Devarim",
    "Tehillim", "Mishlei", "Kohelet", "Shir HaShirim", "Iyov",
    "Yeshayahu", "Yirmiyahu", "Yechezkel", "Daniyel",
    # Abbreviations
    "Isa.", "Gen.", "Exod.", "Lev.", "Num.", "Deut.",
    "Ezek.", "Dan.", "Ps.", "Prov.",
    # Talmud (Bavli / Yerushalmi) and midrashic sources
    "B.", "Y.", "Midrash", "Pirkei", "Zohar",
)

# A book name must stand alone ("Ruth" but not "truth", "Y." but not "theology.")
BIBLICAL_PATTERN = re.compile(
    r"(?<![A-Za-z])("
    + "|".join(re.escape(book) for book in BIBLICAL_BOOKS)
    + r")(?![A-Za-z])\s*(\d+)?[:.]?(\d+)?(?:[-–](\d+))?",
    re.IGNORECASE,
)


def format_reference(book: str, chapter: str = None, verse: str = None, end_verse: str = None) -> str:
    """
    Builds the canonical citation string

    Examples:
        ("Gen.", "3", "14", "15") → "Gen 3:14-15"
        ("Zohar", None, None, None) → "Zohar"
    """
    ref = book.replace(".", "")
    if chapter:
        ref += f" {chapter}"
        if verse:
            ref += f":{verse}"
            if end_verse:
                ref += f"-{end_verse}"
    return ref.strip()


def extract_biblical_references(text: str) -> List[str]:
    """
    Finds all citations in free text

    Args:
        text: Any text (title, content, commentary...)

    Returns:
        Canonical citations, deduplicated, in order of first appearance
    """
    references = []
    seen = set()

    for match in BIBLICAL_PATTERN.finditer(text or ""):
        ref = format_reference(*match.groups())
        if ref not in seen:
            seen.add(ref)
            references.append(ref)

    return references
