"""
Segmentation of the OCR transcriptions into draft myth records

The transcriptions carry no markup, so structure is recovered from typography
alone: capitalization, numbering and Roman numerals. Each source gets its own
segmenter, written as an explicit state machine:

- next_transition(state, line, upcoming) looks at one line (and, for headings
  that span several lines, a few lines ahead) and returns a Transition: the
  effect to apply, the next mode and the values it carries. It never mutates
  anything, so every rule can be tested on its own.
- apply(state, transition) performs the effect: flushing the open record,
  opening a book/section/record, buffering a line.

Tree of Souls (Schwartz) - modes:
- seeking    → between structural units, nothing is accumulated
- content    → the narrative of a numbered myth
- commentary → the editor's analysis that follows the narrative
- sources    → citation lines after a "Sources" header
- skip       → a "Studies" block, discarded

    BOOK ONE                  → book "Book One: Myths Of God"
    MYTHS OF GOD
    THE HEAVENLY COURT        → section "The Heavenly Court"
    1. THE FIRST LIGHT        → record #1 "The First Light"
    In the beginning ...      → content
    This myth ...             → commentary (after enough narrative)
    Sources:                  → sources
    Midrash Rabbah, Zohar

Legends of the Jews (Ginzberg) - only seeking and content:

    I                         → chapter "I. The Creation Of The World"
    THE CREATION OF THE WORLD
    THE FIRST THINGS CREATED  → record "The First Things Created"
    When God ... [12]         → content (footnote markers stripped)
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ingestion.normalize import fix_ocr_errors, title_case
from ingestion.schema import SourceWork
from utils import config


class Mode(str, Enum):
    """What the segmenter is currently accumulating"""

    SEEKING = "seeking"
    CONTENT = "content"
    COMMENTARY = "commentary"
    SOURCES = "sources"
    SKIP = "skip"


class Effect(str, Enum):
    """Side effect of a transition"""

    IGNORE = "ignore"
    OPEN_BOOK = "open_book"  # Flushes; sets book (or chapter), resets section
    OPEN_SECTION = "open_section"  # Flushes; sets section
    START_RECORD = "start_record"  # Flushes; opens a new draft record
    SWITCH_MODE = "switch_mode"
    ADD_SOURCES = "add_sources"
    APPEND_LINE = "append_line"


@dataclass
class DraftRecord:
    """A record while it is being accumulated"""

    title: str
    source_work: SourceWork
    book: str = ""
    section: str = ""
    number: Optional[int] = None
    volume: Optional[int] = None
    lines: List[Tuple[Mode, str]] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)

    def text(self, mode: Mode) -> str:
        """Joins the lines buffered under a mode, in original order"""
        return " ".join(text for line_mode, text in self.lines if line_mode == mode)

    @property
    def content(self) -> str:
        return self.text(Mode.CONTENT)

    @property
    def commentary(self) -> str:
        return self.text(Mode.COMMENTARY)

    def content_length(self) -> int:
        return sum(len(text) for mode, text in self.lines if mode == Mode.CONTENT)


@dataclass
class SegmenterState:
    mode: Mode = Mode.SEEKING
    book: str = ""
    section: str = ""
    record: Optional[DraftRecord] = None


@dataclass(frozen=True)
class Transition:
    effect: Effect
    mode: Mode
    label: str = ""  # Book, section or record title
    number: Optional[int] = None
    values: Tuple[str, ...] = ()
    consumed: int = 0  # Lines after the current one swallowed by a heading


DIGITS_PATTERN = re.compile(r"^\d+$")


class BaseSegmenter:
    """Base class for segmenters"""

    min_content_length = 0
    lookahead = 0
    volume: Optional[int] = None

    def __init__(self, text: str, source_work: SourceWork, start_offset: int = 0):
        self.lines = [line.strip() for line in text.split("\n")]
        self.source_work = source_work
        self.start_offset = start_offset
        self.records: List[DraftRecord] = []

    def find_content_start(self) -> Optional[int]:
        """Index of the first line of the body, None if it cannot be found"""
        raise NotImplementedError

    def next_transition(
        self, state: SegmenterState, line: str, upcoming: Sequence[str]
    ) -> Transition:
        """Decide what a non-empty line means - to be implemented by subclasses"""
        raise NotImplementedError

    def segment(self) -> List[DraftRecord]:
        """Runs the state machine over the body and returns the kept drafts"""
        self.records = []

        start = self.find_content_start()
        if start is None:
            print(
                f"  ⚠ Warning: Could not find content start marker "
                f"for {self.source_work.value}"
            )
            return self.records

        print(f"  Content starts at line {start}")

        state = SegmenterState()
        i = start
        while i < len(self.lines):
            line = self.lines[i]
            if line:
                upcoming = self.lines[i + 1 : i + 1 + self.lookahead]
                transition = self.next_transition(state, line, upcoming)
                self.apply(state, transition)
                i += transition.consumed
            i += 1

        self.flush(state)
        return self.records

    def apply(self, state: SegmenterState, transition: Transition) -> None:
        """Performs the side effect of a transition"""
        effect = transition.effect
        if effect == Effect.IGNORE:
            return

        if effect in (Effect.OPEN_BOOK, Effect.OPEN_SECTION, Effect.START_RECORD):
            self.flush(state)

        if effect == Effect.OPEN_BOOK:
            state.book = transition.label
            state.section = ""
        elif effect == Effect.OPEN_SECTION:
            state.section = transition.label
        elif effect == Effect.START_RECORD:
            state.record = DraftRecord(
                title=transition.label,
                source_work=self.source_work,
                book=state.book,
                section=state.section,
                number=transition.number,
                volume=self.volume,
            )
        elif effect == Effect.ADD_SOURCES:
            state.record.sources.extend(transition.values)
        elif effect == Effect.APPEND_LINE:
            state.record.lines.append((transition.mode, transition.values[0]))

        state.mode = transition.mode

    def flush(self, state: SegmenterState) -> None:
        """Closes the open record, keeping it only if it has enough content"""
        record = state.record
        state.record = None
        if record is not None and len(record.content) > self.min_content_length:
            self.records.append(record)


class TreeOfSoulsSegmenter(BaseSegmenter):
    """Segmenter for Schwartz, Tree of Souls

    Structure: Book → Section → numbered Myth → content / commentary / sources
    """

    min_content_length = 50
    lookahead = 3  # A book's subtitle follows within three lines

    # Page numbers, front-matter numerals and running headers
    NOISE_PATTERNS = (
        DIGITS_PATTERN,
        re.compile(r"^[ivxlc]+$", re.IGNORECASE),
        re.compile(r"^CONTENTS"),
        re.compile(r"^\d+\s+MYTHS OF"),
    )
    BOOK_PATTERN = re.compile(
        r"^BOOK\s+(ONE|TWO|THREE|FOUR|FIVE|SIX|SEVEN|EIGHT|NINE|TEN)$", re.IGNORECASE
    )
    BOOK_SUBTITLE_PATTERN = re.compile(r"^MYTHS\s+(OF|ABOUT)", re.IGNORECASE)
    MYTH_TITLE_PATTERN = re.compile(r"^(\d+)\.\s+([A-Z][A-Z\s'‘’,\-&?]+)$")
    SOURCES_HEADER = re.compile(r"^Sources\s*:?\s*$", re.IGNORECASE)
    STUDIES_HEADER = re.compile(r"^Studies\s*:?\s*$", re.IGNORECASE)

    COMMENTARY_MIN_LENGTH = 300
    COMMENTARY_LEAD_IN = re.compile(
        r"^(This (biblical|myth|passage|story|legend|vision|account|text|is)"
        r"|Here (the|God|we)"
        r"|In this (myth|passage|interpretation)"
        r"|According to|One way of reading|A close variant|The idea"
        r"|While|So too|Some say|There are many)",
        re.IGNORECASE,
    )
    QUOTE_MARKS = ('"', "“", "”")
    SPEECH_WORDS = ("said", "spoke")

    def __init__(
        self,
        text: str,
        start_offset: int = config.SCHWARTZ_START_OFFSET,
        start_marker: str = config.SCHWARTZ_START_MARKER,
    ):
        super().__init__(text, SourceWork.SCHWARTZ, start_offset)
        self.start_marker = start_marker

    def find_content_start(self) -> Optional[int]:
        for i in range(self.start_offset, len(self.lines)):
            if self.lines[i] == self.start_marker:
                return i
        return None

    def next_transition(
        self, state: SegmenterState, line: str, upcoming: Sequence[str]
    ) -> Transition:
        if any(pattern.match(line) for pattern in self.NOISE_PATTERNS):
            return Transition(Effect.IGNORE, state.mode)

        line = fix_ocr_errors(line)

        if self.BOOK_PATTERN.match(line):
            label, consumed = self._book_label(line, upcoming)
            return Transition(
                Effect.OPEN_BOOK, Mode.SEEKING, label=label, consumed=consumed
            )

        if self._is_section_header(state, line):
            return Transition(Effect.OPEN_SECTION, Mode.SEEKING, label=title_case(line))

        match = self.MYTH_TITLE_PATTERN.match(line)
        if match:
            return Transition(
                Effect.START_RECORD,
                Mode.CONTENT,
                label=title_case(match.group(2).strip()),
                number=int(match.group(1)),
            )

        if self.SOURCES_HEADER.match(line):
            return Transition(Effect.SWITCH_MODE, Mode.SOURCES)

        if self.STUDIES_HEADER.match(line):
            return Transition(Effect.SWITCH_MODE, Mode.SKIP)

        if state.record is None or state.mode in (Mode.SEEKING, Mode.SKIP):
            return Transition(Effect.IGNORE, state.mode)

        if state.mode == Mode.SOURCES:
            parts = [part.strip() for part in line.replace(";", ",").split(",")]
            return Transition(
                Effect.ADD_SOURCES,
                Mode.SOURCES,
                values=tuple(part for part in parts if len(part) > 2),
            )

        mode = state.mode
        if mode == Mode.CONTENT and self._starts_commentary(state.record, line):
            mode = Mode.COMMENTARY
        return Transition(Effect.APPEND_LINE, mode, values=(line,))

    def _book_label(self, line: str, upcoming: Sequence[str]) -> Tuple[str, int]:
        """
        Builds the book label, absorbing a "MYTHS OF ..." subtitle if one follows

        Returns:
            Tuple of (label, number of lines consumed)
            e.g. ("Book One: Myths Of God", 1)
        """
        label = title_case(line)
        for offset, next_line in enumerate(upcoming[: self.lookahead], 1):
            if not next_line:
                continue
            subtitle = fix_ocr_errors(next_line)
            if self.BOOK_SUBTITLE_PATTERN.match(subtitle):
                return f"{label}: {title_case(subtitle)}", offset
        return label, 0

    def _is_section_header(self, state: SegmenterState, line: str) -> bool:
        return (
            bool(state.book)
            and line.isupper()
            and 5 < len(line) < 60
            and not re.match(r"^\d+\.", line)
            and not re.match(r"^BOOK\s+", line)
            and not re.match(r"^Sources", line, re.IGNORECASE)
            and not re.match(r"^Studies", line, re.IGNORECASE)
        )

    def _starts_commentary(self, record: DraftRecord, line: str) -> bool:
        """
        Whether this line opens the editor's commentary

        Requires substantial narrative first (counting the candidate line), an
        analytical lead-in phrase, and nothing that looks like dialogue.
        """
        if not record.lines:
            return False
        return (
            record.content_length() + len(line) > self.COMMENTARY_MIN_LENGTH
            and bool(self.COMMENTARY_LEAD_IN.match(line))
            and not any(mark in line for mark in self.QUOTE_MARKS)
            and not any(word in line for word in self.SPEECH_WORDS)
        )


class LegendsSegmenter(BaseSegmenter):
    """Segmenter for Ginzberg, Legends of the Jews (one volume at a time)

    Structure: Chapter (Roman numeral + title) → Section (all-caps title) → content
    """

    min_content_length = 100
    lookahead = 4  # A chapter's title follows within four lines

    ROMAN_CHAPTER_PATTERN = re.compile(r"^(I{1,3}|IV|VI{0,3})\.?$")
    LOWER_ROMAN_PATTERN = re.compile(r"^[ivxlc]+$")
    FOOTNOTE_PATTERN = re.compile(r"\[\d+\]")

    def __init__(
        self,
        text: str,
        volume: int,
        start_offset: int = config.GINZBERG_START_OFFSET,
        chapter_keywords: Sequence[str] = config.GINZBERG_CHAPTER_KEYWORDS,
        title_markers: Sequence[str] = config.GINZBERG_TITLE_MARKERS,
    ):
        super().__init__(text, SourceWork(f"ginzberg-v{volume}"), start_offset)
        self.volume = volume
        self.chapter_keywords = tuple(chapter_keywords)
        self.title_markers = tuple(title_markers)

    def find_content_start(self) -> Optional[int]:
        """
        The body opens with chapter "I" followed by its title; either the
        numeral (with a recognizable title after it) or a known title marks it
        """
        for i in range(self.start_offset, len(self.lines)):
            line = self.lines[i]
            if line in ("I", "I."):
                next_line = self.lines[i + 1].upper() if i + 1 < len(self.lines) else ""
                if any(keyword in next_line for keyword in self.chapter_keywords):
                    return i
            if line in self.title_markers:
                return max(i - 1, 0)
        return None

    def next_transition(
        self, state: SegmenterState, line: str, upcoming: Sequence[str]
    ) -> Transition:
        if DIGITS_PATTERN.match(line) or self.LOWER_ROMAN_PATTERN.match(line):
            return Transition(Effect.IGNORE, state.mode)

        if self.ROMAN_CHAPTER_PATTERN.match(line):
            label, consumed = self._chapter_label(state, line, upcoming)
            return Transition(
                Effect.OPEN_BOOK, Mode.SEEKING, label=label, consumed=consumed
            )

        if (
            state.book
            and line.isupper()
            and 5 < len(line) < 80
            and "***" not in line
        ):
            return Transition(Effect.START_RECORD, Mode.CONTENT, label=title_case(line))

        if state.record is None:
            return Transition(Effect.IGNORE, state.mode)

        text = self.FOOTNOTE_PATTERN.sub("", line).strip()
        if not text:
            return Transition(Effect.IGNORE, state.mode)
        return Transition(Effect.APPEND_LINE, Mode.CONTENT, values=(text,))

    def _chapter_label(
        self, state: SegmenterState, line: str, upcoming: Sequence[str]
    ) -> Tuple[str, int]:
        """
        Pairs the numeral with the all-caps title that follows it

        Returns:
            Tuple of (label, number of lines consumed), e.g.
            ("I. The Creation Of The World", 1). Without a title within reach
            the previous chapter label is kept.
        """
        numeral = line.replace(".", "").strip()
        for offset, next_line in enumerate(upcoming[: self.lookahead], 1):
            if (
                next_line
                and next_line.isupper()
                and len(next_line) > 3
                and not self.ROMAN_CHAPTER_PATTERN.match(next_line)
            ):
                return f"{numeral}. {title_case(next_line)}", offset
        return state.book, 0
