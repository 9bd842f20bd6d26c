"""
Turn draft records into finalized, annotated myth records
"""

from typing import List, Optional

from ingestion.normalize import clean_text, slugify
from ingestion.schema import MythRecord, SourceWork
from ingestion.segment import DraftRecord, LegendsSegmenter, TreeOfSoulsSegmenter
from preprocess.references import extract_biblical_references
from preprocess.themes import extract_themes


def annotation_text(draft: DraftRecord) -> str:
    """
    Text the references and themes are extracted from

    Tree of Souls annotates title, content and commentary together;
    Legends of the Jews annotates the content alone.
    """
    if draft.source_work == SourceWork.SCHWARTZ:
        return f"{draft.title} {draft.content} {draft.commentary}"
    return draft.content


def record_id(draft: DraftRecord) -> str:
    """
    Stable id from source and title, e.g. "schwartz-the-first-light" or
    "ginzberg-v1-the-first-things-created". Collisions are not resolved.
    """
    if draft.source_work == SourceWork.SCHWARTZ:
        return slugify("schwartz", draft.title)
    return slugify("ginzberg", f"v{draft.volume}", draft.title)


def min_content_length(source_work: SourceWork) -> int:
    if source_work == SourceWork.SCHWARTZ:
        return TreeOfSoulsSegmenter.min_content_length
    return LegendsSegmenter.min_content_length


def finalize_record(draft: DraftRecord) -> Optional[MythRecord]:
    """
    Cleans and annotates one draft

    Returns:
        The finalized record, or None if cleaning left too little content
    """
    full_text = annotation_text(draft)
    content = clean_text(draft.content)
    if len(content) <= min_content_length(draft.source_work):
        return None

    return MythRecord(
        id=record_id(draft),
        number=draft.number,
        title=draft.title,
        content=content,
        commentary=clean_text(draft.commentary),
        sources=[source for source in draft.sources if len(source) > 2],
        book=draft.book,
        section=draft.section,
        source_work=draft.source_work,
        biblical_references=extract_biblical_references(full_text),
        themes=extract_themes(full_text),
    )


def finalize_records(drafts: List[DraftRecord]) -> List[MythRecord]:
    """Finalizes drafts in order, dropping degenerate ones"""
    records = []
    for draft in drafts:
        record = finalize_record(draft)
        if record is not None:
            records.append(record)
    return records
