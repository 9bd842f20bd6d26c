from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional


class SourceWork(str, Enum):
    """Anthology (and volume) a record was extracted from"""

    SCHWARTZ = "schwartz"
    GINZBERG_V1 = "ginzberg-v1"
    GINZBERG_V2 = "ginzberg-v2"


# Fixed order used for concatenation and for filterOptions.sources
SOURCE_ORDER = [SourceWork.SCHWARTZ, SourceWork.GINZBERG_V1, SourceWork.GINZBERG_V2]


class MythRecord(BaseModel):
    """A single finalized myth"""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    id: str
    number: Optional[int] = None  # Only Tree of Souls entries are numbered
    title: str
    content: str
    commentary: str = ""
    sources: List[str] = []
    book: str = ""
    section: str = ""
    source_work: SourceWork = Field(alias="sourceWork")
    biblical_references: List[str] = Field(default=[], alias="biblicalReferences")
    themes: List[str] = []


class Stats(BaseModel):
    """Frequency statistics over the whole corpus"""

    model_config = ConfigDict(populate_by_name=True)

    total: int
    by_sources: Dict[str, int] = Field(alias="bySources")
    themes: Dict[str, int]
    books: Dict[str, int]


class FilterOptions(BaseModel):
    """Vocabularies for the browser's filter controls"""

    sources: List[str]
    themes: List[str]  # Descending frequency
    books: List[str]  # Lexicographic


class Metadata(BaseModel):
    """Metadata envelope of the database"""

    model_config = ConfigDict(populate_by_name=True)

    generated: str
    version: str
    stats: Stats
    filter_options: FilterOptions = Field(alias="filterOptions")


class MythDatabase(BaseModel):
    """The serialized output of one pipeline run"""

    metadata: Metadata
    myths: List[MythRecord]

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
