"""
API endpoints for reading the myth database
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ingestion.schema import MythDatabase
from .dependencies import store

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    myths: int
    database: str


def _database() -> MythDatabase:
    try:
        return store.get()
    except FileNotFoundError as e:
        raise HTTPException(
            status_code=503, detail=f"{e}. Run the pipeline first (POST /api/pipeline)"
        )


@router.get("/health", response_model=HealthResponse)
async def health():
    """Reports whether the database has been built"""
    try:
        database = store.get()
    except FileNotFoundError:
        return HealthResponse(status="no-database", myths=0, database=str(store.path))
    return HealthResponse(status="ok", myths=len(database.myths), database=str(store.path))


@router.get("/metadata")
async def metadata():
    """Metadata envelope: generation time, version, stats and filter options"""
    return _database().metadata.model_dump(by_alias=True)


@router.get("/myths/{myth_id}")
async def get_myth(myth_id: str):
    """A single myth by id"""
    _database()
    myth = store.find(myth_id)
    if myth is None:
        raise HTTPException(status_code=404, detail=f"Myth not found: {myth_id}")
    return myth.model_dump(by_alias=True, exclude_none=True)
