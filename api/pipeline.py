"""
API endpoint for rebuilding the database
"""

from fastapi import APIRouter, BackgroundTasks
from pydantic import BaseModel
from typing import Optional

from run_pipeline import run_pipeline
from utils import config
from .dependencies import store

router = APIRouter()


class PipelineRequest(BaseModel):
    """Pipeline run request"""

    data_dir: Optional[str] = None  # If None, uses MYTHS_DATA_DIR


class PipelineResponse(BaseModel):
    """Pipeline run response"""

    message: str
    data_dir: str
    status: str  # "started"


def run_pipeline_background(data_dir: str):
    """Runs the pipeline and drops the cached database"""
    try:
        run_pipeline(data_dir, str(store.path))
    except Exception as e:
        print(f"✗ Pipeline failed: {e}")
        import traceback

        traceback.print_exc()
        return
    store.invalidate()


@router.post("/pipeline", response_model=PipelineResponse)
async def start_pipeline(request: PipelineRequest, background_tasks: BackgroundTasks):
    """
    Rebuild the myth database

    If data_dir is provided, source texts are read from it instead of the
    configured directory.
    """
    data_dir = request.data_dir or config.DATA_DIR
    background_tasks.add_task(run_pipeline_background, data_dir)

    return PipelineResponse(
        message="Pipeline started in background", data_dir=data_dir, status="started"
    )
