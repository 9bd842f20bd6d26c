"""
FastAPI Application - Jewish Mythology API
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .myths import router as myths_router
from .pipeline import router as pipeline_router


app = FastAPI(
    title="Jewish Mythology",
    description="Myths extracted from Tree of Souls and Legends of the Jews",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # The browser is served from a different origin
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(myths_router, prefix="/api", tags=["myths"])
app.include_router(pipeline_router, prefix="/api", tags=["pipeline"])


@app.get("/")
async def root():
    """Home page"""
    return {
        "message": "Jewish Mythology API",
        "version": "1.0.0",
        "endpoints": {
            "health": "/api/health",
            "metadata": "/api/metadata",
            "myth": "/api/myths/{id}",
            "pipeline": "/api/pipeline",
        },
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
