# Main FastAPI application file
# File: api/main.py

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Dict

from api.utils.auth import get_api_key
from api.utils.config import Config
from api.utils.logging import setup_logger
from api.endpoints.cells import router as cells_router
from api.endpoints.layout import layout_router, strokes_router

import score_cutter

logger = setup_logger("score_cutter.api")

# Define lifespan context manager (replaces on_event)
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Run on application startup.")
    Config.validate()
    
    yield
    
    logger.info("Application shutting down.")

logger.info("==== API INITIALIZATION STARTING ====")

app = FastAPI(
    title="Score Cutter API",
    description="""
    # Score Cutter API
    
    Stateless geometry services for cutting sheet-music images into cells
    and arranging the cells on a free layout.
    
    ## Features
    
    - Cell decomposition from bounded cut lines
    - Cell lookup under a point (bounds for a new cut line)
    - Label continuity between two cell snapshots
    - Edge snapping with alignment guides
    - Splitting annotation strokes over placed tiles
    
    ## Authentication
    
    All endpoints except `/` and `/health` require an API key in the
    `X-API-Key` header.
    """,
    version=score_cutter.__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=[
        {
            "name": "Cells",
            "description": "Cell decomposition, lookup and labeling"
        },
        {
            "name": "Layout",
            "description": "Tile snapping and stroke clipping"
        },
        {
            "name": "Status",
            "description": "API status and health check endpoints"
        }
    ],
    lifespan=lifespan,
)

# Root endpoint
@app.get("/", tags=["Status"])
async def root():
    logger.info("Root endpoint called")
    return {"status": "online", "message": "Score Cutter API is running"}

# Health check endpoint (general API health)
@app.get("/health", tags=["Status"], response_model=Dict[str, str])
async def health_check():
    """Check if the API service is healthy."""
    logger.info("Health check requested")
    return {"status": "healthy", "message": "Score Cutter API is running"}

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict this in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers with auth dependency
app.include_router(
    cells_router,
    prefix="/cells",
    tags=["Cells"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included cells router with prefix /cells")

app.include_router(
    layout_router,
    prefix="/layout",
    tags=["Layout"],
    dependencies=[Depends(get_api_key)]
)

app.include_router(
    strokes_router,
    prefix="/strokes",
    tags=["Layout"],
    dependencies=[Depends(get_api_key)]
)
logger.info("Included layout routers with prefixes /layout and /strokes")

logger.info("==== API INITIALIZATION COMPLETE ====")

# Run with: uvicorn api.main:app --reload
