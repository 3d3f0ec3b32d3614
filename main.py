# main.py
import os
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI

from infrastructure.web.context_api import router as context_router
from shared.logging import logger, setup_logging

SERVICE_NAME = "Context Package Engine"
SERVICE_VERSION = "1.0.0"

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle"""

    setup_logging(
        level=os.getenv("LOG_LEVEL", "INFO"),
        json_logs=os.getenv("JSON_LOGS", "true").lower() == "true"
    )
    logger.info("Starting context package engine", version=SERVICE_VERSION)

    yield

    logger.info("Shutting down context package engine")

# Create FastAPI app
app = FastAPI(
    title=SERVICE_NAME,
    description="Assembles bounded, prioritized context packages and lookup queries for LLM agents",
    version=SERVICE_VERSION,
    lifespan=lifespan
)

app.include_router(context_router)

@app.get("/health")
def health_check():
    """System health check"""
    return {
        "status": "healthy",
        "version": SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat()
    }

@app.get("/")
def root():
    """API root endpoint"""
    return {
        "service": SERVICE_NAME,
        "description": "Pure, synchronous context package formatting and search query derivation",
        "features": [
            "Fixed-order markdown sections with placeholders",
            "Per-section caps and truncation",
            "Generated system instructions and completeness assessment",
            "Web, code and library lookup query derivation",
            "External search result formatting"
        ],
        "endpoints": {
            "format_context": "POST /context/format",
            "prepare_context": "POST /context/prepare",
            "search_queries": "POST /context/search-queries",
            "external_results": "POST /context/external-results",
            "health_check": "GET /health"
        }
    }

if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8000"))
    host = os.getenv("HOST", "0.0.0.0")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=os.getenv("RELOAD", "false").lower() == "true"
    )
