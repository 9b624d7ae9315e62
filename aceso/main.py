# aceso backend api
# fastapi app with an injected journal entry store, emotion analysis, and a wellness assistant

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aceso.config import settings
from aceso.services.entry_store import create_entry_store
from aceso.routers import journal, insights, strategies, assistant

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """startup: build and connect the entry store. shutdown: close it."""
    logger.info(f"Starting Aceso backend with {settings.STORAGE_BACKEND} entry store...")
    store = create_entry_store(settings.STORAGE_BACKEND)
    await store.connect()
    app.state.entry_store = store
    logger.info("Aceso backend ready")
    yield
    logger.info("Shutting down Aceso backend...")
    await store.close()


app = FastAPI(
    title="Aceso API",
    description="Backend API for the Aceso wellness journal: entries, emotion analysis, mood insights, coping strategies",
    version="0.1.0",
    lifespan=lifespan,
)

# cors - allow frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL, "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# register routers
app.include_router(journal.router)
app.include_router(insights.router)
app.include_router(strategies.router)
app.include_router(assistant.router)


@app.get("/health")
async def health_check():
    """basic health check endpoint"""
    return {"status": "ok", "service": "aceso-api"}
