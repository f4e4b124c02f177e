import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import CORS_ORIGINS
from .database import create_tables
from .routers import tasks

logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Todo Tracker API",
    description="Personal to-do list backed by a task store",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api/tasks", tags=["tasks"])

# Create tables on startup
@app.on_event("startup")
def on_startup():
    create_tables()
    logger.info("Task store ready")

@app.get("/")
def read_root():
    return {"message": "Todo Tracker API"}

@app.get("/health")
def health_check():
    return {"status": "healthy"}
