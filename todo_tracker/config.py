from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./todo_tracker.db")
PORT = int(os.getenv("PORT", "5000"))
HOST = "0.0.0.0"

CORS_ORIGINS = ["*"]
