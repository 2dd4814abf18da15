import os
from dotenv import load_dotenv

"""Configuration for the myllmmodel site and Prompt Analyzer."""

# Find the project root (where .env lives)
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(os.path.join(PROJECT_ROOT, ".env"))

# Site
SITE_NAME = os.getenv("SITE_NAME", "myllmmodel.com")
APP_VERSION = os.getenv("APP_VERSION", "0.1.0")

# Server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

# Landing page templates and static assets
FRONTEND_DIR = os.getenv(
    "FRONTEND_DIR",
    os.path.join(PROJECT_ROOT, "frontend"),
)
