"""FastAPI backend serving the landing page and JSON API."""
