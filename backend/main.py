"""
FastAPI backend — landing page and JSON API for myllmmodel.com.

Serves:
- GET  /                → Landing page
- POST /analyze         → Prompt quality score and tips
- GET  /models[/{id}]   → Model highlights
- GET  /compare         → Two-way model comparison
- GET  /prompts         → Prompt library search
- POST /playground/run  → Demo playground (canned response)
- GET  /pricing         → Pricing tiers
- GET  /health          → Health check
"""

import logging
import os
from datetime import date
from typing import Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from prompt_analyzer import PromptAnalyzer
from prompt_analyzer.config import (
    APP_VERSION,
    CORS_ORIGINS,
    FRONTEND_DIR,
    HOST,
    LOG_FORMAT,
    LOG_LEVEL,
    PORT,
    SITE_NAME,
)
from prompt_analyzer.models import AnalyzeRequest, AnalyzeResponse
from catalog import data, service
from catalog.exceptions import ModelNotFoundError
from catalog.models import (
    LibraryPrompt,
    ModelComparison,
    ModelInfo,
    PlaygroundRequest,
    PlaygroundRun,
    PricingTier,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Shared instances
analyzer = PromptAnalyzer()
templates = Jinja2Templates(directory=os.path.join(FRONTEND_DIR, "templates"))
templates.env.globals["rating_dots"] = service.rating_dots

app = FastAPI(
    title=SITE_NAME,
    version=APP_VERSION,
)

# CORS: allow the page to call from any origin in dev
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Landing page ───────────────────────────────────────────────


@app.get("/", response_class=HTMLResponse)
async def landing_page(
    request: Request,
    a: Optional[str] = Query(default=None, description="Comparator model A"),
    b: Optional[str] = Query(default=None, description="Comparator model B"),
    q: str = Query(default="", description="Prompt library search"),
    draft: str = Query(default="", description="Prompt to pre-fill in the analyzer"),
):
    """Render the full landing page."""
    try:
        comparison = service.compare_models(a, b)
    except ModelNotFoundError as e:
        logger.warning("Unknown comparator selection: %s", e.model_id)
        comparison = service.compare_models()

    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "site_name": SITE_NAME,
            "nav_links": data.NAV_LINKS,
            "hero_links": data.HERO_LINKS,
            "footer_links": data.FOOTER_LINKS,
            "models": service.list_models(),
            "comparison": comparison,
            "default_prompt": data.DEFAULT_PLAYGROUND_PROMPT,
            "query": q,
            "prompts": service.search_prompts(q),
            "draft": draft,
            "analysis": analyzer.describe(draft),
            "pricing": service.list_pricing(),
            "year": date.today().year,
        },
    )


# ── Analysis Endpoints ─────────────────────────────────────────


@app.post("/analyze", response_model=AnalyzeResponse)
async def analyze_prompt(request: AnalyzeRequest):
    """
    Score a prompt and return improvement tips.
    Called by the page on every edit of the "Your Prompt" box.
    """
    return analyzer.describe(request.prompt)


# ── Catalog Endpoints ──────────────────────────────────────────


@app.get("/models", response_model=list[ModelInfo])
async def models():
    """List the highlighted models."""
    return service.list_models()


@app.get("/models/{model_id}", response_model=ModelInfo)
async def model_detail(model_id: str):
    """Get a single model card."""
    try:
        return service.get_model(model_id)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/compare", response_model=ModelComparison)
async def compare(
    a: Optional[str] = Query(default=None),
    b: Optional[str] = Query(default=None),
):
    """Compare two models. Defaults to the page's initial selection."""
    try:
        return service.compare_models(a, b)
    except ModelNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@app.get("/prompts", response_model=list[LibraryPrompt])
async def prompts(q: str = Query(default="")):
    """Search the prompt library by title or tag."""
    return service.search_prompts(q)


@app.post("/playground/run", response_model=PlaygroundRun)
async def playground_run(request: PlaygroundRequest):
    """Run the demo playground. Always returns the canned response."""
    return service.run_playground(request.prompt)


@app.get("/pricing", response_model=list[PricingTier])
async def pricing():
    return service.list_pricing()


# ── Static files & Health ──────────────────────────────────────


@app.get("/health")
async def health():
    return {"status": "healthy", "version": APP_VERSION}


static_dir = os.path.join(FRONTEND_DIR, "static")

if os.path.isdir(static_dir):
    app.mount("/static", StaticFiles(directory=static_dir), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
