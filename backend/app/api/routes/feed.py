"""Feed Pages — the static single-page frontend and a server-rendered tweet list.

Invariants:
    - GET / serves static/index.html; its script and assets live under /static
    - Unauthorized API response → redirect to settings.login_path
    - Failures still render the page, just with an empty container
"""

from pathlib import Path

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, HTMLResponse, RedirectResponse

from app.config import get_settings
from app.api.dependencies import get_feed_client
from app.services.tweet_feed import load_feed, render_page

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter(tags=["feed"])


@router.get("/", include_in_schema=False)
async def index_page():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@router.get("/feed", response_class=HTMLResponse)
async def feed_page(client: httpx.AsyncClient = Depends(get_feed_client)):
    result = await load_feed(client, get_settings().login_path)
    if result.redirect_to:
        return RedirectResponse(result.redirect_to)
    return HTMLResponse(render_page(result.html))
