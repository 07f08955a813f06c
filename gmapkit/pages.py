# gmapkit/pages.py
# Writes map pages to disk, and the fallback page served when building one fails.

import html
import logging
import os
from datetime import datetime, timezone

import folium

logger = logging.getLogger(__name__)

ERROR_PAGE = """<!doctype html><meta charset="utf-8">
<title>__TITLE__</title>
<meta http-equiv="Cache-Control" content="no-cache, no-store, must-revalidate"/>
<meta http-equiv="Pragma" content="no-cache"/>
<meta http-equiv="Expires" content="0"/>
<style>body{font:16px/1.45 -apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,Arial,sans-serif;padding:24px;color:#233;max-width:900px;margin:auto;background:#f6f8fb}
.card{background:#fff;border-radius:12px;box-shadow:0 4px 20px rgba(0,0,0,.08);padding:20px}
h1{margin:0 0 10px 0}</style>
<div class="card">
  <h1>__TITLE__</h1>
  <p><strong>Status:</strong> temporarily unavailable.</p>
  <p><strong>Reason:</strong> __MSG__</p>
  <p>Last attempt: __UPDATED__.</p>
</div>"""


def _ensure_dir(path) -> None:
    os.makedirs(os.path.dirname(os.fspath(path)) or ".", exist_ok=True)


def write_page(page, path, title: str | None = None):
    """Save a GoogleMap, or a folium.Figure already holding one or more maps."""
    _ensure_dir(path)
    if isinstance(page, folium.Figure):
        page.save(path)
    else:
        page.save(path, title=title)
    return path


def write_error_page(path, title: str, msg: str):
    _ensure_dir(path)
    updated = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    page = (ERROR_PAGE
            .replace("__TITLE__", html.escape(title))
            .replace("__MSG__", html.escape(msg))
            .replace("__UPDATED__", updated))
    with open(path, "w", encoding="utf-8") as f:
        f.write(page)
    logger.info("Wrote fallback page %s", path)
    return path
