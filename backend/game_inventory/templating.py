"""
Game Inventory — Template Rendering
====================================

What:  The shared Jinja2Templates instance and a small render helper.
How:   Templates live in `game_inventory/templates/` and extend layout.html.

Escaping:
    Autoescaping stays on. Text that came through the validation layer is
    already escaped when stored, so templates print those fields through
    the `stored` filter, which marks them safe instead of escaping twice.
"""

from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.templating import Jinja2Templates
from markupsafe import Markup
from starlette.responses import Response

from game_inventory.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.filters["stored"] = lambda value: Markup("" if value is None else value)
templates.env.globals["app_title"] = settings.app_title


def render(
    request: Request,
    template: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """Render `template` with `context` into an HTML response."""
    return templates.TemplateResponse(
        request, template, context or {}, status_code=status_code
    )
