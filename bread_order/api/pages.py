"""Static front-end with a login gate on HTML pages."""

from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, PlainTextResponse, RedirectResponse, Response

from bread_order.api.auth import get_optional_user
from bread_order.api.deps import get_app_settings
from bread_order.core.config import Settings
from bread_order.core.errors import NotFoundError
from bread_order.schemas.auth import CurrentUser

router = APIRouter()

INDEX_PAGE = "/index.html"
LOGIN_PAGE = "/login.html"
# Only admins may open this page; other users are sent home.
ADMIN_PAGE = "/users.html"


def page_redirect(req_path: str, user: CurrentUser | None) -> str | None:
    """
    Where an HTML navigation must be redirected, or None to serve it.

    Only .html pages are gated; other assets are public.
    """
    if not req_path.lower().endswith(".html"):
        return None
    if req_path == LOGIN_PAGE:
        return "/" if user else None
    if user is None:
        return LOGIN_PAGE
    if req_path == ADMIN_PAGE and user.role != "admin":
        return "/"
    return None


def resolve_static_file(static_dir: Path, req_path: str) -> Path | None:
    """Map a URL path into `static_dir`, falling back to index.html for unknown paths."""
    root = static_dir.resolve()
    try:
        candidate = (root / req_path.lstrip("/")).resolve()
        if candidate.is_relative_to(root) and candidate.is_file():
            return candidate
    except (ValueError, OSError):
        # embedded NUL, name too long
        pass
    index = root / INDEX_PAGE.lstrip("/")
    return index if index.is_file() else None


@router.get("/", include_in_schema=False)
@router.get("/{path:path}", include_in_schema=False)
def serve_page(
    settings: Annotated[Settings, Depends(get_app_settings)],
    user: Annotated[CurrentUser | None, Depends(get_optional_user)],
    path: str = "",
) -> Response:
    req_path = f"/{path}" if path else INDEX_PAGE
    if req_path.startswith(settings.API_PREFIX.rstrip("/") + "/"):
        raise NotFoundError("Not Found")

    target = page_redirect(req_path, user)
    if target is not None:
        return RedirectResponse(target, status_code=302)

    file_path = resolve_static_file(settings.STATIC_DIR, req_path)
    if file_path is None:
        return PlainTextResponse("Not Found", status_code=404)
    return FileResponse(file_path)
