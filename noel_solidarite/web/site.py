"""Static marketing site with index.html fallback for client-side routes"""

from pathlib import Path

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import FileResponse

router = APIRouter()


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_site(full_path: str, request: Request):
    """
    Serve a built asset when one exists at the path, else the entry document.

    Must be registered after every other route. Unknown /api paths stay JSON
    404s instead of falling through to the HTML shell.
    """
    if full_path == "api" or full_path.startswith("api/"):
        raise HTTPException(status_code=404, detail="Not found")

    static_dir = Path(request.app.state.static_dir).resolve()

    if full_path:
        candidate = (static_dir / full_path).resolve()
        if candidate.is_relative_to(static_dir) and candidate.is_file():
            return FileResponse(candidate)

    index = static_dir / "index.html"
    if not index.is_file():
        raise HTTPException(status_code=404, detail="Not found")
    return FileResponse(index)
