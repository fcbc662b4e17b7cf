"""Error message extraction for inventory service responses.

Turns a failed HTTP response into the human-readable message shown to the
buyer. Handles the shapes the service (and FastAPI-style backends) produce:

- ``{"detail": "msg"}``
- Pydantic validation (422): ``{"detail": [{"loc": [...], "msg": "..."}]}``
- Domain errors: ``{"error": "msg"}`` or ``{"error": {"field": "msg"}}``
- ``{"message": "msg"}``
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from httpx import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from a service error response.

    Returns an empty string when the body carries nothing usable, so callers
    can substitute their own fallback text.
    """
    try:
        body = response.json()
    except ValueError:
        text = getattr(response, "text", "") or ""
        return text.strip()[:300]

    if not isinstance(body, dict):
        return str(body)[:300]

    detail = body.get("detail")
    if isinstance(detail, str):
        return detail
    if isinstance(detail, list):
        parts = []
        for err in detail:
            if not isinstance(err, dict):
                parts.append(str(err))
                continue
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if "error" in body:
        error = body["error"]
        if isinstance(error, dict):
            return " | ".join(f"{k}: {v}" for k, v in error.items())
        return str(error)

    if isinstance(body.get("message"), str):
        return body["message"]

    return ""
