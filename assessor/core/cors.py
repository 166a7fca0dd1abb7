from __future__ import annotations

from typing import Any

from assessor.core.config import Settings

# Response headers browsers may read on cross-origin calls.
EXPOSED_HEADERS = ["X-Processing-Time", "X-Enhanced-Analysis", "X-Error", "X-Error-Code"]


def cors_options(settings: Settings) -> dict[str, Any]:
    """Keyword arguments for CORSMiddleware built from settings."""
    regex = (settings.cors_allow_origin_regex or "").strip() or None
    return {
        "allow_origins": list(settings.cors_allowed_origins),
        "allow_origin_regex": regex,
        "allow_credentials": settings.cors_allow_credentials,
        "allow_methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization", "X-API-Key"],
        "expose_headers": EXPOSED_HEADERS,
    }
