"""Helpers that keep credentials and raw identifiers out of log lines."""

from __future__ import annotations

import hashlib
import re
from typing import Any

_DIGEST_LENGTH = 12
_HEX_ID_SEGMENT = re.compile(r"/[0-9a-fA-F]{24,32}(?=/|$)")


def safe_log_identifier(value: Any, *, prefix: str) -> str:
    """Return ``<prefix>-<sha256[:12]>`` so log lines correlate without exposing the value."""
    text = str(value or "").strip()
    if not text:
        return f"{prefix}-missing"

    digest = hashlib.sha256(text.encode("utf-8")).hexdigest()[:_DIGEST_LENGTH]
    return f"{prefix}-{digest}"


def safe_request_path(path: str) -> str:
    """Collapse resource id segments, e.g. ``/api/blogs/<hex>/comments`` -> ``/api/blogs/:id/comments``."""
    return _HEX_ID_SEGMENT.sub("/:id", path)
