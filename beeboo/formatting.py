# =============================================================================
# beeboo/formatting.py  —  Text Helpers Shared by the Tool Handlers
# =============================================================================

import re
from typing import Any, Optional

CONTENT_PREVIEW_CHARS = 200
ELLIPSIS = "..."
MISSING_ID = "—"

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def slugify(title: str) -> str:
    """Stable key for a title: "Deploy Hotfix!!" -> "deploy-hotfix"."""
    return _NON_ALPHANUMERIC.sub("-", title.lower()).strip("-")


def truncate(text: str, limit: int = CONTENT_PREVIEW_CHARS) -> str:
    """Cap ``text`` at ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def short_id(item_id: Optional[Any]) -> str:
    """First 8 characters of an id, or a dash when there is none."""
    if not item_id:
        return MISSING_ID
    return str(item_id)[:8]


def filter_suffix(status: Optional[str]) -> str:
    return f' with status "{status}"' if status else ""


def as_items(payload: Any) -> list:
    """The payload when it is a list, otherwise an empty list."""
    return payload if isinstance(payload, list) else []


def as_record(item: Any) -> dict:
    """Treat anything that is not a JSON object as an empty record."""
    return item if isinstance(item, dict) else {}


# -----------------------------------------------------------------------------
# Icons
# -----------------------------------------------------------------------------
def approval_icon(status: Optional[str]) -> str:
    if status == "approved":
        return "✅"
    if status in ("denied", "rejected"):
        return "❌"
    return "⏳"


def request_status_icon(status: Optional[str]) -> str:
    if status == "resolved":
        return "✅"
    if status == "in_progress":
        return "🔄"
    return "📋"


def priority_badge(priority: Optional[str]) -> str:
    return {
        "critical": "🔴",
        "high": "🟠",
        "low": "⚪",
    }.get(priority, "🟡")
