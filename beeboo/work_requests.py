# =============================================================================
# beeboo/work_requests.py  —  Work Request Tool Handlers
# =============================================================================
#
# Work requests queue tasks for the team.  Priority is one of
# low / medium / high / critical and defaults to medium.
# =============================================================================

from typing import Optional

from beeboo.api import BeeBooApi
from beeboo.envelope import ensure_success, extract_payload
from beeboo.formatting import (
    as_items,
    as_record,
    filter_suffix,
    priority_badge,
    request_status_icon,
    short_id,
)
from beeboo.models import ToolResult

DEFAULT_PRIORITY = "medium"


def create_request(
    api: BeeBooApi,
    title: str,
    description: Optional[str] = None,
    priority: Optional[str] = None,
) -> ToolResult:
    work_request = {
        "title": title,
        "description": description or "",
        "priority": priority or DEFAULT_PRIORITY,
    }

    response = api.create_request(work_request)
    ensure_success(response, "Failed to create request")

    created = extract_payload(response)
    request_id = as_record(created).get("id") or "unknown"
    text = (
        f'📋 Work request created: "{title}"\n'
        f"ID: {request_id}\n"
        f"Priority: {work_request['priority']}"
    )
    return ToolResult(text=text, data=created)


def list_requests(api: BeeBooApi, status: Optional[str] = None) -> ToolResult:
    query = {"status": status} if status else {}
    response = api.list_requests(query)
    ensure_success(response, "Failed to list requests")

    items = as_items(extract_payload(response))
    if not items:
        return ToolResult(text=f"No work requests found{filter_suffix(status)}.", data=[])

    lines = []
    for index, raw in enumerate(items, start=1):
        item = as_record(raw)
        lines.append(
            f"{index}. {request_status_icon(item.get('status'))} "
            f"{priority_badge(item.get('priority'))} "
            f"{item.get('title') or '(untitled)'} ({short_id(item.get('id'))})"
        )

    text = f"📋 {len(items)} work request(s):\n\n" + "\n".join(lines)
    return ToolResult(text=text, data=items)
