# =============================================================================
# beeboo/approvals.py  —  Human Approval Tool Handlers
# =============================================================================
#
# An agent asks a human before doing something impactful:
#   request_approval  -> submit, get an id back, status "pending"
#   check_approval    -> poll that id until a human decides
#   list_approvals    -> everything, optionally filtered by status
#
# check_approval raises NotFoundError (not a generic HttpError) on 404 so the
# agent can tell a wrong id apart from an API failure.
# =============================================================================

from typing import Optional

from beeboo.api import BeeBooApi
from beeboo.envelope import ensure_success, extract_payload
from beeboo.errors import NotFoundError
from beeboo.formatting import approval_icon, as_items, as_record, filter_suffix, short_id
from beeboo.models import ToolResult

DEFAULT_CATEGORY = "general"
DEFAULT_URGENCY = "normal"


def request_approval(api: BeeBooApi, title: str, description: str) -> ToolResult:
    """Submit an approval request and tell the agent to wait for a decision."""
    approval = {
        "title": title,
        "description": description,
        "category": DEFAULT_CATEGORY,
        "urgency": DEFAULT_URGENCY,
    }

    response = api.submit_approval(approval)
    ensure_success(response, "Failed to submit approval")

    created = extract_payload(response)
    approval_id = as_record(created).get("id") or "unknown"
    text = (
        f'⏳ Approval requested: "{title}"\n'
        f"ID: {approval_id}\n"
        f"Status: pending\n\n"
        f"Wait for human approval before proceeding."
    )
    return ToolResult(text=text, data=created)


def check_approval(api: BeeBooApi, id: str) -> ToolResult:
    """Report an approval's status, plus decision details once there are any."""
    response = api.get_approval(id)
    if response.status == 404:
        raise NotFoundError(f"Approval not found: {id}")
    ensure_success(response, "Failed to check approval")

    approval = as_record(extract_payload(response))
    status = approval.get("status")

    lines = [
        f"{approval_icon(status)} Approval: {approval.get('title') or id}",
        f"Status: {status or 'pending'}",
    ]
    if approval.get("description"):
        lines.append(f"Description: {approval['description']}")
    if approval.get("decided_at"):
        lines.append(f"Decided: {approval['decided_at']}")
    if approval.get("decision_note"):
        lines.append(f"Note: {approval['decision_note']}")

    return ToolResult(text="\n".join(lines), data=approval)


def list_approvals(api: BeeBooApi, status: Optional[str] = None) -> ToolResult:
    query = {"status": status} if status else {}
    response = api.list_approvals(query)
    ensure_success(response, "Failed to list approvals")

    items = as_items(extract_payload(response))
    if not items:
        return ToolResult(text=f"No approvals found{filter_suffix(status)}.", data=[])

    lines = []
    for index, raw in enumerate(items, start=1):
        approval = as_record(raw)
        item_status = approval.get("status")
        lines.append(
            f"{index}. {approval_icon(item_status)} {approval.get('title') or '(untitled)'} "
            f"({short_id(approval.get('id'))}) - {item_status or 'pending'}"
        )

    text = f"📋 {len(items)} approval(s):\n\n" + "\n".join(lines)
    return ToolResult(text=text, data=items)
