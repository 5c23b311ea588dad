# =============================================================================
# beeboo_mcp/registry.py  —  The Tool Catalog
# =============================================================================
#
# build_registry() returns a read-only mapping from tool name to ToolSpec.
# It is built once at startup and never changed afterwards.
#
# The descriptions matter: the calling agent reads them to decide WHICH tool
# to use, so they say when to call a tool, not just what it does.
# =============================================================================

from functools import partial
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from beeboo import approvals, knowledge, work_requests
from beeboo.api import BeeBooApi
from beeboo.models import ENUM, STRING, STRING_ARRAY, ParameterSpec, ToolSpec

KNOWLEDGE_SEARCH = "beeboo_knowledge_search"
KNOWLEDGE_ADD = "beeboo_knowledge_add"
KNOWLEDGE_LIST = "beeboo_knowledge_list"
APPROVAL_REQUEST = "beeboo_approval_request"
APPROVAL_CHECK = "beeboo_approval_check"
APPROVALS_LIST = "beeboo_approvals_list"
REQUEST_CREATE = "beeboo_request_create"
REQUESTS_LIST = "beeboo_requests_list"

APPROVAL_STATUSES = ("pending", "approved", "rejected")
REQUEST_STATUSES = ("open", "in_progress", "resolved")
PRIORITIES = ("low", "medium", "high", "critical")


# -----------------------------------------------------------------------------
# Parameter constructors
# -----------------------------------------------------------------------------
def string_param(description: str = "", required: bool = True) -> ParameterSpec:
    return ParameterSpec(kind=STRING, required=required, description=description)


def enum_param(values: Iterable[str], description: str = "", required: bool = True) -> ParameterSpec:
    return ParameterSpec(kind=ENUM, required=required, description=description, values=tuple(values))


def string_array_param(description: str = "", required: bool = True) -> ParameterSpec:
    return ParameterSpec(kind=STRING_ARRAY, required=required, description=description)


def make_registry(specs: Iterable[ToolSpec]) -> Mapping[str, ToolSpec]:
    """Index ``specs`` by name, refusing duplicates."""
    registry: dict[str, ToolSpec] = {}
    for spec in specs:
        if spec.name in registry:
            raise ValueError(f"Tool already registered: {spec.name}")
        registry[spec.name] = spec
    return MappingProxyType(registry)


# -----------------------------------------------------------------------------
# The BeeBoo tools
# -----------------------------------------------------------------------------
def build_registry(api: Optional[BeeBooApi] = None) -> Mapping[str, ToolSpec]:
    """Create the catalog of BeeBoo tools, all sharing one ``api``."""
    api = api or BeeBooApi()

    return make_registry([
        # ── Knowledge base ────────────────────────────────────────────────
        ToolSpec(
            name=KNOWLEDGE_SEARCH,
            description="Search the BeeBoo knowledge base for information using semantic search",
            input_schema={
                "query": string_param("Search query - can be natural language"),
            },
            handler=partial(knowledge.search_knowledge, api),
            structured_key="results",
        ),
        ToolSpec(
            name=KNOWLEDGE_ADD,
            description="Add a new entry to the BeeBoo knowledge base",
            input_schema={
                "title": string_param("Title of the knowledge entry"),
                "content": string_param("Content/body of the entry"),
                "tags": string_array_param("Optional tags for categorization", required=False),
            },
            handler=partial(knowledge.add_knowledge, api),
        ),
        ToolSpec(
            name=KNOWLEDGE_LIST,
            description="List all knowledge base entries",
            input_schema={},
            handler=partial(knowledge.list_knowledge, api),
            structured_key="entries",
        ),

        # ── Approvals ─────────────────────────────────────────────────────
        ToolSpec(
            name=APPROVAL_REQUEST,
            description=(
                "Request human approval for an action. Use this when you need explicit "
                "permission before proceeding with a potentially impactful operation."
            ),
            input_schema={
                "title": string_param("Brief description of what needs approval"),
                "description": string_param(
                    "Detailed explanation of the request and why approval is needed"
                ),
            },
            handler=partial(approvals.request_approval, api),
        ),
        ToolSpec(
            name=APPROVAL_CHECK,
            description="Check the status of an approval request",
            input_schema={
                "id": string_param("The approval request ID to check"),
            },
            handler=partial(approvals.check_approval, api),
        ),
        ToolSpec(
            name=APPROVALS_LIST,
            description="List all approval requests with optional status filter",
            input_schema={
                "status": enum_param(
                    APPROVAL_STATUSES,
                    "Filter by status: pending, approved, or rejected",
                    required=False,
                ),
            },
            handler=partial(approvals.list_approvals, api),
            structured_key="approvals",
        ),

        # ── Work requests ─────────────────────────────────────────────────
        ToolSpec(
            name=REQUEST_CREATE,
            description=(
                "Create a work request for the team. Use this to queue up tasks that "
                "need human attention or execution."
            ),
            input_schema={
                "title": string_param("Brief title of the work request"),
                "description": string_param(
                    "Detailed description of what needs to be done", required=False
                ),
                "priority": enum_param(
                    PRIORITIES,
                    "Priority level: low, medium, high, or critical",
                    required=False,
                ),
            },
            handler=partial(work_requests.create_request, api),
        ),
        ToolSpec(
            name=REQUESTS_LIST,
            description="List all work requests with optional status filter",
            input_schema={
                "status": enum_param(
                    REQUEST_STATUSES,
                    "Filter by status: open, in_progress, or resolved",
                    required=False,
                ),
            },
            handler=partial(work_requests.list_requests, api),
            structured_key="requests",
        ),
    ])
