# =============================================================================
# beeboo/knowledge.py  —  Knowledge Base Tool Handlers
# =============================================================================
#
#   search_knowledge   semantic search, top 10, content previews
#   add_knowledge      create an entry with a slug key derived from the title
#   list_knowledge     every entry, one line each
#
# Each handler makes one API call and returns a ToolResult: text for the
# agent to read, plus the raw items as data.
# =============================================================================

from typing import Optional

from beeboo.api import BeeBooApi
from beeboo.envelope import ensure_success, extract_payload
from beeboo.formatting import as_items, as_record, short_id, slugify, truncate
from beeboo.models import ToolResult

SEARCH_LIMIT = 10
DEFAULT_NAMESPACE = "default"
DEFAULT_CONTENT_TYPE = "text"


def _title_of(item: dict) -> str:
    return item.get("title") or item.get("key") or "(untitled)"


def search_knowledge(api: BeeBooApi, query: str) -> ToolResult:
    """Search the knowledge base and summarize the hits in their original order."""
    response = api.search_knowledge(query, limit=SEARCH_LIMIT)
    ensure_success(response, "Search failed")

    payload = extract_payload(response)
    if isinstance(payload, list):
        results = payload
    else:
        results = as_items(as_record(payload).get("results"))

    if not results:
        return ToolResult(text=f'No results found for "{query}"', data=[])

    lines = []
    for index, raw in enumerate(results, start=1):
        item = as_record(raw)
        item_id = f" ({item['id']})" if item.get("id") else ""
        content = truncate(str(item["content"])) if item.get("content") else ""
        lines.append(f"{index}. **{_title_of(item)}**{item_id}\n   {content}")

    text = f'Found {len(results)} result(s) for "{query}":\n\n' + "\n\n".join(lines)
    return ToolResult(text=text, data=results)


def add_knowledge(
    api: BeeBooApi,
    title: str,
    content: str,
    tags: Optional[list[str]] = None,
) -> ToolResult:
    """Create a knowledge entry keyed by the slug of its title."""
    entry = {
        "title": title,
        "content": content,
        "namespace": DEFAULT_NAMESPACE,
        "content_type": DEFAULT_CONTENT_TYPE,
        "key": slugify(title),
    }
    if tags:
        entry["tags"] = list(tags)

    response = api.create_knowledge_entry(entry)
    ensure_success(response, "Failed to create entry")

    created = extract_payload(response)
    entry_id = as_record(created).get("id")
    suffix = f" (ID: {entry_id})" if entry_id else ""
    return ToolResult(text=f'✅ Knowledge entry created: "{title}"{suffix}', data=created)


def list_knowledge(api: BeeBooApi) -> ToolResult:
    response = api.list_knowledge_entries({})
    ensure_success(response, "Failed to list entries")

    items = as_items(extract_payload(response))
    if not items:
        return ToolResult(text="No knowledge entries found.", data=[])

    lines = []
    for index, raw in enumerate(items, start=1):
        entry = as_record(raw)
        tags = entry.get("tags")
        tag_text = f" [{', '.join(str(tag) for tag in tags)}]" if isinstance(tags, list) and tags else ""
        lines.append(f"{index}. {_title_of(entry)} ({short_id(entry.get('id'))}){tag_text}")

    text = f"📚 {len(items)} knowledge entries:\n\n" + "\n".join(lines)
    return ToolResult(text=text, data=items)
