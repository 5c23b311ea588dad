import pytest

from beeboo import knowledge
from beeboo.errors import HttpError


def test_search_enumerates_results_in_order(api, fake_request):
    results = [
        {"id": "k1", "title": "Deploy checklist", "content": "Run migrations first."},
        {"id": "k2", "key": "rollback-plan", "content": "Revert the tag."},
        {"content": "No title or key here."},
    ]
    fake_request.respond({"data": results})

    result = knowledge.search_knowledge(api, "deploy")

    assert result.text.startswith('Found 3 result(s) for "deploy":')
    lines = result.text.split("\n\n")[1:]
    assert lines == [
        "1. **Deploy checklist** (k1)\n   Run migrations first.",
        "2. **rollback-plan** (k2)\n   Revert the tag.",
        "3. **(untitled)**\n   No title or key here.",
    ]
    assert result.data == results
    assert fake_request.last_call.body == {"query": "deploy", "limit": 10}


def test_search_accepts_results_nested_in_object(api, fake_request):
    fake_request.respond({"data": {"results": [{"title": "Only"}], "total": 1}})

    result = knowledge.search_knowledge(api, "only")

    assert result.text.startswith('Found 1 result(s) for "only":')
    assert result.data == [{"title": "Only"}]


def test_search_truncates_long_content(api, fake_request):
    long_content = "a" * 250
    exact_content = "b" * 200
    fake_request.respond([
        {"title": "Long", "content": long_content},
        {"title": "Exact", "content": exact_content},
    ])

    result = knowledge.search_knowledge(api, "x")

    assert "   " + "a" * 200 + "...\n" in result.text
    assert result.text.endswith("   " + exact_content)


def test_search_with_no_results(api, fake_request):
    fake_request.respond({"data": []})

    result = knowledge.search_knowledge(api, "nothing")

    assert result.text == 'No results found for "nothing"'
    assert result.data == []


def test_search_failure_carries_api_message(api, fake_request):
    fake_request.respond({"error": {"message": "index unavailable"}}, status=503)

    with pytest.raises(HttpError) as excinfo:
        knowledge.search_knowledge(api, "deploy")

    assert str(excinfo.value) == "Search failed: index unavailable"


def test_add_derives_key_and_defaults(api, fake_request):
    fake_request.respond({"data": {"id": "entry-42", "title": "Deploy Hotfix!!"}}, status=201)

    result = knowledge.add_knowledge(api, "Deploy Hotfix!!", "Steps to ship a hotfix")

    assert fake_request.last_call.method == "POST"
    assert fake_request.last_call.path == "/api/v1/knowledge/entries"
    assert fake_request.last_call.body == {
        "title": "Deploy Hotfix!!",
        "content": "Steps to ship a hotfix",
        "namespace": "default",
        "content_type": "text",
        "key": "deploy-hotfix",
    }
    assert result.text == '✅ Knowledge entry created: "Deploy Hotfix!!" (ID: entry-42)'
    assert result.data == {"id": "entry-42", "title": "Deploy Hotfix!!"}


def test_add_sends_tags_only_when_given(api, fake_request):
    fake_request.respond({"data": {}})

    knowledge.add_knowledge(api, "T", "C", tags=["ops", "deploy"])
    assert fake_request.last_call.body["tags"] == ["ops", "deploy"]

    knowledge.add_knowledge(api, "T", "C", tags=[])
    assert "tags" not in fake_request.last_call.body


def test_add_without_id_in_response(api, fake_request):
    fake_request.respond({"data": {"title": "T"}})

    result = knowledge.add_knowledge(api, "T", "C")

    assert result.text == '✅ Knowledge entry created: "T"'


def test_add_failure(api, fake_request):
    fake_request.respond({"error": "duplicate key"}, status=409)

    with pytest.raises(HttpError) as excinfo:
        knowledge.add_knowledge(api, "T", "C")

    assert excinfo.value.status == 409
    assert str(excinfo.value) == "Failed to create entry: duplicate key"


def test_list_renders_entries(api, fake_request):
    entries = [
        {"id": "0123456789abcdef", "title": "Runbook", "tags": ["ops", "oncall"]},
        {"key": "style-guide"},
    ]
    fake_request.respond({"data": entries})

    result = knowledge.list_knowledge(api)

    assert result.text == (
        "📚 2 knowledge entries:\n\n"
        "1. Runbook (01234567) [ops, oncall]\n"
        "2. style-guide (—)"
    )
    assert result.data == entries
    assert fake_request.last_call.method == "GET"
    assert fake_request.last_call.path == "/api/v1/knowledge/entries"


def test_list_empty(api, fake_request):
    fake_request.respond({"data": []})

    result = knowledge.list_knowledge(api)

    assert result.text == "No knowledge entries found."
    assert result.data == []


def test_list_non_list_payload_counts_as_empty(api, fake_request):
    fake_request.respond({"data": {"unexpected": True}})

    assert knowledge.list_knowledge(api).data == []
