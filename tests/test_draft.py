"""Tests for DraftFormController."""
import httpx
import pytest

from bookhub.draft import DraftFormController, CREATE_FALLBACK_MESSAGE
from bookhub.models import DraftForm, Phase


def fill(form: DraftFormController, **values):
    for name, value in values.items():
        form.set_field(name, value)


@pytest.mark.asyncio
async def test_set_field_updates_only_that_field(client):
    form = DraftFormController(client)

    form.set_field("title", "Dune")

    assert form.draft == DraftForm(title="Dune")


@pytest.mark.asyncio
async def test_set_field_rejects_unknown_name(client):
    form = DraftFormController(client)
    with pytest.raises(ValueError):
        form.set_field("id", "1")


@pytest.mark.asyncio
async def test_submit_posts_transformed_payload(api, client):
    form = DraftFormController(client)
    fill(form, title="Dune", author="Frank Herbert", genre="sci-fi", tags="  sci-fi ,  , classic")

    assert await form.submit() is True

    request = api.posts[-1]
    assert request.url.path == "/api/books"
    assert request.headers["content-type"] == "application/json"
    assert api.last_post_json() == {
        "title": "Dune",
        "author": "Frank Herbert",
        "genre": "sci-fi",
        "description": "",
        "cover_url": "",
        "content": "",
        "audio_summary_url": "",
        "tags": ["sci-fi", "classic"],
    }


@pytest.mark.asyncio
async def test_submit_blank_tags_sends_null(api, client):
    form = DraftFormController(client)
    fill(form, title="T", author="A", genre="g", tags="   ")

    await form.submit()

    assert api.last_post_json()["tags"] is None


@pytest.mark.asyncio
async def test_submit_success_resets_draft_and_calls_back(api, client):
    calls = []

    async def on_created():
        calls.append("reload")

    form = DraftFormController(client, on_created=on_created)
    fill(form, title="T", author="A", genre="g", description="d")

    await form.submit()

    assert form.draft.is_empty()
    assert form.status.phase is Phase.SUCCEEDED
    assert calls == ["reload"]


@pytest.mark.asyncio
async def test_submit_error_shows_body_and_keeps_draft(api, client):
    calls = []

    async def on_created():
        calls.append("reload")

    api.create_responses.append(httpx.Response(422, text="title too long"))
    form = DraftFormController(client, on_created=on_created)
    fill(form, title="T" * 300, author="A", genre="g", tags="x, y")

    assert await form.submit() is False

    assert form.banner.message == "title too long"
    assert form.status.message == "title too long"
    assert form.draft == DraftForm(title="T" * 300, author="A", genre="g", tags="x, y")
    assert calls == []


@pytest.mark.asyncio
async def test_submit_error_with_empty_body_uses_fallback(api, client):
    api.create_responses.append(httpx.Response(500))
    form = DraftFormController(client)
    fill(form, title="T", author="A", genre="g")

    await form.submit()

    assert form.banner.message == CREATE_FALLBACK_MESSAGE


@pytest.mark.asyncio
async def test_submit_network_failure_uses_fallback(api, client):
    api.create_responses.append(httpx.ConnectError("refused"))
    form = DraftFormController(client)
    fill(form, title="T", author="A", genre="g")

    await form.submit()

    assert form.banner.message == CREATE_FALLBACK_MESSAGE
    assert form.draft.title == "T"


@pytest.mark.asyncio
async def test_submit_with_missing_required_fields_does_not_crash(api, client):
    api.create_responses.append(httpx.Response(422, text="title is required"))
    form = DraftFormController(client)

    assert await form.submit() is False

    assert api.last_post_json()["title"] == ""
    assert form.banner.message == "title is required"


@pytest.mark.asyncio
async def test_submit_clears_previous_error(api, client):
    form = DraftFormController(client)
    form.banner.show("Failed to load books")
    fill(form, title="T", author="A", genre="g")

    await form.submit()

    assert form.banner.message is None
