"""Shared fixtures: a scripted book API behind httpx.MockTransport."""
import json

import httpx
import pytest
import pytest_asyncio

from bookhub.async_client import AsyncBooksClient
from bookhub.session import CatalogSession

BASE_URL = "http://books.test"


def book_item(book_id, title="Book", author="Author", genre="fiction", **extra):
    item = {"id": book_id, "title": title, "author": author, "genre": genre}
    item.update(extra)
    return item


class FakeBooksApi:
    """Answers list and create requests from queued responses."""

    def __init__(self):
        self.requests = []
        self.items = []
        self.list_responses = []
        self.create_responses = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "GET":
            if self.list_responses:
                return self._next(self.list_responses, request)
            return httpx.Response(200, json={"items": self.items})
        if request.method == "POST":
            if self.create_responses:
                return self._next(self.create_responses, request)
            return httpx.Response(201, json={"id": "new"})
        return httpx.Response(405)

    @staticmethod
    def _next(queue, request):
        response = queue.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def gets(self):
        return [r for r in self.requests if r.method == "GET"]

    @property
    def posts(self):
        return [r for r in self.requests if r.method == "POST"]

    def last_post_json(self):
        return json.loads(self.posts[-1].content)


@pytest.fixture
def api():
    return FakeBooksApi()


@pytest_asyncio.fixture
async def client(api):
    async with AsyncBooksClient(BASE_URL, transport=httpx.MockTransport(api.handler)) as c:
        yield c


@pytest_asyncio.fixture
async def session(client):
    yield CatalogSession(client)
