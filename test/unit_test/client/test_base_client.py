"""Unit tests for the resource clients using ``httpx.MockTransport``.

Each test records the requests the client sends and answers them with
canned responses shaped like the server's.
"""

from __future__ import annotations

import json
from typing import Callable, List

import httpx
import pytest

from bookcase.client import (
    Author,
    AuthorClient,
    BadRequest,
    Book,
    BookClient,
    BookcaseError,
    MemberClient,
    NotFound,
    NotUnique,
    StoryClient,
    VersionConflict,
)
from bookcase.core.models import Location

BASE_URL = "http://mock/api/v1"

AUTHOR_JSON = {
    "id": 1,
    "version": 0,
    "published": "2024-01-02T03:04:05.123456",
    "updated": "2024-01-02T03:04:05.123456",
    "first_name": "Fred",
    "last_name": "Flintstone",
    "notes": None,
}


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(requests_seen):
    def _make(cls, handler: Callable[[httpx.Request], httpx.Response]):
        def _record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        return cls(BASE_URL, client=httpx.Client(transport=httpx.MockTransport(_record)))

    return _make


class TestReads:
    def test_find(self, make_client, requests_seen):
        client = make_client(AuthorClient, lambda r: httpx.Response(200, json=AUTHOR_JSON))

        author = client.find(1)

        assert requests_seen[0].method == "GET"
        assert str(requests_seen[0].url) == f"{BASE_URL}/authors/1"
        assert author == Author.model_validate(AUTHOR_JSON)
        assert author.version == 0

    def test_find_all_drops_none_filters(self, make_client, requests_seen):
        client = make_client(BookClient, lambda r: httpx.Response(200, json=[]))

        assert client.find_all(title="dino", author_id=None, limit=5) == []

        assert dict(requests_seen[0].url.params) == {"title": "dino", "limit": "5"}

    def test_finders_send_filters(self, make_client, requests_seen):
        books = make_client(BookClient, lambda r: httpx.Response(200, json=[]))
        members = make_client(MemberClient, lambda r: httpx.Response(200, json=[]))
        stories = make_client(StoryClient, lambda r: httpx.Response(200, json=[]))
        authors = make_client(AuthorClient, lambda r: httpx.Response(200, json=[AUTHOR_JSON]))

        books.find_by_title("Rock")
        books.find_by_author_id(3)
        members.find_by_series_id(4)
        stories.find_by_anthology_id(5)
        stories.find_by_book_id(6)
        found = authors.find_by_name("Fred")

        params = [dict(r.url.params) for r in requests_seen]
        assert params == [
            {"title": "Rock"},
            {"author_id": "3"},
            {"series_id": "4"},
            {"anthology_id": "5"},
            {"book_id": "6"},
            {"name": "Fred"},
        ]
        assert [a.first_name for a in found] == ["Fred"]

    def test_response_extra_fields_ignored(self, make_client):
        client = make_client(AuthorClient, lambda r: httpx.Response(200, json={**AUTHOR_JSON, "extra": 1}))

        assert client.find(1) == Author.model_validate(AUTHOR_JSON)


class TestWrites:
    def test_insert_omits_server_managed_and_empty_fields(self, make_client, requests_seen):
        client = make_client(AuthorClient, lambda r: httpx.Response(201, json=AUTHOR_JSON))

        client.insert(Author(id=7, version=3, first_name="Fred", last_name="Flintstone"))

        assert requests_seen[0].method == "POST"
        assert str(requests_seen[0].url) == f"{BASE_URL}/authors"
        assert json.loads(requests_seen[0].content) == {"first_name": "Fred", "last_name": "Flintstone"}

    def test_insert_serializes_enums(self, make_client, requests_seen):
        client = make_client(BookClient, lambda r: httpx.Response(201, json={}))

        client.insert(Book(author_id=1, title="T", location=Location.KINDLE, read=True))

        assert json.loads(requests_seen[0].content) == {
            "author_id": 1,
            "title": "T",
            "location": "KINDLE",
            "read": True,
        }

    def test_update_sends_id_and_version(self, make_client, requests_seen):
        client = make_client(AuthorClient, lambda r: httpx.Response(200, json={**AUTHOR_JSON, "version": 1}))
        author = Author.model_validate(AUTHOR_JSON)

        result = client.update(author)

        assert requests_seen[0].method == "PUT"
        assert str(requests_seen[0].url) == f"{BASE_URL}/authors/1"
        body = json.loads(requests_seen[0].content)
        assert body["id"] == 1
        assert body["version"] == 0
        assert "published" not in body and "updated" not in body
        assert result.version == 1

    def test_update_without_id_raises_locally(self, make_client, requests_seen):
        client = make_client(AuthorClient, lambda r: httpx.Response(200, json=AUTHOR_JSON))

        with pytest.raises(NotFound):
            client.update(Author(first_name="No", last_name="Id"))

        assert requests_seen == []

    def test_client_logs_through_the_package_logger(self, make_client):
        client = make_client(AuthorClient, lambda r: httpx.Response(200, json=AUTHOR_JSON))

        assert client._logger.name == "bookcase.client.base"

    def test_delete(self, make_client, requests_seen):
        client = make_client(AuthorClient, lambda r: httpx.Response(204))

        assert client.delete(1) is None

        assert requests_seen[0].method == "DELETE"
        assert str(requests_seen[0].url) == f"{BASE_URL}/authors/1"


class TestErrorTranslation:
    @pytest.mark.parametrize(
        "status_code,error_type,expected",
        [
            (400, "BadRequest", BadRequest),
            (404, "NotFound", NotFound),
            (409, "NotUnique", NotUnique),
            (409, "VersionConflict", VersionConflict),
        ],
    )
    def test_typed_errors(self, make_client, status_code, error_type, expected):
        body = {"detail": "went wrong", "error_type": error_type}
        client = make_client(AuthorClient, lambda r: httpx.Response(status_code, json=body))

        with pytest.raises(expected) as exc_info:
            client.find(1)

        assert exc_info.value.status_code == status_code
        assert exc_info.value.message == "went wrong"

    def test_validation_details_kept(self, make_client):
        detail = [{"loc": ["body", "first_name"], "msg": "Field required", "type": "missing"}]
        client = make_client(
            AuthorClient, lambda r: httpx.Response(400, json={"detail": detail, "error_type": "BadRequest"})
        )

        with pytest.raises(BadRequest) as exc_info:
            client.insert(Author())

        assert exc_info.value.details == detail

    @pytest.mark.parametrize("status_code,expected", [(400, BadRequest), (404, NotFound), (409, NotUnique)])
    def test_untyped_errors_use_status(self, make_client, status_code, expected):
        client = make_client(AuthorClient, lambda r: httpx.Response(status_code, text="plain text"))

        with pytest.raises(expected):
            client.find(1)

    def test_other_status_is_base_error(self, make_client):
        client = make_client(
            AuthorClient,
            lambda r: httpx.Response(500, json={"detail": "Internal server error", "error_type": "RuntimeError"}),
        )

        with pytest.raises(BookcaseError) as exc_info:
            client.find(1)

        assert type(exc_info.value) is BookcaseError
        assert exc_info.value.status_code == 500
