"""Unit tests for the series member repository."""

from __future__ import annotations

import pytest

from bookcase.core.database import build_repos
from bookcase.core.database.entities import Member
from bookcase.core.database.repositories import MemberRepository
from bookcase.core.exceptions import BadRequest, NotFound


class TestMemberRepository:
    async def test_list_in_series_then_ordinal_order(self, seeded_session):
        repos = build_repos(seeded_session)
        bedrock = (await repos.series.list(filters={"title": "Bedrock"}))[0]

        members = await repos.members.list(filters={"series_id": bedrock.id})
        titles = [(await repos.books.get_by_id(m.book_id)).title for m in members]

        assert [m.ordinal for m in members] == [1, 2, 3]
        assert titles == ["Bedrock Nights by Fred", "A Stone Age Tale by Fred", "Brontosaurus Burgers by Fred"]

    async def test_list_all_grouped_by_series(self, seeded_session):
        members = await MemberRepository(seeded_session).list()

        keys = [(m.series_id, m.ordinal) for m in members]
        assert keys == sorted(keys)
        assert len(members) == 5

    async def test_list_by_book(self, seeded_session):
        repos = build_repos(seeded_session)
        rock_solid = (await repos.books.list(filters={"title": "Rock Solid"}))[0]

        members = await repos.members.list(filters={"book_id": rock_solid.id})

        assert len(members) == 1
        assert members[0].ordinal == 2

    async def test_create_requires_existing_series_and_book(self, seeded_session):
        repos = build_repos(seeded_session)
        series = (await repos.series.list())[0]
        book = (await repos.books.list())[0]

        with pytest.raises(BadRequest):
            await repos.members.create(Member(series_id=999, book_id=book.id, ordinal=9))
        with pytest.raises(BadRequest):
            await repos.members.create(Member(series_id=series.id, book_id=999, ordinal=9))
        with pytest.raises(BadRequest):
            await repos.members.create(Member(series_id=series.id, book_id=book.id))

        member = await repos.members.create(Member(series_id=series.id, book_id=book.id, ordinal=9))
        assert member.version == 0

    async def test_update_ordinal(self, seeded_session, tick):
        repository = MemberRepository(seeded_session)
        member = (await repository.list())[0]
        published, updated = member.published, member.updated
        tick()

        result = await repository.update(member.id, {"ordinal": 10}, version=member.version)

        assert result.ordinal == 10
        assert result.version == 1
        assert result.published == published
        assert result.updated > updated

    async def test_update_and_delete_missing(self, in_memory_session):
        repository = MemberRepository(in_memory_session)

        with pytest.raises(NotFound):
            await repository.update(1, {"ordinal": 1})
        assert await repository.delete(1) is False

    @pytest.mark.parametrize("field", ["series_id", "book_id"])
    @pytest.mark.parametrize("value", [None, 999, 2**63 - 1, 2**63])
    async def test_create_and_update_with_bad_parent(self, seeded_session, field, value):
        repos = build_repos(seeded_session)
        member = (await repos.members.list())[0]
        data = {"series_id": member.series_id, "book_id": member.book_id, "ordinal": 9, field: value}

        with pytest.raises(BadRequest):
            await repos.members.create(Member(**data))
        with pytest.raises(BadRequest):
            await repos.members.update(member.id, {field: value})
