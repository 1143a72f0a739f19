"""Author client against the running application."""

from __future__ import annotations

import pytest

from bookcase.client import Author, BadRequest, NotFound, NotUnique, VersionConflict


class TestAuthorClient:
    def test_find_all_in_name_order(self, bookcase):
        authors = bookcase.authors.find_all()

        assert [(a.last_name, a.first_name) for a in authors] == [
            ("Flintstone", "Fred"),
            ("Flintstone", "Pebbles"),
            ("Flintstone", "Wilma"),
            ("Rubble", "Bam Bam"),
            ("Rubble", "Barney"),
            ("Rubble", "Betty"),
        ]

    def test_find_returns_equal_entity(self, bookcase):
        for author in bookcase.authors.find_all():
            assert bookcase.authors.find(author.id) == author

    def test_find_by_name(self, bookcase):
        assert [a.first_name for a in bookcase.authors.find_by_name("rubble")] == ["Bam Bam", "Barney", "Betty"]
        assert bookcase.authors.find_by_name("nobody") == []

    def test_find_unknown(self, bookcase):
        with pytest.raises(NotFound):
            bookcase.authors.find(9999)

    def test_insert_then_find(self, bookcase):
        inserted = bookcase.authors.insert(Author(first_name="Dino", last_name="Saur", notes="Pet"))

        assert inserted.id is not None
        assert inserted.version == 0
        assert bookcase.authors.find(inserted.id) == inserted

    def test_insert_empty_is_bad_request(self, bookcase):
        with pytest.raises(BadRequest):
            bookcase.authors.insert(Author())

    def test_insert_missing_last_name_is_bad_request(self, bookcase):
        with pytest.raises(BadRequest):
            bookcase.authors.insert(Author(first_name="Dino"))

    def test_insert_duplicate_is_not_unique(self, bookcase):
        with pytest.raises(NotUnique):
            bookcase.authors.insert(Author(first_name="Fred", last_name="Flintstone"))

    def test_update(self, bookcase, tick):
        original = bookcase.authors.find_by_name("Pebbles")[0]
        tick()

        updated = bookcase.authors.update(original.model_copy(update={"notes": "Updated notes"}))

        assert updated.id == original.id
        assert updated.published == original.published
        assert updated.version > original.version
        assert updated.updated > original.updated
        assert updated.notes == "Updated notes"
        assert bookcase.authors.find(original.id) == updated

    def test_update_stale_version(self, bookcase):
        original = bookcase.authors.find_by_name("Pebbles")[0]
        bookcase.authors.update(original.model_copy(update={"notes": "first"}))

        with pytest.raises(VersionConflict):
            bookcase.authors.update(original.model_copy(update={"notes": "second"}))

    def test_update_duplicate_is_not_unique(self, bookcase):
        fred = bookcase.authors.find_by_name("Fred")[0]

        with pytest.raises(NotUnique):
            bookcase.authors.update(fred.model_copy(update={"first_name": "Wilma"}))

    def test_update_without_id(self, bookcase):
        with pytest.raises(NotFound):
            bookcase.authors.update(Author(first_name="No", last_name="Id"))

    def test_update_unknown_id(self, bookcase):
        with pytest.raises(NotFound):
            bookcase.authors.update(Author(id=9999, first_name="No", last_name="One"))

    def test_delete_cascades(self, bookcase):
        barney = bookcase.authors.find_by_name("Barney")[0]

        bookcase.authors.delete(barney.id)

        with pytest.raises(NotFound):
            bookcase.authors.find(barney.id)
        assert bookcase.books.find_by_author_id(barney.id) == []
        assert bookcase.series.find_by_author_id(barney.id) == []
        assert bookcase.anthologies.find_by_author_id(barney.id) == []

    def test_delete_unknown(self, bookcase):
        with pytest.raises(NotFound):
            bookcase.authors.delete(9999)

    @pytest.mark.parametrize("author_id", [2**63 - 1, 2**63])
    def test_ids_beyond_storage_range(self, bookcase, author_id):
        with pytest.raises(NotFound):
            bookcase.authors.find(author_id)
        with pytest.raises(NotFound):
            bookcase.authors.delete(author_id)
