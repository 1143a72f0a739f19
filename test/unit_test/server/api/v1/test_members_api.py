import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio

MEMBERS = "/api/v1/members"


async def test_members_of_series_in_reading_order(client: AsyncClient, catalog):
    series_id = catalog["series"]["The Bedrock Series by Fred"]

    members = (await client.get(MEMBERS, params={"series_id": series_id})).json()

    assert [m["ordinal"] for m in members] == [1, 2, 3]
    assert [m["book_id"] for m in members] == [
        catalog["books"]["Bedrock Nights by Fred"],
        catalog["books"]["A Stone Age Tale by Fred"],
        catalog["books"]["Brontosaurus Burgers by Fred"],
    ]


async def test_member_crud(client: AsyncClient, catalog):
    series_id = catalog["series"]["The Quarry Series by Barney"]
    book_id = catalog["books"]["Quarry Stories by Barney"]

    response = await client.post(MEMBERS, json={"series_id": series_id, "book_id": book_id, "ordinal": 3})
    assert response.status_code == 201
    member = response.json()

    assert [m["id"] for m in (await client.get(MEMBERS, params={"book_id": book_id})).json()] == [member["id"]]

    response = await client.put(f"{MEMBERS}/{member['id']}", json={**member, "ordinal": 0})
    assert response.status_code == 200
    assert response.json()["ordinal"] == 0

    ordinals = [m["ordinal"] for m in (await client.get(MEMBERS, params={"series_id": series_id})).json()]
    assert ordinals == [0, 1, 2]

    assert (await client.delete(f"{MEMBERS}/{member['id']}")).status_code == 204
    assert (await client.get(f"{MEMBERS}/{member['id']}")).status_code == 404


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"series_id": 999, "book_id": 1, "ordinal": 1},
        {"series_id": 1, "book_id": 999, "ordinal": 1},
        {"series_id": 1, "book_id": 1},
    ],
)
async def test_create_invalid_member(client: AsyncClient, catalog, body):
    response = await client.post(MEMBERS, json=body)

    assert response.status_code == 400


@pytest.mark.parametrize("field", ["series_id", "book_id"])
@pytest.mark.parametrize("value", [2**63 - 1, 2**63])
async def test_create_member_with_out_of_range_parent(client: AsyncClient, catalog, field, value):
    body = {
        "series_id": catalog["series"]["The Quarry Series by Barney"],
        "book_id": catalog["books"]["Quarry Stories by Barney"],
        "ordinal": 3,
        field: value,
    }

    response = await client.post(MEMBERS, json=body)

    assert response.status_code == 400
    assert response.json()["error_type"] == "BadRequest"


async def test_list_members_with_out_of_range_filter(client: AsyncClient):
    response = await client.get(MEMBERS, params={"book_id": 2**63})

    assert response.status_code == 400
