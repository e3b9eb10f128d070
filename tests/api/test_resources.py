"""Behaviour shared by every id-keyed resource."""

import pytest
from httpx import AsyncClient

RESOURCES = [
    pytest.param(
        "/items",
        {"Name": "Projector", "Description": "Ceiling mounted", "Quantity": 2},
        {"Quantity": 3},
        id="items",
    ),
    pytest.param(
        "/students",
        {"FirstName": "Sam", "LastName": "Park", "Age": 15, "Grade": "10A"},
        {"Grade": "10B"},
        id="students",
    ),
    pytest.param(
        "/subjects",
        {"Name": "Mathematics", "Code": "MATH101", "Description": "Algebra", "Credits": 3},
        {"Credits": 4},
        id="subjects",
    ),
    pytest.param(
        "/teachers",
        {"FirstName": "Ann", "LastName": "Lee", "Age": 30, "Subject": "Math"},
        {"Subject": "Physics"},
        id="teachers",
    ),
]


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_create_then_get_returns_same_fields(
    client: AsyncClient, base, payload, changes
):
    response = await client.post(base, json=payload)
    assert response.status_code == 201
    created = response.json()
    assert isinstance(created["ID"], int)
    assert created["CreatedAt"] is not None
    assert created["UpdatedAt"] is not None

    response = await client.get(f"{base}/{created['ID']}")
    assert response.status_code == 200
    fetched = response.json()
    for field, value in payload.items():
        assert fetched[field] == value
    assert fetched["ID"] == created["ID"]


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_update_overwrites_only_sent_fields(
    client: AsyncClient, base, payload, changes
):
    created = (await client.post(base, json=payload)).json()

    response = await client.put(f"{base}/{created['ID']}", json=changes)
    assert response.status_code == 200
    updated = response.json()
    assert updated["ID"] == created["ID"]
    for field, value in payload.items():
        assert updated[field] == changes.get(field, value)
    assert updated["UpdatedAt"] >= created["UpdatedAt"]

    fetched = (await client.get(f"{base}/{created['ID']}")).json()
    assert fetched == updated


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_deleted_records_are_hidden(client: AsyncClient, base, payload, changes):
    kept = (await client.post(base, json=payload)).json()
    removed = (await client.post(base, json=payload)).json()

    response = await client.delete(f"{base}/{removed['ID']}")
    assert response.status_code == 200
    assert "deleted successfully" in response.json()["message"]

    listed = (await client.get(base)).json()
    assert [record["ID"] for record in listed] == [kept["ID"]]

    response = await client.get(f"{base}/{removed['ID']}")
    assert response.status_code == 404


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_delete_twice_returns_not_found(
    client: AsyncClient, base, payload, changes
):
    created = (await client.post(base, json=payload)).json()

    assert (await client.delete(f"{base}/{created['ID']}")).status_code == 200
    response = await client.delete(f"{base}/{created['ID']}")
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND_ERROR"


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_missing_key_returns_not_found(
    client: AsyncClient, base, payload, changes
):
    get_response = await client.get(f"{base}/999")
    put_response = await client.put(f"{base}/999", json=changes)
    delete_response = await client.delete(f"{base}/999")

    for response in (get_response, put_response, delete_response):
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND_ERROR"


@pytest.mark.parametrize("key", ["2147483648", "9223372036854775808", "0"])
@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_out_of_range_id_returns_not_found(
    client: AsyncClient, base, payload, changes, key
):
    get_response = await client.get(f"{base}/{key}")
    put_response = await client.put(f"{base}/{key}", json=changes)
    delete_response = await client.delete(f"{base}/{key}")

    for response in (get_response, put_response, delete_response):
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND_ERROR"


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_malformed_body_is_rejected(client: AsyncClient, base, payload, changes):
    response = await client.post(
        base, content="{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 422
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    # nothing was stored
    assert (await client.get(base)).json() == []


@pytest.mark.parametrize("base, payload, changes", RESOURCES)
async def test_list_is_ordered_by_id(client: AsyncClient, base, payload, changes):
    ids = [(await client.post(base, json=payload)).json()["ID"] for _ in range(3)]

    response = await client.get(base)
    assert response.status_code == 200
    assert [record["ID"] for record in response.json()] == ids


async def test_non_numeric_id_is_a_validation_error(client: AsyncClient):
    response = await client.get("/items/abc")
    assert response.status_code == 422


async def test_numeric_strings_are_coerced(client: AsyncClient):
    response = await client.post(
        "/students", json={"FirstName": "Sam", "LastName": "Park", "Age": "15"}
    )
    assert response.status_code == 201
    assert response.json()["Age"] == 15


async def test_wrong_type_is_rejected(client: AsyncClient):
    response = await client.post(
        "/students", json={"FirstName": "Sam", "LastName": "Park", "Age": "fifteen"}
    )
    assert response.status_code == 422
    fields = [
        error["field"]
        for error in response.json()["error"]["details"]["validation_errors"]
    ]
    assert "body -> Age" in fields


async def test_snake_case_fields_are_accepted(client: AsyncClient):
    response = await client.post("/subjects", json={"name": "History", "credits": 2})
    assert response.status_code == 201
    assert response.json()["Name"] == "History"
    assert response.json()["Credits"] == 2


async def test_null_for_required_column_is_rejected(client: AsyncClient):
    created = (await client.post("/items", json={"Name": "Chair"})).json()

    response = await client.put(f"/items/{created['ID']}", json={"Name": None})
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INTEGRITY_ERROR"

    assert (await client.get(f"/items/{created['ID']}")).json()["Name"] == "Chair"
