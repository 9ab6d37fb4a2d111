"""Learner Routes - HTTP behaviour of every learner endpoint.

Invariants:
    - GET / grades the seeded "Frodo" record (avg 85, campus Remote); 500 when absent
    - GET /passing returns exactly the passing set and is stable across calls
    - GET /{id} answers 400 "Invalid ID" for malformed and unknown ids, never 200
    - POST / validates: 201 on success, 400 with field details on failure
"""

from uuid import uuid4

from learner_api.api.error_handlers import GENERIC_ERROR_BODY
from learner_api.api.routes.learners import INVALID_ID_BODY


# --- GET / (demo record) -------------------------------------------------------

async def test_grade_demo_sets_average_and_keeps_default_campus(client):
    created = await client.post(
        "/", json={"name": "Frodo", "enrolled": True, "year": 2024},
    )
    assert created.status_code == 201

    res = await client.get("/")

    assert res.status_code == 200
    body = res.json()
    assert body["name"] == "Frodo"
    assert body["campus"] == "Remote"
    assert body["avg"] == 85
    assert body["passing"] is True
    assert body["id"] == created.json()["id"]


async def test_grade_demo_persists_average(client):
    await client.post("/", json={"name": "Frodo", "enrolled": True, "year": 2024})
    learner_id = (await client.get("/")).json()["id"]

    res = await client.get(f"/{learner_id}")

    assert res.json()["avg"] == 85


async def test_grade_demo_without_seed_is_generic_500(client):
    res = await client.get("/")
    assert res.status_code == 500
    assert res.text == GENERIC_ERROR_BODY


# --- POST / ---------------------------------------------------------------------

async def test_create_returns_201_with_record(client):
    res = await client.post(
        "/",
        json={"name": "Sam", "enrolled": True, "year": 2022, "avg": 91, "campus": "Denver"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["campus"] == "Denver"
    assert body["passing"] is True
    assert set(body) == {"id", "name", "enrolled", "year", "avg", "campus", "passing"}


async def test_create_rejects_early_year_with_field_details(client):
    res = await client.post(
        "/", json={"name": "Bilbo", "enrolled": True, "year": 1994},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert [d["field"] for d in error["details"]] == ["year"]


async def test_create_rejects_unknown_campus(client):
    res = await client.post(
        "/", json={"name": "Bilbo", "enrolled": True, "year": 2020, "campus": "Shire"},
    )
    assert res.status_code == 400
    detail = res.json()["error"]["details"][0]
    assert detail["message"] == "Shire is not a valid campus location."


async def test_create_rejects_year_beyond_integer_column(client):
    res = await client.post(
        "/", json={"name": "Bilbo", "enrolled": True, "year": 10**30},
    )
    assert res.status_code == 400
    assert [d["field"] for d in res.json()["error"]["details"]] == ["year"]


async def test_create_rejects_nan_average(client):
    res = await client.post(
        "/",
        content='{"name": "Bilbo", "enrolled": true, "year": 2020, "avg": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert [d["field"] for d in res.json()["error"]["details"]] == ["avg"]
    assert (await client.get("/passing")).json() == []


async def test_create_rejects_non_object_body(client):
    res = await client.post("/", json=["Frodo", True, 2024])
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


# --- GET /passing ---------------------------------------------------------------

async def test_passing_returns_exactly_passing_records(client, add_learner):
    await add_learner(name="Sam", avg=70)
    await add_learner(name="Merry", avg=99)
    await add_learner(name="Pippin", avg=50)
    await add_learner(name="Gollum")

    res = await client.get("/passing")

    assert res.status_code == 200
    assert sorted(r["name"] for r in res.json()) == ["Merry", "Sam"]


async def test_passing_is_idempotent(client, add_learner):
    await add_learner(name="Sam", avg=80)
    await add_learner(name="Pippin", avg=10)

    first = await client.get("/passing")
    second = await client.get("/passing")

    assert first.json() == second.json()


async def test_passing_empty_store_returns_empty_list(client):
    res = await client.get("/passing")
    assert res.status_code == 200
    assert res.json() == []


# --- GET /{id} ------------------------------------------------------------------

async def test_get_by_id_returns_record(client, add_learner):
    learner = await add_learner(name="Aragorn", campus="Boston", avg=65)

    res = await client.get(f"/{learner.id}")

    assert res.status_code == 200
    body = res.json()
    assert body["id"] == str(learner.id)
    assert body["passing"] is False


async def test_get_by_id_malformed_is_400_invalid_id(client):
    res = await client.get("/not-an-id")
    assert res.status_code == 400
    assert res.text == INVALID_ID_BODY


async def test_get_by_id_unassigned_is_400_invalid_id(client, add_learner):
    await add_learner(name="Aragorn")
    res = await client.get(f"/{uuid4()}")
    assert res.status_code == 400
    assert res.text == INVALID_ID_BODY


# --- Added query routes ---------------------------------------------------------

async def test_search_by_name_ignores_case(client, add_learner):
    await add_learner(name="Frodo Baggins")
    await add_learner(name="Samwise Gamgee")

    res = await client.get("/search", params={"name": "bAgGiNs"})

    assert res.status_code == 200
    assert [r["name"] for r in res.json()] == ["Frodo Baggins"]


async def test_campus_route_filters_exactly(client, add_learner):
    await add_learner(name="Arwen", campus="New York")
    await add_learner(name="Elrond", campus="Boston")

    res = await client.get("/campus/New York")

    assert res.status_code == 200
    assert [r["name"] for r in res.json()] == ["Arwen"]


async def test_campus_route_rejects_unknown_campus(client):
    res = await client.get("/campus/Mordor")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_peers_route_includes_self(client, add_learner):
    first = await add_learner(name="Eowyn", campus="Boston", year=2024)
    second = await add_learner(name="Faramir", campus="Boston", year=2024)
    await add_learner(name="Gimli", campus="Boston", year=2023)

    res = await client.get(f"/{first.id}/peers")

    assert res.status_code == 200
    assert {r["id"] for r in res.json()} == {str(first.id), str(second.id)}


async def test_peers_route_malformed_id_is_400_invalid_id(client):
    res = await client.get("/not-an-id/peers")
    assert res.status_code == 400
    assert res.text == INVALID_ID_BODY
