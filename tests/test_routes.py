from datetime import datetime, UTC


async def test_list_is_sorted_by_name(client, add_countries):
    await add_countries(["Zambia", "Chile", "Yemen", "Angola", "Mexico"])

    response = await client.get("/api/countries")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [c["country"] for c in body["data"]] == ["Angola", "Chile", "Mexico", "Yemen", "Zambia"]


async def test_list_empty_store(client):
    response = await client.get("/api/countries")

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


async def test_create_returns_inserted_row(client):
    before = datetime.now(UTC).replace(tzinfo=None)

    response = await client.post("/api/countries", json={"country": "Wakanda"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    created = body["data"]
    assert created["country"] == "Wakanda"
    assert isinstance(created["country_id"], int)
    assert created["country_id"] > 0
    last_update = datetime.fromisoformat(created["last_update"]).replace(tzinfo=None)
    assert last_update >= before.replace(microsecond=0)


async def test_created_row_shows_up_in_list(client):
    await client.post("/api/countries", json={"country": "Wakanda"})
    await client.post("/api/countries", json={"country": "Genovia"})

    response = await client.get("/api/countries")

    assert [c["country"] for c in response.json()["data"]] == ["Genovia", "Wakanda"]


async def test_duplicate_names_are_allowed(client):
    first = await client.post("/api/countries", json={"country": "Wakanda"})
    second = await client.post("/api/countries", json={"country": "Wakanda"})

    assert first.status_code == second.status_code == 200
    assert first.json()["data"]["country_id"] != second.json()["data"]["country_id"]


async def test_list_store_failure_returns_envelope(broken_client):
    response = await broken_client.get("/api/countries")

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "country" in body["error"]


async def test_create_store_failure_returns_envelope(broken_client):
    response = await broken_client.post("/api/countries", json={"country": "Wakanda"})

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]


async def test_create_malformed_json_is_500(client):
    response = await client.post(
        "/api/countries",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert body["error"]


async def test_create_missing_name_is_500(client):
    response = await client.post("/api/countries", json={"name": "Wakanda"})

    assert response.status_code == 500
    assert response.json()["success"] is False


async def test_delete_is_not_implemented(client, add_countries):
    await add_countries(["Chile"])

    response = await client.delete("/api/countries/1")

    assert response.status_code == 501
    body = response.json()
    assert body["success"] is False
    assert "not implemented" in body["error"]

    listed = await client.get("/api/countries")
    assert len(listed.json()["data"]) == 1
