async def test_put_new_place_creates_it(api_client, app) -> None:
    resp = await api_client.put("/places/3", json={"name": "Colosseum", "location": "Rome"})
    assert resp.status_code == 201
    assert resp.json() == {"id": "3", "name": "Colosseum", "location": "Rome"}
    assert app.state.place_store.get_place("3") is not None


async def test_put_twice_creates_then_replaces(api_client, app) -> None:
    first = await api_client.put("/places/10", json={"name": "Old Town", "location": "Tallinn"})
    assert first.status_code == 201

    second = await api_client.put("/places/10", json={"name": "Market Square", "location": "Helsinki"})
    assert second.status_code == 200
    assert second.json() == {"id": "10", "name": "Market Square", "location": "Helsinki"}

    stored = app.state.place_store.get_place("10")
    assert stored.model_dump() == {"id": "10", "name": "Market Square", "location": "Helsinki"}
    assert len(app.state.place_store) == 3


async def test_put_existing_sample_place_keeps_position(api_client, app) -> None:
    resp = await api_client.put("/places/1", json={"name": "Bryant Park", "location": "New York"})
    assert resp.status_code == 200
    ids = [place.id for place in app.state.place_store.list_places()]
    assert ids == ["1", "2"]
    assert app.state.place_store.get_place("1").name == "Bryant Park"


async def test_put_path_id_wins_over_body_id(api_client, app) -> None:
    resp = await api_client.put("/places/11", json={"id": "99", "name": "Pier", "location": "Oslo"})
    assert resp.status_code == 201
    assert resp.json()["id"] == "11"
    assert app.state.place_store.get_place("99") is None


async def test_put_requires_name_and_location(api_client, app) -> None:
    for body in ({"name": "Pier"}, {"location": "Oslo"}, {"name": "", "location": "Oslo"}):
        resp = await api_client.put("/places/12", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing required fields: name, location"}
    assert app.state.place_store.get_place("12") is None


async def test_put_rejects_non_json_content_type(api_client) -> None:
    resp = await api_client.put(
        "/places/1",
        content=b"name=Pier&location=Oslo",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert resp.status_code == 415
    assert resp.json() == {"error": "Unsupported Media Type. Content-Type must be application/json"}


async def test_content_type_checked_before_fields(api_client) -> None:
    resp = await api_client.put("/places/1", content=b"{}", headers={"Content-Type": "text/plain"})
    assert resp.status_code == 415


async def test_delete_existing_place_returns_204(api_client, app) -> None:
    resp = await api_client.delete("/places/2")
    assert resp.status_code == 204
    assert resp.content == b""
    assert app.state.place_store.get_place("2") is None

    again = await api_client.delete("/places/2")
    assert again.status_code == 404
    assert again.json() == {"error": "Place not found"}


async def test_delete_unknown_place_returns_404(api_client, app) -> None:
    resp = await api_client.delete("/places/404")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Place not found"}
    assert len(app.state.place_store) == 2


async def test_deleted_place_can_be_recreated(api_client) -> None:
    assert (await api_client.delete("/places/1")).status_code == 204
    resp = await api_client.put("/places/1", json={"name": "Central Park", "location": "New York"})
    assert resp.status_code == 201
