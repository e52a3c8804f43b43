async def test_home_returns_home_page(api_client) -> None:
    resp = await api_client.get("/")
    assert resp.status_code == 200
    assert resp.json() == {"home": "Home page"}


async def test_index_returns_hello_world(api_client) -> None:
    resp = await api_client.get("/index")
    assert resp.status_code == 200
    assert resp.json() == {"hello": "Hello World!"}


async def test_responses_include_x_request_id(api_client) -> None:
    resp = await api_client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers.get("x-request-id")


async def test_request_ids_differ_between_requests(api_client) -> None:
    first = await api_client.get("/health")
    second = await api_client.get("/health")
    assert first.headers["x-request-id"] != second.headers["x-request-id"]


async def test_unknown_route_uses_error_shape(api_client) -> None:
    resp = await api_client.get("/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


async def test_wrong_method_uses_error_shape(api_client) -> None:
    resp = await api_client.patch("/data")
    assert resp.status_code == 405
    assert "error" in resp.json()


async def test_docs_served_at_api_docs(api_client) -> None:
    resp = await api_client.get("/api-docs")
    assert resp.status_code == 200
    assert "swagger" in resp.text.lower()


async def test_openapi_schema_describes_routes(api_client) -> None:
    resp = await api_client.get("/openapi.json")
    assert resp.status_code == 200
    schema = resp.json()

    assert schema["info"]["title"] == "User and Places API"
    assert schema["info"]["version"] == "1.0.0"
    assert schema["servers"] == [{"url": "http://localhost:3000", "description": "Local server"}]

    paths = schema["paths"]
    assert {"get", "post"} <= set(paths["/data"])
    assert "get" in paths["/data/{user_id}"]
    assert {"put", "delete"} <= set(paths["/places/{place_id}"])

    create_body = paths["/data"]["post"]["requestBody"]["content"]["application/json"]["schema"]
    assert set(create_body["required"]) == {"id", "Firstname", "Surname"}
    assert create_body["additionalProperties"] is False


async def test_redoc_is_disabled(api_client) -> None:
    resp = await api_client.get("/redoc")
    assert resp.status_code == 404
