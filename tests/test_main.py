import pytest
from fastapi import status
from fastapi.testclient import TestClient

from infrastructure.di import get_user_repository
from main import create_app, OPENAPI_URL, SWAGGER_UI_URL
from utils import AppSettings, CorsSettings


@pytest.fixture
def client():
    app = create_app(AppSettings(rate_limit_enabled=False), CorsSettings())
    return TestClient(app)


@pytest.fixture
def openapi(client):
    response = client.get(OPENAPI_URL)
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def test_read_root(client):
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"message": "Welcome to User API"}


def test_lifespan_loads_repository():
    get_user_repository.cache_clear()
    app = create_app(AppSettings(rate_limit_enabled=False), CorsSettings())

    with TestClient(app):
        assert get_user_repository.cache_info().currsize == 1
        assert len(get_user_repository().users) == 2


def test_swagger_ui_is_served(client):
    response = client.get(SWAGGER_UI_URL)

    assert response.status_code == status.HTTP_200_OK
    assert "swagger-ui" in response.text
    assert OPENAPI_URL in response.text


@pytest.mark.parametrize("path", ["/swagger", "/swagger/"])
def test_swagger_redirects_to_ui(client, path):
    response = client.get(path, follow_redirects=False)

    assert response.status_code == status.HTTP_307_TEMPORARY_REDIRECT
    assert response.headers["location"] == SWAGGER_UI_URL


def test_openapi_info(openapi):
    info = openapi["info"]
    assert info["title"] == "User API"
    assert info["version"] == "1.0"
    assert info["termsOfService"] == "http://swagger.io/terms/"
    assert info["contact"] == {"name": "API Support", "email": "support@swagger.io"}
    assert info["license"]["name"] == "MIT"


def test_openapi_documents_user_operations(openapi):
    paths = openapi["paths"]

    assert set(paths) == {"/api/v1/users", "/api/v1/users/{user_id}"}
    assert set(paths["/api/v1/users"]) == {"get", "post"}
    assert set(paths["/api/v1/users/{user_id}"]) == {"get", "put", "delete"}
    for operations in paths.values():
        for operation in operations.values():
            assert operation["tags"] == ["users"]
            assert "500" in operation["responses"]


def test_openapi_documents_pagination(openapi):
    parameters = openapi["paths"]["/api/v1/users"]["get"]["parameters"]

    assert [(p["name"], p["in"], p["schema"]["default"]) for p in parameters] == [
        ("page", "query", 1),
        ("limit", "query", 10),
    ]


@pytest.mark.parametrize(
    "path, method",
    [("/api/v1/users", "post"), ("/api/v1/users/{user_id}", "put")],
)
def test_openapi_documents_request_body(openapi, path, method):
    operation = openapi["paths"][path][method]
    schema = operation["requestBody"]["content"]["application/json"]["schema"]

    assert operation["requestBody"]["required"] is True
    assert schema["required"] == ["name", "email", "age"]
    assert schema["properties"]["email"]["format"] == "email"
    assert "400" in operation["responses"]


def test_openapi_documents_not_found_only_on_get(openapi):
    item_path = openapi["paths"]["/api/v1/users/{user_id}"]

    assert "404" in item_path["get"]["responses"]
    assert "404" not in item_path["delete"]["responses"]
    assert "201" in openapi["paths"]["/api/v1/users"]["post"]["responses"]


def test_openapi_components(openapi):
    schemas = openapi["components"]["schemas"]

    assert {"User", "ErrorResponse", "SuccessResponse"} <= set(schemas)


def test_cors_allows_any_origin(client):
    response = client.get("/api/v1/users", headers={"Origin": "https://somewhere.example"})

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client):
    response = client.options(
        "/api/v1/users/1",
        headers={
            "Origin": "https://somewhere.example",
            "Access-Control-Request-Method": "PUT",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"
    assert "PUT" in response.headers["access-control-allow-methods"]


def test_custom_api_prefix():
    app = create_app(AppSettings(api_prefix="/v2", rate_limit_enabled=False), CorsSettings())
    client = TestClient(app)

    assert client.get("/v2/users/1").status_code == status.HTTP_200_OK
    assert client.get("/api/v1/users/1").status_code == status.HTTP_404_NOT_FOUND
