import copy

import pytest

from nsoneapi.errors import APIError
from nsoneapi.scope import ScopeService


class FakeResponse:
    def __init__(self, status_code):
        self.status_code = status_code


class FakeClient:
    def __init__(self):
        self.routes = {}
        self.calls = []

    def add(self, method, path, status, data):
        self.routes[(method, path)] = (status, data)

    def do(self, method, path, body=None):
        self.calls.append((method, path, copy.deepcopy(body)))
        if (method, path) not in self.routes:
            raise APIError("no test case", FakeResponse(404))
        status, data = self.routes[(method, path)]
        response = FakeResponse(status)
        if status >= 400:
            raise APIError(data["message"], response)
        return copy.deepcopy(data), response


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def service(client):
    return ScopeService(client)


def test_list(client, service):
    client.add("GET", "dhcp/scope", 200, [{"address_id": 1} for _ in range(4)])
    result, _ = service.list()
    assert len(result) == 4
    assert all(scope["address_id"] == 1 for scope in result)


def test_get(client, service):
    client.add("GET", "dhcp/scope/1", 200, {"address_id": 1})
    result, response = service.get(1)
    assert result["address_id"] == 1
    assert response.status_code == 200


def test_create_requires_address_id(client, service):
    with pytest.raises(ValueError, match="IDAddress"):
        service.create({})
    assert client.calls == []


def test_create(client, service):
    scope = {"address_id": 123}
    client.add("PUT", "dhcp/scope", 201, scope)
    result, response = service.create(scope)
    assert result["address_id"] == 123
    assert response.status_code == 201


def test_edit_without_id_fails(client, service):
    with pytest.raises(APIError):
        service.edit({"address_id": 123})
    assert client.calls[0][:2] == ("POST", "dhcp/scope/0")


def test_edit_requires_address_id(service):
    with pytest.raises(ValueError, match="IDAddress"):
        service.edit({})


def test_edit(client, service):
    scope = {"id": 1, "address_id": 123}
    client.add("POST", "dhcp/scope/1", 200, scope)
    result, _ = service.edit(scope)
    assert result is scope
    assert result["address_id"] == 123


def test_delete(client, service):
    client.add("DELETE", "dhcp/scope/1", 204, None)
    assert service.delete(1).status_code == 204


def test_delete_error(client, service):
    client.add("DELETE", "dhcp/scope/2", 404, {"message": "scope not found"})
    with pytest.raises(APIError, match="scope not found"):
        service.delete(2)