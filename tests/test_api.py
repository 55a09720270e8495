import httpx
import pytest

from conftest import FakeOdoo
from odoo_jsonrpc import Config, JsonRpcClient, NotFoundError, OdooJsonRpc


@pytest.fixture
def odoo(client: JsonRpcClient) -> OdooJsonRpc:
    return OdooJsonRpc(client)


def test_groups_expose_their_endpoints(odoo: OdooJsonRpc) -> None:
    assert sorted(odoo.database.names()) == ["create", "drop", "duplicate", "list"]
    assert sorted(odoo.session.names()) == ["change_password", "get_infos", "get_languages", "get_modules"]
    assert sorted(odoo.model.names()) == ["create", "find", "invoke", "remove", "search_read", "update"]
    assert "find" in dir(odoo.model)


def test_unknown_endpoint_raises_attribute_error(odoo: OdooJsonRpc) -> None:
    with pytest.raises(AttributeError):
        odoo.model.read_group


def test_set_host_chains() -> None:
    odoo = OdooJsonRpc()
    assert odoo.set_host("erp.example.com") is odoo
    assert odoo.client.host == "http://erp.example.com"


def test_host_argument_is_applied() -> None:
    assert OdooJsonRpc(host="https://erp.example.com").client.host == "https://erp.example.com"


def test_from_config() -> None:
    odoo = OdooJsonRpc.from_config(Config(host="erp.example.com:8069", timeout=5.0))
    assert odoo.client.host == "http://erp.example.com:8069"


@pytest.mark.asyncio
async def test_login_then_find(odoo: OdooJsonRpc, server: FakeOdoo) -> None:
    server.routes["/web/session/authenticate"] = {"result": {"uid": 2, "session_id": "abc"}}
    server.routes["/web/dataset/search_read"] = {"result": {"length": 1, "records": [{"id": 1, "name": "Admin"}]}}

    await odoo.login("demo", "admin", "admin")
    record = await odoo.model.find("res.users", 1, ["name"])

    assert record == {"id": 1, "name": "Admin"}
    assert odoo.client.session_id == "abc"
    assert [body["id"] for body in server.bodies] == ["r0", "r1"]
    assert server.last_body["session_id"] == "abc"


@pytest.mark.asyncio
async def test_find_not_found_through_api(odoo: OdooJsonRpc, server: FakeOdoo) -> None:
    server.routes["/web/dataset/search_read"] = {"result": {"length": 0, "records": []}}

    with pytest.raises(NotFoundError):
        await odoo.model.find("res.partner", 999)


@pytest.mark.asyncio
async def test_database_and_session_groups_are_bound(odoo: OdooJsonRpc, server: FakeOdoo) -> None:
    server.routes["/web/database/get_list"] = {"result": ["demo", "prod"]}
    server.routes["/web/session/get_lang_list"] = {"result": [["en_US", "English (US)"]]}

    assert await odoo.database.list() == ["demo", "prod"]
    assert await odoo.session.get_languages() == [["en_US", "English (US)"]]


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client() -> None:
    async with OdooJsonRpc(host="odoo.test") as odoo:
        http_client = odoo.client._http_client
    assert http_client.is_closed


@pytest.mark.asyncio
async def test_context_manager_leaves_injected_http_client_open(server: FakeOdoo) -> None:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(server))
    async with OdooJsonRpc(JsonRpcClient("odoo.test", http_client=http_client)):
        pass
    assert not http_client.is_closed
    await http_client.aclose()
