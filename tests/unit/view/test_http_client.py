"""Unit tests for the HTTP ledger client using httpx.MockTransport."""

import json

import httpx
import pytest

from debt_tracker.view.client import HttpLedgerClient


def make_client(handler, identity="user_alice"):
    transport = httpx.MockTransport(handler)
    http = httpx.AsyncClient(transport=transport, base_url="http://ledger.test")
    return HttpLedgerClient("http://ledger.test", identity, client=http)


class TestHttpLedgerClient:
    """Request shapes and error conversion."""

    @pytest.mark.asyncio
    async def test_create_debt_posts_form_with_bearer_identity(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["auth"] = request.headers.get("authorization")
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"success": True, "debt": {"id": 1}})

        async with make_client(handler) as client:
            result = await client.create_debt({"name": "Card A", "totalAmount": "10000"})

        assert result == {"success": True, "debt": {"id": 1}}
        assert seen == {
            "method": "POST",
            "path": "/api/debts",
            "auth": "Bearer user_alice",
            "body": {"name": "Card A", "totalAmount": "10000"},
        }

    @pytest.mark.asyncio
    async def test_routes(self):
        calls = []

        def handler(request: httpx.Request) -> httpx.Response:
            calls.append((request.method, request.url.path))
            if request.method == "GET":
                return httpx.Response(200, json=[])
            return httpx.Response(200, json={"success": True})

        async with make_client(handler) as client:
            await client.get_debts()
            await client.load_debt_tracker_page()
            await client.update_debt(4, {"name": "x"})
            await client.delete_debt(4)
            await client.create_debt_payment({"debtId": "4", "amount": "10"})
            await client.get_debt_payments(4)

        assert calls == [
            ("GET", "/api/debts"),
            ("GET", "/api/debts/page/debt-tracker"),
            ("PUT", "/api/debts/4"),
            ("DELETE", "/api/debts/4"),
            ("POST", "/api/debts/payments"),
            ("GET", "/api/debts/4/payments"),
        ]

    @pytest.mark.asyncio
    async def test_no_identity_sends_no_authorization(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json=[])

        async with make_client(handler, identity=None) as client:
            assert await client.get_debts() == []

        assert seen["auth"] is None

    @pytest.mark.asyncio
    async def test_server_error_becomes_failed_mutation(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="Internal Server Error")

        async with make_client(handler) as client:
            result = await client.delete_debt(1)

        assert result["success"] is False
        assert "500" in result["error"]

    @pytest.mark.asyncio
    async def test_transport_error_becomes_empty_read(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with make_client(handler) as client:
            assert await client.get_debts() == []
            result = await client.create_debt({"name": "x"})

        assert result == {"success": False, "error": "connection refused"}

    @pytest.mark.asyncio
    async def test_non_json_body_is_converted(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>Bad Gateway</html>")

        async with make_client(handler) as client:
            assert await client.get_debts() == []
            result = await client.update_debt(1, {"name": "x"})

        assert result["success"] is False
        assert result["error"]
