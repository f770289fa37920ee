"""Async ledger clients used by the tracker view."""

import logging
from typing import Any, Mapping, Optional, Protocol

import httpx

logger = logging.getLogger(__name__)

Result = dict[str, Any]


class LedgerClient(Protocol):
    """Operations the tracker view issues against the debt ledger."""

    async def get_debts(self) -> list[dict[str, Any]]: ...

    async def create_debt(self, form: Mapping[str, Any]) -> Result: ...

    async def update_debt(self, debt_id: Any, form: Mapping[str, Any]) -> Result: ...

    async def delete_debt(self, debt_id: Any) -> Result: ...

    async def create_debt_payment(self, form: Mapping[str, Any]) -> Result: ...

    async def get_debt_payments(self, debt_id: Any) -> list[dict[str, Any]]: ...


class HttpLedgerClient:
    """LedgerClient talking to the debt ledger HTTP API.

    Transport errors, HTTP errors and undecodable bodies are converted the
    same way the ledger converts its own failures: mutations return
    ``{"success": False, "error": ...}``, reads return an empty list.
    """

    def __init__(
        self,
        base_url: str,
        identity: Optional[str],
        client: Optional[httpx.AsyncClient] = None,
    ):
        headers = {"Authorization": f"Bearer {identity}"} if identity else {}
        self._client = client or httpx.AsyncClient(base_url=base_url)
        self._headers = headers

    async def __aenter__(self) -> "HttpLedgerClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _mutate(self, method: str, url: str, form: Optional[Mapping[str, Any]] = None) -> Result:
        try:
            response = await self._client.request(
                method, url, json=dict(form) if form is not None else None, headers=self._headers
            )
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Ledger request %s %s failed: %s", method, url, e)
            return {"success": False, "error": str(e) or e.__class__.__name__}

    async def _read(self, url: str) -> list[dict[str, Any]]:
        try:
            response = await self._client.get(url, headers=self._headers)
            response.raise_for_status()
            return response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Ledger request GET %s failed: %s", url, e)
            return []

    async def get_debts(self) -> list[dict[str, Any]]:
        return await self._read("/api/debts")

    async def load_debt_tracker_page(self) -> list[dict[str, Any]]:
        """Initial snapshot served by the page loader."""
        return await self._read("/api/debts/page/debt-tracker")

    async def create_debt(self, form: Mapping[str, Any]) -> Result:
        return await self._mutate("POST", "/api/debts", form)

    async def update_debt(self, debt_id: Any, form: Mapping[str, Any]) -> Result:
        return await self._mutate("PUT", f"/api/debts/{debt_id}", form)

    async def delete_debt(self, debt_id: Any) -> Result:
        return await self._mutate("DELETE", f"/api/debts/{debt_id}")

    async def create_debt_payment(self, form: Mapping[str, Any]) -> Result:
        return await self._mutate("POST", "/api/debts/payments", form)

    async def get_debt_payments(self, debt_id: Any) -> list[dict[str, Any]]:
        return await self._read(f"/api/debts/{debt_id}/payments")


__all__ = ["LedgerClient", "HttpLedgerClient"]
