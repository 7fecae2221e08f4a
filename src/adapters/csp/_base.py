"""Base común para los clientes de recursos CSP."""

from __future__ import annotations

from typing import Any

import httpx


class CSPResourceClient:
    """Cliente de un recurso REST sobre un `httpx.AsyncClient` compartido.

    No posee el cliente: quien lo creó (la sesión) se encarga de cerrarlo.
    """

    def __init__(self, client: httpx.AsyncClient, *, base_url: str) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_json(self, path: str) -> Any:
        resp = await self._client.get(self._url(path))
        resp.raise_for_status()
        return resp.json()

    async def _post(self, path: str, *, json: Any = None) -> httpx.Response:
        resp = await self._client.post(self._url(path), json=json)
        resp.raise_for_status()
        return resp


def decode_body(resp: httpx.Response) -> Any:
    """JSON si el cuerpo lo es; si no, el texto tal cual."""

    text = resp.text
    if not text.strip():
        return None
    try:
        return resp.json()
    except ValueError:
        return text
