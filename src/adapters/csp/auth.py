"""Cliente del endpoint OAuth de token."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Credentials, OAuthToken
from core.errors import AuthenticationFailure
from core.interfaces.gateways import Authenticator


class AuthClient(Authenticator):
    """Password grant contra `{base_url}/token`.

    Usa su propio cliente sin autorizar; el bearer se aplica después en
    `build_authorized_client`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def acquire_token(self, credentials: Credentials) -> OAuthToken:
        url = f"{credentials.base_url.rstrip('/')}/token"
        form = {
            "grant_type": "password",
            "username": credentials.username,
            "password": credentials.password.get_secret_value(),
        }
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                resp = await client.post(url, data=form)
            resp.raise_for_status()
            return OAuthToken.model_validate(resp.json())
        except (httpx.HTTPError, ValueError, ValidationError) as exc:
            raise AuthenticationFailure("Unable to obtain an OAuth token.", cause=exc) from exc
