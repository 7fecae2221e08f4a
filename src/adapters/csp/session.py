"""Sesión autorizada: un transporte compartido por los tres clientes de la API."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx

from adapters.csp.account import AccountClient
from adapters.csp.job import JobClient
from adapters.csp.service import ServiceClient
from adapters.http_client import build_authorized_client
from core.config import AppSettings
from core.domain.models import OAuthToken
from core.interfaces.gateways import CSPGateways


@asynccontextmanager
async def open_csp_session(
    settings: AppSettings,
    token: OAuthToken,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[CSPGateways]:
    """Abre el cliente autorizado y lo cierra al terminar la ejecución."""

    async with build_authorized_client(settings, token, transport=transport) as client:
        yield CSPGateways(
            accounts=AccountClient(client, base_url=settings.api_url),
            services=ServiceClient(client, base_url=settings.api_url),
            jobs=JobClient(client, base_url=settings.api_url),
        )
