"""Contratos de los clientes CSP.

Por qué Protocol:
- El workflow depende de estas formas, no de httpx ni de los bindings concretos.
- En tests se sustituyen por fakes en memoria sin tocar la red.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from core.domain.models import Account, Credentials, JobRequest, OAuthToken, ServiceMatrixEntry


@runtime_checkable
class Authenticator(Protocol):
    """Intercambia credenciales por un bearer token (un único request)."""

    async def acquire_token(self, credentials: Credentials) -> OAuthToken:
        ...


@runtime_checkable
class AccountGateway(Protocol):
    async def all_accounts(self) -> list[Account]:
        """Colección completa de cuentas accesibles, en el orden de la API."""

        ...


@runtime_checkable
class ServiceMatrixGateway(Protocol):
    async def matrix(self) -> list[ServiceMatrixEntry]:
        ...


@runtime_checkable
class JobGateway(Protocol):
    """Alta y confirmación de jobs.

    `add` devuelve el cuerpo de la respuesta tal cual (string); el workflow
    decide cómo interpretarlo.
    """

    async def add(self, job: JobRequest) -> str:
        ...

    async def confirm(self, job_id: int) -> Any:
        ...


@dataclass(frozen=True)
class CSPGateways:
    """Clientes autorizados que comparten un mismo transporte HTTP."""

    accounts: AccountGateway
    services: ServiceMatrixGateway
    jobs: JobGateway
