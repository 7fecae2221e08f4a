"""Fixtures compartidos: settings aislados, reloj fijo y fakes de los gateways."""

from __future__ import annotations

from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any

import pytest

from core.config import AppSettings
from core.domain.models import Account, Credentials, JobRequest, OAuthToken, ServiceMatrixEntry
from core.interfaces.gateways import CSPGateways

FIXED_NOW = datetime(2024, 2, 27, 10, 30)


class FakeAuthenticator:
    def __init__(self, token: str = "token-123", error: Exception | None = None) -> None:
        self.token = token
        self.error = error
        self.calls: list[Credentials] = []

    async def acquire_token(self, credentials: Credentials) -> OAuthToken:
        self.calls.append(credentials)
        if self.error is not None:
            raise self.error
        return OAuthToken(access_token=self.token)


class FakeAccounts:
    def __init__(self, accounts: list[Account], error: Exception | None = None) -> None:
        self.accounts = accounts
        self.error = error
        self.calls = 0

    async def all_accounts(self) -> list[Account]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.accounts)


class FakeServices:
    def __init__(self, entries: list[ServiceMatrixEntry], error: Exception | None = None) -> None:
        self.entries = entries
        self.error = error
        self.calls = 0

    async def matrix(self) -> list[ServiceMatrixEntry]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.entries)


class FakeJobs:
    def __init__(
        self,
        add_response: str = "101",
        add_error: Exception | None = None,
        confirm_response: Any = "Confirmed",
        confirm_error: Exception | None = None,
    ) -> None:
        self.add_response = add_response
        self.add_error = add_error
        self.confirm_response = confirm_response
        self.confirm_error = confirm_error
        self.added: list[JobRequest] = []
        self.confirmed: list[int] = []

    async def add(self, job: JobRequest) -> str:
        self.added.append(job)
        if self.add_error is not None:
            raise self.add_error
        return self.add_response

    async def confirm(self, job_id: int) -> Any:
        self.confirmed.append(job_id)
        if self.confirm_error is not None:
            raise self.confirm_error
        return self.confirm_response


class FakeSessionFactory:
    """Registra el token recibido y entrega siempre los mismos gateways."""

    def __init__(self, gateways: CSPGateways) -> None:
        self.gateways = gateways
        self.tokens: list[OAuthToken] = []
        self.closed = False

    def __call__(self, token: OAuthToken):
        self.tokens.append(token)
        return self._session()

    @asynccontextmanager
    async def _session(self):
        try:
            yield self.gateways
        finally:
            self.closed = True


def matrix_row(**fields: Any) -> ServiceMatrixEntry:
    return ServiceMatrixEntry.model_validate(fields)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_url="https://api.csp.test/v1",
        authorisation_url="https://auth.csp.test",
        username="demo",
        password="s3cret",
    )


@pytest.fixture
def standard_matrix() -> list[ServiceMatrixEntry]:
    return [
        matrix_row(ServiceMatrixId=10, ServiceLevelId=5, Type="C", ServiceTimeId=3, StartTime=900, EndTime=1200, AdvanceDays=2),
        matrix_row(ServiceMatrixId=10, ServiceLevelId=6, Type="D", ServiceTimeId=4, StartTime=1300, EndTime=1700),
        matrix_row(ServiceMatrixId=11, ServiceLevelId=7, Type="C", AdvanceDays=1),
    ]
