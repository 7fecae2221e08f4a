"""Cliente de cuentas: `GET /Account/All`."""

from __future__ import annotations

from pydantic import TypeAdapter

from adapters.csp._base import CSPResourceClient
from core.domain.models import Account
from core.interfaces.gateways import AccountGateway

_ACCOUNTS = TypeAdapter(list[Account])


class AccountClient(CSPResourceClient, AccountGateway):
    async def all_accounts(self) -> list[Account]:
        data = await self._get_json("Account/All")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of accounts, got {type(data).__name__}")
        return _ACCOUNTS.validate_python(data)
