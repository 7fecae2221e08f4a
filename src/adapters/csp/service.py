"""Cliente de la service matrix: `GET /Service/Matrix`."""

from __future__ import annotations

from pydantic import TypeAdapter

from adapters.csp._base import CSPResourceClient
from core.domain.models import ServiceMatrixEntry
from core.interfaces.gateways import ServiceMatrixGateway

_MATRIX = TypeAdapter(list[ServiceMatrixEntry])


class ServiceClient(CSPResourceClient, ServiceMatrixGateway):
    async def matrix(self) -> list[ServiceMatrixEntry]:
        data = await self._get_json("Service/Matrix")
        if not isinstance(data, list):
            raise ValueError(f"Expected a list of service matrix entries, got {type(data).__name__}")
        return _MATRIX.validate_python(data)
