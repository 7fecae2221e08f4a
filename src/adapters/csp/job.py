"""Cliente de jobs: alta pendiente y confirmación."""

from __future__ import annotations

from typing import Any

from adapters.csp._base import CSPResourceClient, decode_body
from core.domain.models import JobRequest
from core.interfaces.gateways import JobGateway


class JobClient(CSPResourceClient, JobGateway):
    async def add(self, job: JobRequest) -> str:
        """Crea un job pendiente y devuelve el id tal cual lo manda la API.

        La API responde un string (a veces entrecomillado como JSON); no se
        interpreta aquí.
        """

        resp = await self._post("Job/Add", json=job.to_payload())
        body = decode_body(resp)
        if body is None:
            return ""
        return body if isinstance(body, str) else str(body)

    async def confirm(self, job_id: int) -> Any:
        resp = await self._post(f"Job/Confirm/{int(job_id)}")
        return decode_body(resp)
