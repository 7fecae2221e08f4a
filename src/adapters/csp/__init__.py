"""Bindings CSP (clientes concretos sobre httpx).

Por qué un paquete:
- Un módulo por recurso de la API (token, cuentas, service matrix, jobs).
- Cada cliente implementa un contrato de `core.interfaces.gateways`.
"""

from adapters.csp.account import AccountClient
from adapters.csp.auth import AuthClient
from adapters.csp.job import JobClient
from adapters.csp.service import ServiceClient
from adapters.csp.session import open_csp_session

__all__ = [
	"AccountClient",
	"AuthClient",
	"JobClient",
	"ServiceClient",
	"open_csp_session",
]
