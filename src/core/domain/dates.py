"""Fechas en formato entero `yyyyMMdd`, como las espera la API CSP."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Callable

Clock = Callable[[], datetime]


def today(advance_days: float | None = 0, *, clock: Clock | None = None) -> int:
    """Fecha actual + `advance_days` como entero de 8 dígitos.

    No respeta `ServiceMatrixEntry.permitted_days`: la API valida el calendario.
    """

    now = (clock or datetime.now)()
    shifted = now + timedelta(days=advance_days or 0)
    return int(shifted.strftime("%Y%m%d"))
