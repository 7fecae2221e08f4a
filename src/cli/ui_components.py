"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en `book` y `doctor`.
"""

from __future__ import annotations

import json
from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.services.booking_workflow import BookingOutcome


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Por qué aquí:
    - Evita dependencias circulares (main <-> doctor).
    - Permite desactivar banner en modos no interactivos (`--no-banner`).
    """

    title = Text("CSP DEMO", style="bold cyan")
    subtitle = Text("OAuth • Account • Service Matrix • Pending Job", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def print_exception(console: Console, exc: BaseException) -> None:
    """Error en rojo: mensaje y, si existe, el mensaje de la causa."""

    message = getattr(exc, "message", None) or str(exc)
    console.print(Text(f"An exception occurred: {message}", style="red"))
    cause = getattr(exc, "cause", None) or exc.__cause__
    if cause is not None:
        console.print(Text(f"Inner Exception: {cause}", style="red"))


def build_job_table(outcome: BookingOutcome) -> Table:
    """Resumen del job reservado."""

    table = Table(title="Booked Job")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    if outcome.account is not None:
        table.add_row("Account", str(outcome.account.account_id))
    if outcome.service_levels is not None:
        levels = outcome.service_levels
        table.add_row("Service matrix", str(levels.matrix_id))
        table.add_row("Collection level", str(levels.collection.service_level_id))
        table.add_row("Delivery level", str(levels.delivery.service_level_id))
    if outcome.job is not None:
        table.add_row("Collection date", str(outcome.job.collection_date))
        table.add_row("Delivery date", str(outcome.job.delivery_date))
    if outcome.job_id is not None:
        table.add_row("Job id", str(outcome.job_id), style="green")
    return table


def format_confirmation(result: Any) -> str:
    if isinstance(result, (dict, list)):
        return json.dumps(result, ensure_ascii=False, indent=2)
    return "" if result is None else str(result)
