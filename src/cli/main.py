"""CLI principal (Typer).

Comandos:
- `book`: ejecuta el workflow completo contra la API CSP.
- `doctor`: diagnósticos de configuración y conectividad.

La CLI solo imprime; la orquestación vive en `core.services.booking_workflow`.
"""

from __future__ import annotations

import asyncio
from typing import Optional

import typer
from pydantic import SecretStr
from rich.console import Console
from rich.markup import escape

from adapters.csp import AuthClient, open_csp_session
from cli import doctor
from cli.ui_components import build_job_table, format_confirmation, print_banner, print_exception
from core.config import AppSettings
from core.errors import CSPError
from core.services.booking_workflow import WorkflowHooks, book_job

app = typer.Typer(no_args_is_help=True, help="CSP job booking demo.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _settings_with_overrides(
    *,
    api_url: str | None,
    auth_url: str | None,
    username: str | None,
    password: str | None,
) -> AppSettings:
    settings = AppSettings()
    overrides: dict[str, object] = {}
    if api_url is not None:
        overrides["api_url"] = api_url
    if auth_url is not None:
        overrides["authorisation_url"] = auth_url
    if username is not None:
        overrides["username"] = username
    if password is not None:
        overrides["password"] = SecretStr(password)
    if not overrides:
        return settings
    return settings.model_copy(update=overrides)


@app.command()
def book(
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Base URL de la API CSP."),
    auth_url: Optional[str] = typer.Option(None, "--auth-url", help="Base URL del servidor OAuth."),
    username: Optional[str] = typer.Option(None, "--username", "-u", help="Usuario CSP."),
    password: Optional[str] = typer.Option(None, "--password", "-p", help="Password CSP."),
    no_banner: bool = typer.Option(False, "--no-banner", help="No mostrar el banner."),
) -> None:
    """Autentica, resuelve cuenta y service levels, crea un job pendiente y lo confirma."""

    settings = _settings_with_overrides(
        api_url=api_url,
        auth_url=auth_url,
        username=username,
        password=password,
    )

    missing = settings.missing_fields()
    if missing:
        _console.print(
            f"[red]Missing configuration:[/red] {', '.join(missing)}. "
            "Use flags, CSP_* env vars or `doctor setup`."
        )
        raise typer.Exit(code=2)

    if not no_banner:
        print_banner(_console)

    hooks = WorkflowHooks(
        info=lambda msg: _console.print(f"[cyan]>[/cyan] {escape(msg)}"),
        warning=lambda msg: _console.print(f"[yellow]{escape(msg)}[/yellow]"),
    )

    try:
        outcome = asyncio.run(
            book_job(
                settings=settings,
                authenticator=AuthClient(settings),
                open_session=lambda token: open_csp_session(settings, token),
                hooks=hooks,
            )
        )
    except CSPError as exc:
        print_exception(_console, exc)
        pending = getattr(exc, "pending_job_id", None)
        if pending is not None:
            _console.print(f"[yellow]Pending job {pending} was created but not confirmed.[/yellow]")
        raise typer.Exit(code=1) from exc

    if not outcome.completed:
        return

    _console.print(build_job_table(outcome))
    _console.print(escape(format_confirmation(outcome.confirmation)))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
