"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    missing = set(settings.missing_fields())

    table = Table(title="CSP Demo Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    table.add_row(
        "API URL",
        "MISSING" if "api_url" in missing else "OK",
        settings.api_url or "CSP_API_URL",
    )
    table.add_row(
        "Auth URL",
        "MISSING" if "authorisation_url" in missing else "OK",
        settings.authorisation_url or "CSP_AUTHORISATION_URL",
    )
    table.add_row(
        "Username",
        "MISSING" if "username" in missing else "OK",
        settings.username or "CSP_USERNAME",
    )
    table.add_row(
        "Password",
        "MISSING" if "password" in missing else "OK",
        "set" if "password" not in missing else "CSP_PASSWORD",
    )
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User config", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    # Connectivity (best-effort)
    for label, url in (("API reachability", settings.api_url), ("Auth reachability", settings.authorisation_url)):
        if not url:
            table.add_row(label, "SKIP", "URL not configured")
            continue
        ok_http, detail_http = asyncio.run(_check_http(url, settings))
        table.add_row(label, "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if missing:
        _console.print("\n[yellow]Note:[/yellow] run `csp-demo doctor setup` to store the missing values.")


@app.command()
def setup() -> None:
    """Interactive setup (stores URLs and credentials in the user config .env)."""

    current = AppSettings()

    api_url = typer.prompt("CSP API base URL", default=current.api_url, show_default=True).strip()
    auth_url = typer.prompt(
        "CSP authorisation base URL",
        default=current.authorisation_url,
        show_default=True,
    ).strip()
    username = typer.prompt("CSP username", default=current.username, show_default=True).strip()
    password = typer.prompt("CSP password", hide_input=True, confirmation_prompt=False).strip()

    if not api_url or not auth_url:
        raise typer.BadParameter("api_url and authorisation_url are required")

    env_path = write_user_env_vars(
        {
            "CSP_API_URL": api_url,
            "CSP_AUTHORISATION_URL": auth_url,
            "CSP_USERNAME": username,
            "CSP_PASSWORD": password,
        }
    )

    _console.print(f"[green]Saved CSP config to:[/green] {env_path}")
