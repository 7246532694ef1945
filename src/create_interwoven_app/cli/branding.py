"""Console styling and fixed messages for the create-interwoven-app CLI."""

from __future__ import annotations

import os
from pathlib import Path

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

INTERWOVEN_THEME = Theme(
    {
        "interwoven.banner": "bold cyan",
        "interwoven.command": "cyan",
        "interwoven.argument": "green",
        "interwoven.path": "dim",
        "interwoven.success": "bold green",
        "interwoven.project": "bold",
        "interwoven.error": "bold red",
    }
)

APP_NAME = "create-interwoven-app"


def themed_console(**kwargs: object) -> Console:
    """Return a Console configured with the create-interwoven-app theme."""
    return Console(theme=INTERWOVEN_THEME, **kwargs)


def render_banner(console: Console) -> None:
    """Print the banner shown at the start of the interactive flow."""
    if os.environ.get("CREATE_INTERWOVEN_APP_DISABLE_BANNER"):
        return
    console.print()
    console.print(Text("Welcome to InterwovenKit", style="interwoven.banner"))
    console.print()


def render_welcome(console: Console, app_name: str = APP_NAME) -> None:
    console.print(Text(f"🌟 Welcome to {app_name}!", style="interwoven.banner"))
    console.print()


def render_usage(console: Console) -> None:
    console.print()
    console.print("Usage:")
    console.print(f"[interwoven.command]  npx {APP_NAME}[/] [interwoven.argument]<project-name>[/]")
    console.print()
    console.print("For example:")
    console.print(f"[interwoven.command]  npx {APP_NAME}[/] [interwoven.argument]my-dapp[/]")
    console.print()


def render_success(console: Console, project_name: str, project_path: Path) -> None:
    """Print the closing instructions after a project was created."""
    line = Text()
    line.append("🎉 Success!", style="interwoven.success")
    line.append(" Created ")
    line.append(project_name, style="interwoven.project")
    line.append(" at ")
    line.append(str(project_path), style="interwoven.path")
    console.print()
    console.print(line)
    console.print()
    console.print("We suggest that you begin by typing:")
    console.print()
    console.print(Text.assemble(("  cd", "interwoven.command"), " ", project_name))
    console.print(Text("  npm run dev", style="interwoven.command"))
    console.print()
    console.print("Happy building with InterwovenKit! 🚀")


__all__ = [
    "APP_NAME",
    "INTERWOVEN_THEME",
    "render_banner",
    "render_success",
    "render_usage",
    "render_welcome",
    "themed_console",
]
