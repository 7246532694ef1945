"""CLI package for create-interwoven-app."""

from __future__ import annotations

import asyncio
import logging
import sys
import traceback
from functools import partial
from importlib import metadata
from pathlib import Path
from typing import Optional

import click
import typer

from create_interwoven_app.chains.models import ChainDescriptor, NetworkSelection
from create_interwoven_app.chains.registry import ChainRegistryClient
from create_interwoven_app.core.config import ConfigurationError, ScaffoldConfig, load_config
from create_interwoven_app.core.fs import FileSystem
from create_interwoven_app.core.installers import install_dependencies
from create_interwoven_app.core.logs import ScaffoldLogger
from create_interwoven_app.core.project import Installer, ProjectCreator, ProjectSummary
from create_interwoven_app.core.templates import available_templates
from create_interwoven_app.core.validators import (
    validate_network,
    validate_project_name,
    validate_target_directory,
    validate_template,
)

from .branding import render_banner, render_success, render_usage, render_welcome, themed_console
from .prompts import Prompter

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    help="Create a new Interwoven application with InterwovenKit integration",
    no_args_is_help=False,
)

CLI_CONSOLE = themed_console()


def _configure_logging(verbose: bool) -> None:
    root_logger = logging.getLogger()
    if verbose:
        if not root_logger.handlers:
            logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
        root_logger.setLevel(logging.DEBUG)
    else:
        if root_logger.handlers:
            root_logger.setLevel(logging.WARNING)
        else:
            logging.basicConfig(level=logging.WARNING, format="%(message)s")


def _package_version() -> str:
    try:
        return metadata.version("create-interwoven-app")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _version_callback(value: bool) -> None:
    if value:
        CLI_CONSOLE.print(f"create-interwoven-app version {_package_version()}")
        raise typer.Exit()


def _installer_from_config(config: ScaffoldConfig) -> Installer:
    return partial(
        install_dependencies,
        command=config.install_command,
        args=tuple(config.install_args),
        timeout=config.install_timeout,
    )


async def create_interwoven_app(
    project_name: str | None,
    *,
    template: str,
    network_or_chain: NetworkSelection | ChainDescriptor | str = "testnet",
    config: ScaffoldConfig,
    log: ScaffoldLogger,
    install: bool = True,
    cwd: Path | None = None,
    fs: FileSystem | None = None,
    installer: Installer | None = None,
) -> ProjectSummary:
    """Validate the inputs, then create the project under ``cwd/<project_name>``.

    Every validation failure is reported and ends the run with exit code 1
    before anything is written.
    """
    if not project_name:
        log.error("Please specify a project name:")
        render_usage(log.console)
        raise typer.Exit(code=1)

    name_check = validate_project_name(project_name)
    if not name_check.is_valid:
        log.error(f"Project name validation failed: {name_check.error}")
        raise typer.Exit(code=1)

    template_check = await validate_template(template, config.templates_dir, fs)
    if not template_check.is_valid:
        log.error(f"Template validation failed: {template_check.error}")
        choices = available_templates(config.templates_dir)
        if choices:
            log.info(f"Available templates: {', '.join(choices)}")
        raise typer.Exit(code=1)

    target_dir = ((cwd or Path.cwd()) / project_name).resolve()
    dir_check = await validate_target_directory(target_dir, fs)
    if not dir_check.is_valid:
        log.error(f"Directory validation failed: {dir_check.error}")
        raise typer.Exit(code=1)

    log.info(f"Creating a new Interwoven app in {target_dir}...")
    log.console.print()

    creator = ProjectCreator(
        template,
        templates_dir=config.templates_dir,
        fs=fs,
        logger=log,
        installer=installer or _installer_from_config(config),
        install=install,
    )
    summary = await creator.create_project(project_name, target_dir, network_or_chain)
    render_success(log.console, project_name, target_dir)
    return summary


def run_interactive_flow(
    *,
    prompter: Prompter | None = None,
    registry: ChainRegistryClient | None = None,
    config: ScaffoldConfig | None = None,
    log: ScaffoldLogger | None = None,
    cwd: Path | None = None,
    install: bool = True,
) -> ProjectSummary:
    """Ask for a project name and network, then create the project."""
    config = config or load_config()
    log = log or ScaffoldLogger(CLI_CONSOLE)
    prompter = prompter or Prompter(console=log.console)
    registry = registry or ChainRegistryClient(
        mainnet_url=config.mainnet_registry_url,
        testnet_url=config.testnet_registry_url,
        timeout=config.registry_timeout,
    )

    render_banner(log.console)
    log.info("Fetching available networks...")
    catalog = asyncio.run(registry.fetch_all_chains())

    project_name = prompter.prompt_project_name()
    network_type = prompter.prompt_network_type()

    if network_type == "custom":
        log.console.print()
        chain = prompter.prompt_custom_chain()
        spec = chain.custom_chain
        log.console.print()
        log.info(f"Custom chain configured: {chain.pretty_name} ({chain.chain_id})")
        log.info(f"Network Type: {chain.network_type}")
        if spec is not None:
            log.info(f"RPC: {spec.first_address('rpc')}")
            log.info(f"REST: {spec.first_address('rest')}")
            log.info(f"gRPC: {spec.first_address('grpc')}")
            log.info(f"Indexer: {spec.first_address('indexer')}")
    else:
        available = catalog.for_network(network_type)
        if not available:
            log.error(f"No {network_type} chains available. Please try again later.")
            raise typer.Exit(code=1)
        chain = prompter.prompt_chain(available, network_type)
        log.console.print()
        log.info(f"Selected: {chain.pretty_name} ({chain.chain_id}) - {chain.network_type}")
        if chain.description:
            log.info(f"Description: {chain.description}")
    log.console.print()

    return asyncio.run(
        create_interwoven_app(
            project_name,
            template=config.default_template,
            network_or_chain=chain,
            config=config,
            log=log,
            install=install,
            cwd=cwd,
        )
    )


@app.command()
def create(
    project_name: Optional[str] = typer.Argument(None, metavar="[PROJECT-NAME]", help="Name of the project"),  # noqa: B008
    template: Optional[str] = typer.Option(None, "--template", "-t", help="Template to use"),  # noqa: B008
    network: str = typer.Option("testnet", "--network", "-n", help="Network to use (testnet/mainnet)"),  # noqa: B008
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),  # noqa: B008
    skip_install: bool = typer.Option(False, "--skip-install", help="Do not run npm install"),  # noqa: B008
    version: bool = typer.Option(  # noqa: B008
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Create a new Interwoven application."""
    _configure_logging(verbose)
    log = ScaffoldLogger(CLI_CONSOLE, verbose=verbose)
    render_welcome(CLI_CONSOLE)
    log.debug("Verbose mode enabled")

    network_check = validate_network(network)
    if not network_check.is_valid:
        log.error(network_check.error or "Invalid network option.")
        log.info("For more network options, use the interactive mode by running without arguments.")
        raise typer.Exit(code=1)

    try:
        config = load_config()
        asyncio.run(
            create_interwoven_app(
                project_name,
                template=template or config.default_template,
                network_or_chain=network,
                config=config,
                log=log,
                install=not skip_install,
            )
        )
    except (typer.Exit, click.Abort):
        raise
    except Exception as exc:  # noqa: BLE001 - process boundary
        log.error(f"Failed to create project: {exc}")
        log.debug(f"Stack trace:\n{traceback.format_exc()}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Console-script entrypoint."""
    args = sys.argv[1:]
    if args:
        app(args=args)
        return

    _configure_logging(False)
    try:
        run_interactive_flow()
    except typer.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except (KeyboardInterrupt, click.Abort):
        CLI_CONSOLE.print()
        CLI_CONSOLE.print("[red]✖[/red] Aborted.")
        raise SystemExit(1) from None
    except ConfigurationError as exc:
        CLI_CONSOLE.print(f"[red]✖[/red] Configuration error: {exc}")
        raise SystemExit(1) from None
    except Exception as exc:  # noqa: BLE001 - process boundary
        logger.debug("Interactive flow failed", exc_info=True)
        CLI_CONSOLE.print(f"[red]✖[/red] Interactive flow failed: {exc}")
        raise SystemExit(1) from None


__all__ = ["app", "create_interwoven_app", "main", "run_interactive_flow"]
