"""CLI commands for hostservice."""

import importlib
from pathlib import Path
from typing import Any

import typer
from rich.console import Console

from hostservice import __logo__, __version__
from hostservice.config import load_settings
from hostservice.daemon import ServiceAdapter, new_service
from hostservice.errors import ConfigError, ServiceError

app = typer.Typer(
    name="hostservice",
    help=f"{__logo__} hostservice - run a program as a host service",
    no_args_is_help=True,
)

console = Console()

ConfigOption = typer.Option(None, "--config", "-c", help="Path to the service YAML file")


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} hostservice v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
):
    """hostservice - run a program as a host service."""
    pass


class _NoProgram:
    """Placeholder program for commands that never enter the run loop."""

    def start(self, service: ServiceAdapter) -> None:
        raise RuntimeError("No program configured")

    def stop(self, service: ServiceAdapter) -> None:
        pass


def load_program(spec: str) -> Any:
    """
    Import a program from a ``module:attribute`` string.

    A class or factory is called with no arguments; any other object is
    used as the program itself.
    """
    module_name, sep, attr = spec.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"program must look like 'module:attribute', got {spec!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigError(f"Cannot import program module {module_name}: {e}") from e

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigError(f"{module_name} has no attribute {attr}") from e

    program = target() if callable(target) else target
    if not callable(getattr(program, "start", None)) or not callable(getattr(program, "stop", None)):
        raise ConfigError(f"{spec} does not provide start() and stop()")
    return program


def _service(config: Path | None, with_program: bool = False) -> ServiceAdapter:
    settings = load_settings(config)
    if with_program:
        if not settings.program:
            raise ConfigError("No program configured; set 'program: module:attribute'")
        program = load_program(settings.program)
    else:
        program = _NoProgram()
    return new_service(program, settings.service)


def _fail(e: ServiceError) -> None:
    console.print(f"[red]✗[/red] {e}")
    raise typer.Exit(1)


# ============================================================================
# Lifecycle Commands
# ============================================================================


@app.command("install")
def install(config: Path = ConfigOption):
    """Generate and install the system service."""
    try:
        service = _service(config)
        path = service.install()
    except ServiceError as e:
        _fail(e)
        return

    console.print(f"[green]✓[/green] Installed service at {path}")
    console.print("\nStart the service with: [cyan]hostservice start[/cyan]")


@app.command("uninstall")
def uninstall(
    config: Path = ConfigOption,
    strict: bool = typer.Option(False, "--strict", help="Fail if the service cannot be disabled"),
):
    """Remove the system service."""
    try:
        service = _service(config)
        service.uninstall(strict=strict)
    except ServiceError as e:
        _fail(e)
        return

    console.print("[green]✓[/green] Service uninstalled")


@app.command("start")
def start(config: Path = ConfigOption):
    """Start the service."""
    try:
        service = _service(config)
        service.start()
    except ServiceError as e:
        _fail(e)
        return

    console.print(f"[green]✓[/green] Started {service}")


@app.command("stop")
def stop(config: Path = ConfigOption):
    """Stop the service."""
    try:
        service = _service(config)
        service.stop()
    except ServiceError as e:
        _fail(e)
        return

    console.print(f"[green]✓[/green] Stopped {service}")


@app.command("restart")
def restart(config: Path = ConfigOption):
    """Restart the service."""
    try:
        service = _service(config)
        service.restart()
    except ServiceError as e:
        _fail(e)
        return

    console.print(f"[green]✓[/green] Restarted {service}")


@app.command("run")
def run(config: Path = ConfigOption):
    """Run the configured program in the foreground until SIGTERM or SIGINT."""
    try:
        service = _service(config, with_program=True)
        service.logger().info(f"Running {service}")
        service.run()
    except ServiceError as e:
        _fail(e)


if __name__ == "__main__":
    app()
