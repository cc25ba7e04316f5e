"""Main CLI entry point for Cluster Reflector."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING

import click
from rich.console import Console

from reflector import __version__
from reflector.core.exceptions import ReflectorError
from reflector.interfaces.exceptions import ProviderError

if TYPE_CHECKING:
    from reflector.core.config import ReflectorConfig
    from reflector.interfaces.cluster_provider import ClusterProvider
    from reflector.interfaces.cluster_types import ProviderCluster

console = Console()
err_console = Console(stderr=True)


class ReflectorContext:
    """Shared context for CLI commands with lazy initialization."""

    def __init__(self, config_path: str | None, subscription_id: str | None, log_level: str):
        """Initialize context.

        Args:
            config_path: Path to configuration file (optional)
            subscription_id: Subscription id overriding the configuration
            log_level: Log level override
        """
        self.config_path = config_path
        self.subscription_id = subscription_id
        self.log_level = log_level
        self._config: ReflectorConfig | None = None
        self._provider: ClusterProvider | None = None

    @property
    def config(self) -> ReflectorConfig:
        """Get or create config lazily."""
        if self._config is None:
            from reflector.core.config import ReflectorConfig

            if self.config_path:
                data = ReflectorConfig.from_file(self.config_path).to_dict()
            elif self.subscription_id:
                data = {"azure": {"subscription_id": self.subscription_id}}
            else:
                raise click.UsageError("either --config or --subscription-id is required")

            if self.subscription_id:
                data.setdefault("azure", {})["subscription_id"] = self.subscription_id
            if self.log_level:
                data.setdefault("logging", {})["level"] = self.log_level.upper()

            self._config = ReflectorConfig.from_dict(data)
        return self._config

    @property
    def provider(self) -> ClusterProvider:
        """Get or create the cluster provider lazily."""
        if self._provider is None:
            from reflector.adapters import create_provider
            from reflector.utils.logging import setup_logging

            logging_config = self.config.logging
            setup_logging(
                level=logging_config.level,
                format=logging_config.format,
                output=logging_config.output,
            )
            self._provider = create_provider(self.config)
        return self._provider

    def discover(self) -> list[ProviderCluster]:
        """Run one discovery, exiting with status 1 on failure."""
        try:
            return asyncio.run(self.provider.list_clusters())
        except (ProviderError, ReflectorError) as e:
            err_console.print(f"[red]Error: {e}[/red]")
            raise SystemExit(1) from e


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file",
)
@click.option(
    "--subscription-id",
    envvar="REFLECTOR_SUBSCRIPTION_ID",
    default=None,
    help="Azure subscription id (overrides the configuration file)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level",
)
@click.pass_context
def cli(
    ctx: click.Context, config: str | None, subscription_id: str | None, log_level: str | None
) -> None:
    """Cluster Reflector - discover managed Kubernetes clusters and their kubeconfigs."""
    ctx.obj = ReflectorContext(
        config_path=config, subscription_id=subscription_id, log_level=log_level
    )


@cli.command(name="list")
@click.option("--format", type=click.Choice(["table", "json"]), default="table")
@click.pass_context
def list_clusters(ctx: click.Context, format: str) -> None:
    """List discovered clusters."""
    clusters = ctx.obj.discover()

    if format == "json":
        rows = [
            {
                "name": c.name,
                "server": c.kubeconfig.server() if c.kubeconfig else None,
                "namespace": c.kubeconfig.default_namespace() if c.kubeconfig else None,
                "kubeconfig": c.kubeconfig is not None,
            }
            for c in clusters
        ]
        click.echo(json.dumps(rows, indent=2))
        return

    if not clusters:
        console.print("[yellow]No clusters found[/yellow]")
        return

    from rich.table import Table

    table = Table(title=f"Discovered Clusters ({len(clusters)} total)")
    table.add_column("Name", style="cyan")
    table.add_column("Server", style="blue")
    table.add_column("Namespace", style="magenta")
    table.add_column("Kubeconfig", style="bold")

    for cluster in clusters:
        if cluster.kubeconfig is None:
            table.add_row(cluster.name, "-", "-", "[yellow]missing[/yellow]")
            continue
        table.add_row(
            cluster.name,
            cluster.kubeconfig.server() or "-",
            cluster.kubeconfig.default_namespace(),
            "[green]yes[/green]",
        )

    console.print(table)


@cli.command()
@click.option(
    "--output-dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory to write one kubeconfig per cluster into",
)
@click.pass_context
def export(ctx: click.Context, output_dir: str) -> None:
    """Write a kubeconfig file for every discovered cluster."""
    clusters = ctx.obj.discover()
    target = Path(output_dir).expanduser()

    written = 0
    for cluster in clusters:
        if cluster.kubeconfig is None:
            console.print(f"[yellow]Skipping {cluster.name}: no kubeconfig returned[/yellow]")
            continue
        path = cluster.kubeconfig.write(target / f"{cluster.name}.yaml")
        console.print(f"[green]✓[/green] {cluster.name} -> {path}")
        written += 1

    console.print(f"\nWrote {written} of {len(clusters)} kubeconfigs to {target}")


if __name__ == "__main__":
    cli()
