"""Click CLI for tiercache — inspect and manage the on-disk cache."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

import click
from PIL import Image, UnidentifiedImageError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tiercache.cache.keys import hash_key
from tiercache.cache.manager import CacheCoordinator
from tiercache.codecs import BytesCodec
from tiercache.errors.exceptions import CacheConfigError

console = Console()
error_console = Console(stderr=True)

_PACKAGE_LOGGER = "tiercache"
_VERBOSITY_KEY = "tiercache.verbosity"


def _setup_logging(verbosity: int) -> None:
    """Configure logging based on verbosity level.

    Without -v the package level comes from the log_level setting, see _open.
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    if verbosity:
        logging.getLogger(_PACKAGE_LOGGER).setLevel(level)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
    )


def _open(ctx: click.Context) -> CacheCoordinator:
    from tiercache.core import create_coordinator, resolve_config

    try:
        config = resolve_config(**ctx.obj)
        if not ctx.meta.get(_VERBOSITY_KEY):
            logging.getLogger(_PACKAGE_LOGGER).setLevel(config.log_level.value)
        return create_coordinator(config)
    except CacheConfigError as e:
        error_console.print(f"[red]Configuration error:[/red] {e.message}")
        sys.exit(1)


def _load_payload(path: Path, codec: str) -> Any:
    if codec == "bytes":
        return path.read_bytes()
    try:
        with Image.open(path) as img:
            img.load()
            return img.copy()
    except (UnidentifiedImageError, OSError) as e:
        error_console.print(f"[red]Error:[/red] cannot read image {path}: {e}")
        sys.exit(1)


@click.group()
@click.version_option(package_name="tiercache")
@click.option(
    "--dir",
    "directory",
    type=click.Path(),
    default=None,
    help="Cache directory (overrides config).",
)
@click.option(
    "--codec",
    type=click.Choice(["image", "bytes"]),
    default=None,
    help="Payload codec (overrides config).",
)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug).")
@click.pass_context
def cli(ctx: click.Context, directory: str | None, codec: str | None, verbose: int) -> None:
    """tiercache — two-tier memory + disk object cache."""
    _setup_logging(verbose)
    ctx.meta[_VERBOSITY_KEY] = verbose
    ctx.obj = {"directory": directory, "codec": codec}


@cli.command()
@click.argument("key")
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def put(ctx: click.Context, key: str, source: str) -> None:
    """Store the contents of SOURCE under KEY."""
    cache = _open(ctx)
    codec = ctx.obj.get("codec") or _codec_name(cache)
    payload = _load_payload(Path(source), codec)
    asyncio.run(cache.put(key, payload))
    console.print(f"[green]Stored[/green] {key} → {hash_key(key)}")


@cli.command()
@click.argument("key")
@click.option("-o", "--output", type=click.Path(dir_okay=False), help="Write the payload here.")
@click.pass_context
def get(ctx: click.Context, key: str, output: str | None) -> None:
    """Look up KEY and optionally write the payload to a file."""
    cache = _open(ctx)
    obj = asyncio.run(cache.get(key))
    if obj is None:
        error_console.print(f"[yellow]Miss:[/yellow] {key}")
        sys.exit(1)

    if isinstance(obj, Image.Image):
        summary = f"image {obj.width}x{obj.height} ({obj.mode})"
        if output:
            obj.save(output)
    else:
        data = obj if isinstance(obj, bytes) else bytes(obj)
        summary = f"{len(data):,} bytes"
        if output:
            Path(output).write_bytes(data)

    console.print(f"[green]Hit:[/green] {key} — {summary}")
    if output:
        console.print(f"[green]Written to {output}[/green]")


@cli.command()
@click.argument("key")
@click.pass_context
def remove(ctx: click.Context, key: str) -> None:
    """Remove KEY from the cache."""
    cache = _open(ctx)
    asyncio.run(cache.remove(key))
    console.print(f"[green]Removed[/green] {key}")


@cli.command()
@click.confirmation_option(prompt="Are you sure you want to clear the cache?")
@click.pass_context
def clear(ctx: click.Context) -> None:
    """Clear all cached data."""
    cache = _open(ctx)
    asyncio.run(cache.clear())
    console.print("[green]Cache cleared.[/green]")


@cli.command()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Show cache statistics."""
    cache = _open(ctx)
    snapshot = asyncio.run(cache.stats())

    table = Table(title="Cache Statistics", show_header=True)
    table.add_column("Metric", style="cyan")
    table.add_column("Value")

    directory = getattr(cache.disk, "directory", None)
    if directory is not None:
        table.add_row("Directory", str(directory))
    table.add_row("Disk entries", str(snapshot.disk_entries))
    table.add_row("Memory entries", str(snapshot.memory_entries))
    table.add_row("Memory cost (MB)", f"{snapshot.memory_cost_mb:.1f}")
    table.add_row("Hits", str(snapshot.hits))
    table.add_row("Misses", str(snapshot.misses))
    table.add_row("Hit rate", f"{snapshot.hit_rate:.1%}")

    console.print(table)


@cli.command("hash")
@click.argument("key")
def hash_command(key: str) -> None:
    """Print the storage token (filename) for KEY."""
    console.print(hash_key(key))


def _codec_name(cache: CacheCoordinator) -> str:
    codec = getattr(cache.disk, "codec", None)
    return "bytes" if isinstance(codec, BytesCodec) else "image"


def main() -> None:
    """Entry point for the CLI."""
    cli()
