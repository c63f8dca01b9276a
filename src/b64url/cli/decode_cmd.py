"""CLI command for decoding Base64URL text.

Usage:
    b64url decode _-__
    b64url decode --strict aGVsbG8
    b64url decode --policy truncate --format json AAAAAB
    b64url decode --output token.bin < token.txt
    b64url decode -- -AAA
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import typer

from b64url.core.codec import BoundaryPolicy, InvalidBase64Url
from b64url.observability.logging import get_logger

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    HEX = "hex"
    JSON = "json"
    RAW = "raw"


def decode(
    value: str | None = typer.Argument(
        None,
        help="Base64URL text to decode; omit or pass '-' to read stdin",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        "-s",
        help="Reject non-alphabet characters and non-canonical input",
    ),
    policy: BoundaryPolicy | None = typer.Option(
        None,
        "--policy",
        "-p",
        help="Handling of an incomplete final chunk (default from B64URL_BOUNDARY_POLICY)",
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.HEX,
        "--format",
        "-f",
        help="Output format: hex, json, raw",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the decoded bytes to this file instead of stdout",
        dir_okay=False,
        writable=True,
    ),
) -> None:
    """Decode URL-safe Base64 text (no padding) into bytes."""
    from rich.console import Console
    from rich.markup import escape

    from b64url.core.codec import decode as decode_value

    console = Console()
    err_console = Console(stderr=True)

    if value is None or value == "-":
        value = typer.get_text_stream("stdin").read()
    text = value.strip()

    try:
        data = decode_value(text, strict=True if strict else None, policy=policy)
    except InvalidBase64Url as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e

    logger.info("Decoded %d symbols into %d bytes", len(text), len(data))

    if output is not None:
        output.write_bytes(data)
        console.print(f"[green]Wrote {len(data)} bytes[/green] to {output}")
        return

    if output_format == OutputFormat.RAW:
        typer.echo(data, nl=False)
    elif output_format == OutputFormat.JSON:
        typer.echo(json.dumps({"length": len(data), "bytes": list(data)}))
    else:
        typer.echo(data.hex())
