"""CLI command for encoding text or files to Base64URL.

Usage:
    b64url encode hello
    b64url encode --file token.bin
    echo -n hello | b64url encode
"""

from __future__ import annotations

from pathlib import Path

import typer

from b64url.core.codec import encode_url_base64


def encode(
    value: str | None = typer.Argument(
        None,
        help="UTF-8 text to encode; omit or pass '-' to read stdin",
    ),
    file: Path | None = typer.Option(
        None,
        "--file",
        "-i",
        help="Encode the raw bytes of this file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
) -> None:
    """Encode bytes as URL-safe Base64 without padding."""
    if file is not None:
        if value is not None:
            typer.echo("Error: pass either VALUE or --file, not both", err=True)
            raise typer.Exit(code=1)
        data = file.read_bytes()
    elif value is None or value == "-":
        data = typer.get_binary_stream("stdin").read()
    else:
        data = value.encode("utf-8")

    typer.echo(encode_url_base64(data))
