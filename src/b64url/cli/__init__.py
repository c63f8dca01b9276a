"""CLI commands for b64url.

Provides command-line interface using Typer:
- b64url decode: Decode Base64URL text to bytes
- b64url encode: Encode text or a file to Base64URL
- b64url alphabet: Show the symbol/index table

Usage:
    b64url --help
    b64url decode _-__
    b64url decode --strict --format json aGVsbG8
    echo -n hello | b64url encode
    b64url alphabet
"""

import typer

from b64url.cli.alphabet_cmd import show_alphabet
from b64url.cli.decode_cmd import decode
from b64url.cli.encode_cmd import encode
from b64url.observability.logging import configure_logging

# Main CLI application
app = typer.Typer(
    name="b64url",
    help="b64url: URL-safe Base64 decoding tools",
    no_args_is_help=True,
)

app.command("decode")(decode)
app.command("encode")(encode)
app.command("alphabet")(show_alphabet)


@app.callback()
def callback(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Log level: debug, info, warning, error (default from B64URL_LOG_LEVEL)",
    ),
    json_logs: bool | None = typer.Option(
        None,
        "--json-logs/--console-logs",
        help="Emit log records as JSON or console lines (default from B64URL_LOG_JSON)",
    ),
) -> None:
    """b64url: URL-safe Base64 decoding tools."""
    from b64url.config import settings

    try:
        configure_logging(
            json_format=settings.log_json if json_logs is None else json_logs,
            level=log_level or settings.log_level,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
