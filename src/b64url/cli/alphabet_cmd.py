"""CLI command for printing the Base64URL alphabet table."""

from __future__ import annotations

from b64url.core.alphabet import ALPHABET, REVERSE_LOOKUP


def show_alphabet() -> None:
    """Show every alphabet symbol with its index, character code and bits."""
    from rich.console import Console
    from rich.table import Table

    console = Console()

    table = Table(title="Base64URL alphabet")
    table.add_column("Index", justify="right")
    table.add_column("Symbol", style="cyan")
    table.add_column("Code", justify="right")
    table.add_column("Bits")

    for symbol in ALPHABET:
        code = ord(symbol)
        index = REVERSE_LOOKUP[code]
        table.add_row(str(index), symbol, str(code), f"{index:06b}")

    console.print(table)
