#!/usr/bin/env python3
"""
Generate a random signing secret for JWT_SECRET.

Usage:
    python generate_secret.py                  # 64 random bytes, hex encoded
    python generate_secret.py --bytes 48 --format base64
    python generate_secret.py --file .jwt_secret
    python generate_secret.py --silent         # Print the secret only
"""

import argparse
import base64
import os
import secrets
import sys
from pathlib import Path

from rich.console import Console

MIN_BYTES = 32
MAX_BYTES = 1024
DEFAULT_BYTES = 64

console = Console(stderr=True)


def generate_secret(num_bytes: int = DEFAULT_BYTES, encoding: str = "hex") -> str:
    """
    Return ``num_bytes`` of CSPRNG output encoded as text.

    Raises:
        ValueError: If the size is out of range or the encoding is unknown
    """
    if not MIN_BYTES <= num_bytes <= MAX_BYTES:
        raise ValueError(f"Secret size must be between {MIN_BYTES} and {MAX_BYTES} bytes")

    raw = secrets.token_bytes(num_bytes)
    if encoding == "hex":
        return raw.hex()
    if encoding == "base64":
        return base64.b64encode(raw).decode("ascii")
    raise ValueError(f"Unknown encoding: {encoding}")


def write_secret(path: Path, secret: str) -> None:
    """Write the secret readable by the owner only."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "w") as f:
        f.write(secret + "\n")
    os.chmod(path, 0o600)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate a JWT signing secret")
    parser.add_argument(
        "-b", "--bytes",
        type=int,
        default=DEFAULT_BYTES,
        help=f"Number of random bytes ({MIN_BYTES}-{MAX_BYTES}, default {DEFAULT_BYTES})",
    )
    parser.add_argument(
        "-f", "--format",
        choices=["hex", "base64"],
        default="hex",
        help="Output encoding",
    )
    parser.add_argument("--file", type=Path, help="Write the secret to this file instead of stdout")
    parser.add_argument("-s", "--silent", action="store_true", help="Only output the secret")
    args = parser.parse_args(argv)

    try:
        secret = generate_secret(args.bytes, args.format)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        return 1

    if args.file:
        write_secret(args.file, secret)
        if not args.silent:
            console.print(f"[green]✓[/green] Secret written to {args.file} (mode 600)")
        return 0

    if not args.silent:
        console.print(f"[bold]{args.bytes}-byte {args.format} secret[/bold] (add to .env as JWT_SECRET):")
    print(secret)
    return 0


if __name__ == "__main__":
    sys.exit(main())
