"""Command-line interface for notecrypt."""
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .crypto import encrypt_text
from .markers import (
    FORMAT_PREFIX,
    format_secret,
    find_secrets,
    decrypt_selection,
    decrypt_document,
)
from .frame import is_enc0_token
from .types import DecryptionError, EncryptionError, EmptyPasswordError

logger = logging.getLogger(__name__)

password_option = click.option(
    "--password",
    envvar="NOTECRYPT_PASSWORD",
    prompt=True,
    hide_input=True,
    help="Password (or set NOTECRYPT_PASSWORD)",
)
prefix_option = click.option("--prefix", default=FORMAT_PREFIX, show_default=True, help="Marker prefix")


def _read_input(value: Optional[str]) -> str:
    if value is not None:
        return value
    return sys.stdin.read().rstrip("\n")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """Encrypt and decrypt ENC0 secrets in notes."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command("encrypt")
@click.argument("text", required=False)
@password_option
@prefix_option
@click.option("--raw", is_flag=True, help="Print the bare token instead of a marker")
def encrypt_cmd(text: Optional[str], password: str, prefix: str, raw: bool):
    """Encrypt TEXT (or stdin) into a secret marker."""
    if not password.strip():
        raise click.ClickException(str(EmptyPasswordError()))

    try:
        token = encrypt_text(_read_input(text), password)
    except EncryptionError as e:
        logger.debug("Encryption failed: %s", e)
        raise click.ClickException("Failed to encrypt")
    click.echo(token if raw else format_secret(token, prefix))


@cli.command("decrypt")
@click.argument("token", required=False)
@password_option
@prefix_option
def decrypt_cmd(token: Optional[str], password: str, prefix: str):
    """Decrypt TOKEN, a marker, or stdin."""
    try:
        plaintext = decrypt_selection(_read_input(token), password, prefix)
    except EmptyPasswordError as e:
        raise click.ClickException(str(e))
    except DecryptionError as e:
        logger.debug("Decryption failed: %s", type(e).__name__)
        click.echo("Failed to decrypt", err=True)
        sys.exit(1)
    click.echo(plaintext)


@cli.command("scan")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@prefix_option
def scan_cmd(path: Path, prefix: str):
    """List the secret markers in a note."""
    document = path.read_text(encoding="utf-8")
    markers = find_secrets(document, prefix)

    for marker in markers:
        line = document.count("\n", 0, marker.start) + 1
        column = marker.start - (document.rfind("\n", 0, marker.start) + 1) + 1
        note = "" if is_enc0_token(marker.token) else "\t(not an ENC0 token)"
        click.echo(f"{line}:{column}\t{marker.token[:16]}...{note}")

    click.echo(f"{len(markers)} secret(s) found")


@cli.command("reveal")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@password_option
@prefix_option
def reveal_cmd(path: Path, password: str, prefix: str):
    """Print a note with every decryptable secret replaced by its text."""
    document = path.read_text(encoding="utf-8")
    try:
        click.echo(decrypt_document(document, password, prefix), nl=False)
    except EmptyPasswordError as e:
        raise click.ClickException(str(e))


def main():
    cli()


if __name__ == "__main__":
    main()
