from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from hillcracker.classical import register_all
from hillcracker.classical.polygraphic.digrams import top_digrams
from hillcracker.core.config import DEFAULT_GUESS, DEFAULT_MODULUS, DEFAULT_TOP_DIGRAMS, AttackConfig
from hillcracker.core.errors import HillCrackerError
from hillcracker.core.registry import decrypt_known, encrypt_known, get_plugin, list_plugins
from hillcracker.core.utils import read_ciphertext, write_plaintext

app = typer.Typer(help="HillCracker CLI: frequency attack on the 2x2 Hill cipher.")


@app.callback()
def _init():
    # Register plugins exactly once per CLI run
    register_all()


def _fail(message: str) -> None:
    typer.echo(f"[x] {message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def plugins():
    """List all registered cipher plugins."""
    for name in list_plugins():
        typer.echo(name)


@app.command()
def digrams(
    path: Path = typer.Argument(..., help="File holding the ciphertext."),
    top: int = typer.Option(DEFAULT_TOP_DIGRAMS, "--top", "-t", min=1),
):
    """Show the most frequent ciphertext digrams."""
    try:
        ranked = top_digrams(read_ciphertext(path), top)
    except HillCrackerError as e:
        _fail(str(e))
    for dg, count in ranked:
        typer.echo(f"{dg}  {count}")


@app.command()
def crack(
    path: Path = typer.Argument(..., help="File holding the ciphertext."),
    output: Path = typer.Option(Path("result.txt"), "--output", "-o", help="Where to write the plaintext."),
    guess: str = typer.Option(DEFAULT_GUESS, "--guess", "-g", help="Plaintext digram hypothesis, e.g. THHEINERAN."),
    top: int = typer.Option(DEFAULT_TOP_DIGRAMS, "--top", "-t", min=1, help="How many ciphertext digrams to match against."),
    modulus: int = typer.Option(DEFAULT_MODULUS, "--modulus", "-m", min=2, max=26),
    workers: int = typer.Option(1, "--workers", "-w", min=1, help="Processes for the key search."),
    time_limit: Optional[float] = typer.Option(None, "--time-limit", help="Give up after this many seconds."),
    invertible_only: bool = typer.Option(False, "--invertible-only", help="Skip keys with no inverse."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Recover the key from digram frequencies and decrypt the whole file."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = AttackConfig(
            modulus=modulus,
            top_digrams=top,
            guess=guess,
            workers=workers,
            time_limit=time_limit,
            invertible_only=invertible_only,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))

    typer.echo(f"[-] Reading {path}")
    try:
        ciphertext = read_ciphertext(path)
        typer.echo(f"[-] Top digrams: {top_digrams(ciphertext, config.top_digrams)}")

        typer.echo("[-] Searching for encryption key...")
        hill = get_plugin("hill")
        if config.workers == 1:
            with typer.progressbar(length=config.modulus, label="    key space") as bar:
                result = hill.crack(ciphertext, config, progress=bar.update)
        else:
            result = hill.crack(ciphertext, config)
    except HillCrackerError as e:
        _fail(str(e))

    typer.echo("[!] Encryption key found!")
    typer.echo(f"[-] Encryption key: {result.key!r}")
    typer.echo(f"[-] Decryption key: {result.decryption_key!r}")
    typer.echo(f"[-] chi2 vs English: {result.score:.2f}")

    write_plaintext(output, result.plaintext)
    typer.echo(f"Decrypted text written to {output}")


@app.command()
def decrypt(
    cipher: str = typer.Option("hill", "--cipher", "-c", help="Cipher plugin name."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key matrix as a,b,c,d (row-major)."),
    text: str = typer.Argument(..., help="Ciphertext to decrypt."),
):
    """Decrypt when you already have the key."""
    try:
        pt = decrypt_known(cipher, text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(pt)


@app.command()
def encrypt(
    cipher: str = typer.Option("hill", "--cipher", "-c", help="Cipher plugin name."),
    key: Optional[str] = typer.Option(None, "--key", "-k", help="Key matrix as a,b,c,d (row-major)."),
    text: str = typer.Argument(..., help="Plaintext to encrypt."),
):
    """Encrypt with a known key (odd-length input is padded with X)."""
    try:
        ct = encrypt_known(cipher, text, key)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    typer.echo(ct)


def main():
    app()


if __name__ == "__main__":
    main()
