"""
KODECHAIN CLI

Post-Quantum wallets (ML-DSA-65) and call-data encoding, offline.

Usage:
    kodechain wallet new [--seed HEX] [--out FILE]   # Create a wallet
    kodechain wallet import KEY [--out FILE]         # Import seed or secret key
    kodechain wallet show [--keyfile FILE]           # Show address
    kodechain wallet sign MESSAGE [--keyfile FILE]   # Sign a message
    kodechain wallet verify PUBKEY MESSAGE SIG       # Verify a signature
    kodechain abi selector SIGNATURE                 # 4-byte selector
    kodechain abi encode SIGNATURE [TYPE:VALUE ...]  # Call data
    kodechain abi decode DATA TYPE... [--strict]     # Decode words
    kodechain hash DATA                              # Sponge digest
"""

from __future__ import annotations
import functools
import json
import logging
import os
from pathlib import Path
from typing import Optional

import click

from kodechain import __version__
from kodechain.abi import (
    UnsignedInteger,
    Address,
    Boolean,
    ByteBlob,
    AbiValue,
    function_selector,
    encode_parameters,
    encode_function_call,
    decode_parameters,
)
from kodechain.accounts import Wallet, verify_signature
from kodechain.config import SDKConfig, setup_logging
from kodechain.core.hexutil import hex_to_bytes
from kodechain.crypto.hash import quantum_hash_hex
from kodechain.errors import KodeChainError

logger = logging.getLogger(__name__)


def _handle_errors(func):
    """Report core errors as click errors instead of tracebacks."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except KodeChainError as e:
            raise click.ClickException(e.message) from e
    return wrapper


def _save_keyfile(wallet: Wallet, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(wallet.to_dict(include_secret=True), indent=2))
    os.chmod(path, 0o600)
    logger.info(f"Keyfile written to {path}")


def _load_keyfile(path: Path) -> Wallet:
    if not path.exists():
        raise click.ClickException(f"Keyfile not found: {path}")
    return Wallet.from_dict(json.loads(path.read_text()))


def _keyfile_path(ctx: click.Context, keyfile: Optional[str]) -> Path:
    if keyfile:
        return Path(keyfile).expanduser()
    return ctx.obj.wallet.keyfile_path


def parse_abi_argument(argument: str) -> AbiValue:
    """
    Parse a TYPE:VALUE command-line argument into a tagged ABI value.

    Types: uint256 (or uint/int/int256), address, address64, bool,
    string, bytes (hex).
    """
    abi_type, sep, raw = argument.partition(":")
    if not sep:
        raise click.BadParameter(f"expected TYPE:VALUE, got {argument!r}")

    abi_type = abi_type.strip().lower()
    if abi_type in ("uint", "uint256", "int", "int256"):
        try:
            return UnsignedInteger(int(raw, 0))
        except ValueError:
            raise click.BadParameter(f"not an integer: {raw!r}")
    if abi_type in ("address", "address64"):
        address = Address(raw)
        if address.abi_type != abi_type:
            raise click.BadParameter(f"{abi_type} width does not match {raw!r}")
        return address
    if abi_type == "bool":
        flag = raw.strip().lower()
        if flag not in ("true", "false", "1", "0"):
            raise click.BadParameter(f"not a boolean: {raw!r}")
        return Boolean(flag in ("true", "1"))
    if abi_type == "string":
        return ByteBlob(raw)
    if abi_type == "bytes":
        return ByteBlob(hex_to_bytes(raw, "bytes"))
    raise click.BadParameter(f"unknown ABI type: {abi_type!r}")


@click.group()
@click.version_option(version=__version__, prog_name="kodechain")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="JSON configuration file")
@click.option("--log-level", default=None, help="Override the configured log level")
@click.pass_context
def cli(ctx, config_path, log_level):
    """KodeChain: post-quantum wallets and call-data encoding"""
    config = SDKConfig.load(config_path) if config_path else SDKConfig()
    if log_level:
        config.log.level = log_level

    errors = config.validate()
    if errors:
        raise click.UsageError("; ".join(errors))

    setup_logging(config.log)
    ctx.obj = config


# === Wallet ===

@cli.group()
def wallet():
    """ML-DSA-65 wallets"""


@wallet.command("new")
@click.option("--seed", default=None, help="32-byte seed as hex (random if omitted)")
@click.option("--out", default=None, type=click.Path(dir_okay=False), help="Write a keyfile")
@_handle_errors
def wallet_new(seed, out):
    """Create a new wallet"""
    w = Wallet.from_seed(seed) if seed else Wallet.create_random()

    click.echo(f"Address: {w.address}")
    if out:
        _save_keyfile(w, Path(out))
        click.echo(f"Keyfile: {out}")


@wallet.command("import")
@click.argument("key")
@click.option("--out", default=None, type=click.Path(dir_okay=False), help="Write a keyfile")
@_handle_errors
def wallet_import(key, out):
    """Import a 32-byte seed or 4032-byte secret key (hex)"""
    w = Wallet.from_private_key(key)

    click.echo(f"Address: {w.address}")
    if out:
        _save_keyfile(w, Path(out))
        click.echo(f"Keyfile: {out}")


@wallet.command("show")
@click.option("--keyfile", default=None, help="Keyfile (default from config)")
@click.pass_context
@_handle_errors
def wallet_show(ctx, keyfile):
    """Show the wallet address"""
    w = _load_keyfile(_keyfile_path(ctx, keyfile))

    click.echo(f"Address: {w.address}")
    click.echo(f"Legacy address: {w.legacy_address}")
    click.echo(f"Public key: {w.get_public_key()}")
    click.echo(f"Can sign: {'yes' if w.can_sign else 'no'}")


@wallet.command("sign")
@click.argument("message")
@click.option("--keyfile", default=None, help="Keyfile (default from config)")
@click.pass_context
@_handle_errors
def wallet_sign(ctx, message, keyfile):
    """Sign MESSAGE and print the hex signature"""
    w = _load_keyfile(_keyfile_path(ctx, keyfile))
    click.echo(w.sign(message))


@wallet.command("verify")
@click.argument("public_key")
@click.argument("message")
@click.argument("signature")
@click.pass_context
@_handle_errors
def wallet_verify(ctx, public_key, message, signature):
    """Verify SIGNATURE over MESSAGE for PUBLIC_KEY"""
    if verify_signature(signature, message, public_key):
        click.echo("valid")
    else:
        click.echo("invalid")
        ctx.exit(1)


# === ABI ===

@cli.group()
def abi():
    """Call-data encoding"""


@abi.command("selector")
@click.argument("signature")
@_handle_errors
def abi_selector(signature):
    """Print the 4-byte selector of SIGNATURE"""
    click.echo(function_selector(signature))


@abi.command("encode")
@click.argument("signature")
@click.argument("params", nargs=-1)
@click.option("--params-only", is_flag=True, help="Omit the 0x + selector prefix")
@_handle_errors
def abi_encode(signature, params, params_only):
    """Encode a call: SIGNATURE followed by TYPE:VALUE arguments"""
    values = [parse_abi_argument(p) for p in params]
    if params_only:
        click.echo(encode_parameters(values))
    else:
        click.echo(encode_function_call(signature, values))


@abi.command("decode")
@click.argument("data")
@click.argument("types", nargs=-1, required=True)
@click.option("--strict", is_flag=True, help="Require exactly one word per type")
@click.option("--lenient", is_flag=True, help="Zero-fill short data, ignore extra words")
@click.pass_context
@_handle_errors
def abi_decode(ctx, data, types, strict, lenient):
    """Decode DATA as consecutive words of TYPES"""
    if strict and lenient:
        raise click.UsageError("--strict and --lenient are mutually exclusive")
    if not strict and not lenient:
        strict = ctx.obj.codec.strict_decode

    for abi_type, value in zip(types, decode_parameters(data, types, strict=strict)):
        if isinstance(value, bytes):
            value = "0x" + value.hex()
        click.echo(f"{abi_type}: {value}")


# === Hash ===

@cli.command("hash")
@click.argument("data")
@_handle_errors
def hash_command(data):
    """Print the sponge digest of DATA (0x hex or text)"""
    click.echo(quantum_hash_hex(data))


def main():
    cli()


if __name__ == "__main__":
    main()
