"""The Command Line Interface for SDK RSA.

Two subcommands: `genrsa` creates a key pair and stores it as `KEYNAME.pri`/`KEYNAME.pub`, and `getrsa` prints
stored keys back. A missing key is reported with a notice, not an error.

Typical usage example:

    sdkrsa genrsa device01 --bits 2048
    sdkrsa getrsa device01 --pub --pri
    OR
    python -m sdkrsa getrsa device01 --pub
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import argparse
import logging
import pathlib
import sys
import typing

import sdkrsa
from sdkrsa import codec
from sdkrsa.errors import SdkRsaError
from sdkrsa.keygen import DEFAULT_BITS
from sdkrsa.store import KeyStore


class HelpData(typing.NamedTuple):
    description: str
    format: typing.Type = str
    default: typing.Any = None


help_dict: dict[str, HelpData] = {
    "genrsa":
        HelpData("Generate a new RSA key pair."),
    "getrsa":
        HelpData("Print an RSA key in SDK format."),
    "keyname":
        HelpData("Name of the key (KEYNAME.pri and KEYNAME.pub)."),
    "bits":
        HelpData(
            description="Key size (in bits).",
            format=int,
            default=DEFAULT_BITS,
        ),
    "directory":
        HelpData(
            description="Directory holding the key files.",
            format=pathlib.Path,
            default=pathlib.Path("."),
        ),
    "pub":
        HelpData("Print the public key."),
    "pri":
        HelpData("Print the private key."),
    "validate":
        HelpData("Decode every printed key and fail if it is malformed."),
}

keyfiles = argparse.ArgumentParser(add_help=False)
keyfiles.add_argument("keyname", type=help_dict["keyname"].format, help=help_dict["keyname"].description)
keyfiles.add_argument("--directory",
                      "-d",
                      type=help_dict["directory"].format,
                      default=help_dict["directory"].default,
                      help=help_dict["directory"].description)
corep = argparse.ArgumentParser(prog="sdkrsa")
corep.add_argument("--version", "-v", action="version", version=f"%(prog)s {sdkrsa.__version__}")
corep.add_argument("--verbose", action="store_true", help="Enable debug logging")
commands = corep.add_subparsers(dest="subcommand", title="Subcommands", required=True)

genrsa = commands.add_parser("genrsa", parents=[keyfiles], help=help_dict["genrsa"].description)
genrsa.add_argument("--bits",
                    "-b",
                    type=help_dict["bits"].format,
                    default=help_dict["bits"].default,
                    help=help_dict["bits"].description)

getrsa = commands.add_parser("getrsa", parents=[keyfiles], help=help_dict["getrsa"].description)
getrsa.add_argument("--pub", "-b", action="store_true", help=help_dict["pub"].description)
getrsa.add_argument("--pri", "-p", action="store_true", help=help_dict["pri"].description)
getrsa.add_argument("--validate", action="store_true", help=help_dict["validate"].description)


def generate_keys(store: KeyStore, keyname: str, bits: int) -> None:
    """Generate, store and announce a key pair."""
    pri_path, pub_path = store.generate_and_save(keyname, bits)
    print("Generated RSA key pair:")
    print(f"  Private key: {pri_path}")
    print(f"  Public key: {pub_path}")


def get_key(store: KeyStore, keyname: str, pub: bool, pri: bool, validate: bool = False) -> None:
    """Print the requested keys, or a notice for each one that does not exist."""
    lookups = store.load(keyname, want_private=pri, want_public=pub)
    if not lookups:
        print("Please specify either --pub or --pri flag")
        return
    for lookup in lookups:
        if not lookup.found:
            print(f"{lookup.kind.capitalize()} key not found: {lookup.path}")
            continue
        if validate:
            if lookup.kind == "PRIVATE":
                codec.decode_private(lookup.text)
            else:
                codec.decode_public(lookup.text)
        print(lookup.text)


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the subcommand."""
    args = corep.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")
    store = KeyStore(args.directory)
    try:
        match args.subcommand:
            case "genrsa":
                generate_keys(store, args.keyname, args.bits)
            case "getrsa":
                get_key(store, args.keyname, args.pub, args.pri, args.validate)
    except SdkRsaError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
