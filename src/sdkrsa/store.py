"""File-backed persistence of SDK-format keys.

A key name maps onto two files in the store directory, `<keyname>.pri` and `<keyname>.pub`. Key texts are written
and read verbatim; interpreting them is left to `sdkrsa.codec`.

Typical usage example:

    store = KeyStore("keys")
    store.generate_and_save("device01", 2048)
    for lookup in store.load("device01", want_public=True):
        print(lookup.text if lookup.found else f"Public key not found: {lookup.path}")
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import os
import pathlib
import tempfile
import typing

from sdkrsa import keygen
from sdkrsa.errors import KeyStoreError

PRIVATE_SUFFIX = ".pri"
PUBLIC_SUFFIX = ".pub"
SUFFIXES = {"PRIVATE": PRIVATE_SUFFIX, "PUBLIC": PUBLIC_SUFFIX}
# Private keys keep the owner-only mode mkstemp creates them with.
FILE_MODES = {"PRIVATE": 0o600, "PUBLIC": 0o644}

logger = logging.getLogger(__name__)


class KeyLookup(typing.NamedTuple):
    """Outcome of reading one key resource.

    Attributes:
        kind: "PUBLIC" or "PRIVATE".
        path: The resource that was read.
        text: The key text, or None if the resource does not exist.
    """
    kind: str
    path: pathlib.Path
    text: str | None

    @property
    def found(self) -> bool:
        return self.text is not None


class KeyStore:
    """Stores key pairs as `.pri`/`.pub` file pairs inside one directory.

    No locking is done. Writers racing on the same key name end with whichever pair was moved into place last,
    and readers never observe a partially written file.

    Attributes:
        directory: Directory holding the key files.
    """

    def __init__(self, directory: str | os.PathLike = ".") -> None:
        self.directory = pathlib.Path(directory)

    def path_for(self, keyname: str, kind: str) -> pathlib.Path:
        """Path of the `kind` ("PRIVATE" or "PUBLIC") resource belonging to `keyname`."""
        return self.directory / f"{keyname}{SUFFIXES[kind]}"

    def _write_temp(self, target: pathlib.Path, text: str, mode: int) -> pathlib.Path:
        """Stage `text` in a temporary sibling of `target`, removing it again if the write fails."""
        fd, name = tempfile.mkstemp(dir=target.parent, prefix=f".{target.name}.", suffix=".tmp")
        staged = pathlib.Path(name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.chmod(staged, mode)
        except BaseException:
            staged.unlink(missing_ok=True)
            raise
        return staged

    def save(self, keyname: str, private_text: str, public_text: str) -> tuple[pathlib.Path, pathlib.Path]:
        """Writes both halves of a key pair, replacing any existing files.

        Both texts are staged in temporary files first and only moved into place once both are on disk, so a failed
        write leaves the previous files (or no files) behind. The private file is readable by its owner only, the
        public file by everyone.

        Args:
            keyname: Name of the key pair.
            private_text: Encoded private key.
            public_text: Encoded public key.

        Returns:
            Tuple of (private key path, public key path).

        Raises:
            KeyStoreError: If either file could not be written.
        """
        targets = (self.path_for(keyname, "PRIVATE"), self.path_for(keyname, "PUBLIC"))
        staged: list[pathlib.Path] = []
        try:
            targets[0].parent.mkdir(parents=True, exist_ok=True)
            for kind, target, text in zip(("PRIVATE", "PUBLIC"), targets, (private_text, public_text)):
                staged.append(self._write_temp(target, text, FILE_MODES[kind]))
            for tmp, target in zip(staged, targets):
                os.replace(tmp, target)
        except OSError as exc:
            for tmp in staged:
                tmp.unlink(missing_ok=True)
            raise KeyStoreError(f"Could not save key pair {keyname!r}: {exc}") from exc
        logger.debug("Saved key pair %r to %s and %s.", keyname, *targets)
        return targets

    def load(self, keyname: str, want_private: bool = False, want_public: bool = False) -> list[KeyLookup]:
        """Reads the requested halves of a key pair.

        A missing file is a normal outcome and is reported through `KeyLookup.found`. Public comes before private in
        the result.

        Args:
            keyname: Name of the key pair.
            want_private: Whether to read the private key.
            want_public: Whether to read the public key.

        Returns:
            One lookup per requested kind. An empty list means nothing was requested and no file was touched.

        Raises:
            KeyStoreError: If an existing file could not be read.
        """
        kinds = [kind for kind, wanted in (("PUBLIC", want_public), ("PRIVATE", want_private)) if wanted]
        results = []
        for kind in kinds:
            path = self.path_for(keyname, kind)
            try:
                text = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                logger.info("%s key %r not found at %s.", kind.capitalize(), keyname, path)
                text = None
            except (OSError, UnicodeDecodeError) as exc:
                raise KeyStoreError(f"Could not read {path}: {exc}") from exc
            results.append(KeyLookup(kind, path, text))
        return results

    def generate_and_save(self,
                          keyname: str,
                          bit_length: int = keygen.DEFAULT_BITS) -> tuple[pathlib.Path, pathlib.Path]:
        """Generates a fresh key pair and saves it under `keyname`.

        Nothing is written when generation or encoding fails.

        Returns:
            Tuple of (private key path, public key path).
        """
        private_text, public_text = keygen.generate(bit_length)
        return self.save(keyname, private_text, public_text)
