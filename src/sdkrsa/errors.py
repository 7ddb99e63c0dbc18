"""Exception hierarchy for SDK RSA.

Every error raised on purpose by the package derives from `SdkRsaError`, and additionally from the built-in
exception that best describes it, so callers catching `ValueError`, `RuntimeError` or `OSError` keep working.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class SdkRsaError(Exception):
    """Base class for all SDK RSA errors."""


class GenerationError(SdkRsaError, RuntimeError):
    """The key provider failed or returned unusable key material."""


class EncodingError(SdkRsaError, ValueError):
    """Degenerate key material was handed to an encoder."""


class DecodeError(SdkRsaError, ValueError):
    """A persisted key blob is malformed."""


class KeyStoreError(SdkRsaError, OSError):
    """Reading or writing a key resource failed for a reason other than "not found"."""
