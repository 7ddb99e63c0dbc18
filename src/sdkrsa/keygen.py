"""Key generation, delegating the number theory to python-rsa.

Prime search and primality testing are not done here. `rsa.newkeys` returns structured key objects, so the modulus
and exponents are read straight from their fields and no intermediate key file is ever written.

Typical usage example:

    private_text, public_text = generate(2048)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

import rsa

from sdkrsa.codec import encode_private
from sdkrsa.codec import encode_public
from sdkrsa.codec import KeyMaterial
from sdkrsa.codec import PUBLIC_EXPONENT
from sdkrsa.errors import GenerationError

DEFAULT_BITS: int = 2048

logger = logging.getLogger(__name__)


def _validate_material(material: KeyMaterial) -> None:
    """Check the provider output against what the SDK format can carry.

    Raises:
        GenerationError: If an exponent is out of range or the public exponent is not 65537.
    """
    n, d, e = material.modulus, material.private_exponent, material.public_exponent
    if e != PUBLIC_EXPONENT:
        raise GenerationError(f"Key provider returned public exponent {e}, only {PUBLIC_EXPONENT} is supported.")
    if not 0 < e < n:
        raise GenerationError("Key provider returned a public exponent outside (0, n).")
    if not 0 < d < n:
        raise GenerationError("Key provider returned a private exponent outside (0, n).")


def generate_material(bit_length: int = DEFAULT_BITS) -> KeyMaterial:
    """Requests fresh RSA key material from the provider.

    Args:
        bit_length: Requested modulus size in bits.

    Returns:
        The modulus, private exponent and public exponent of a new key.

    Raises:
        GenerationError: If `bit_length` is not a positive integer, the provider fails, or its output is unusable.
    """
    if isinstance(bit_length, bool) or not isinstance(bit_length, int) or bit_length <= 0:
        raise GenerationError(f"Bit length must be a positive integer, got {bit_length!r}.")
    logger.debug("Requesting a %d-bit RSA key from the provider.", bit_length)
    try:
        _, priv = rsa.newkeys(bit_length, exponent=PUBLIC_EXPONENT)
    except (ValueError, ArithmeticError) as exc:
        raise GenerationError(f"Key provider failed to generate a {bit_length}-bit key: {exc}") from exc
    try:
        material = KeyMaterial(modulus=priv.n, private_exponent=priv.d, public_exponent=priv.e)
    except AttributeError as exc:
        raise GenerationError("Key provider output lacks a required key field.") from exc
    _validate_material(material)
    logger.debug("Provider returned a %d-bit modulus.", material.modulus.bit_length())
    return material


def generate(bit_length: int = DEFAULT_BITS) -> tuple[str, str]:
    """Generates a key pair and encodes both halves.

    Args:
        bit_length: Requested modulus size in bits. Defaults to 2048.

    Returns:
        Tuple of (private key text, public key text).

    Raises:
        GenerationError: If key material could not be obtained.
        EncodingError: If the key material is degenerate.
    """
    material = generate_material(bit_length)
    return encode_private(material), encode_public(material.modulus)
