"""RSA key pairs in the simplified SDK key format.

Generates RSA key pairs through python-rsa and stores them as a pair of text files, each wrapping a single line of
base64 over comma separated lowercase hex fields (`d,n` for private keys and `10001,n` for public keys). Keys in that
format can be read back and decoded into their integer components.

Typical usage example:

    private_text, public_text = generate(2048)
    KeyStore("keys").save("device01", private_text, public_text)
    d_hex, n_hex = decode(private_text)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from sdkrsa.codec import decode
from sdkrsa.codec import decode_private
from sdkrsa.codec import decode_public
from sdkrsa.codec import encode_private
from sdkrsa.codec import encode_public
from sdkrsa.codec import key_kind
from sdkrsa.codec import KeyMaterial
from sdkrsa.errors import DecodeError
from sdkrsa.errors import EncodingError
from sdkrsa.errors import GenerationError
from sdkrsa.errors import KeyStoreError
from sdkrsa.errors import SdkRsaError
from sdkrsa.keygen import generate
from sdkrsa.keygen import generate_material
from sdkrsa.store import KeyLookup
from sdkrsa.store import KeyStore

__version__ = "0.1.0"
__all__ = [
    "KeyMaterial",
    "KeyStore",
    "KeyLookup",
    "encode_private",
    "encode_public",
    "decode",
    "decode_private",
    "decode_public",
    "key_kind",
    "generate",
    "generate_material",
    "SdkRsaError",
    "GenerationError",
    "EncodingError",
    "DecodeError",
    "KeyStoreError",
]
