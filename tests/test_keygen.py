# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from cryptography.hazmat.primitives.asymmetric import rsa as crypto_rsa
import pytest
import rsa
import sympy

import sdkrsa
from sdkrsa import codec
from sdkrsa import keygen

FAKE_N = 1000003 * 1000033

test_sizes = [
    512,
    1024,
    pytest.param(2048, marks=pytest.mark.slow),
]


def fake_private(mocker, **fields):
    values = {"n": FAKE_N, "e": 65537, "d": 123456789}
    values.update(fields)
    return mocker.Mock(spec=list(values), **values)


@pytest.mark.parametrize("size", test_sizes)
def test_generate_material_size(size):
    material = keygen.generate_material(size)
    assert material.modulus.bit_length() == size
    assert material.public_exponent == 65537


def test_generate_material_is_valid_key():
    material = keygen.generate_material(512)
    n, e, d = material.modulus, material.public_exponent, material.private_exponent
    message = 17092025232642
    assert pow(pow(message, e, n), d, n) == message
    p, q = crypto_rsa.rsa_recover_prime_factors(n, e, d)
    assert p * q == n
    assert sympy.isprime(p)
    assert sympy.isprime(q)


def test_generate_material_reads_provider_fields(mocker):
    mocker.patch("rsa.newkeys", return_value=(None, fake_private(mocker)))
    material = keygen.generate_material(512)
    assert material == codec.KeyMaterial(modulus=FAKE_N, private_exponent=123456789, public_exponent=65537)
    rsa.newkeys.assert_called_once_with(512, exponent=65537)


def test_generate_material_default_bits(mocker):
    mocker.patch("rsa.newkeys", return_value=(None, fake_private(mocker)))
    keygen.generate_material()
    rsa.newkeys.assert_called_once_with(2048, exponent=65537)


@pytest.mark.parametrize("bits", [0, -512, 1.5, "512", None, True])
def test_generate_material_validates_bits(mocker, bits):
    mocker.patch("rsa.newkeys")
    with pytest.raises(sdkrsa.GenerationError):
        keygen.generate_material(bits)
    rsa.newkeys.assert_not_called()


def test_generate_material_provider_failure(mocker):
    mocker.patch("rsa.newkeys", side_effect=ValueError("Key too small"))
    with pytest.raises(sdkrsa.GenerationError) as excinfo:
        keygen.generate_material(8)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_generate_material_small_key_rejected_by_provider():
    with pytest.raises(sdkrsa.GenerationError):
        keygen.generate_material(8)


@pytest.mark.parametrize("fields", [{"e": 3}, {"d": 0}, {"d": FAKE_N}, {"e": 65537, "n": 65537}])
def test_generate_material_rejects_bad_output(mocker, fields):
    mocker.patch("rsa.newkeys", return_value=(None, fake_private(mocker, **fields)))
    with pytest.raises(sdkrsa.GenerationError):
        keygen.generate_material(512)


def test_generate_material_missing_field(mocker):
    mocker.patch("rsa.newkeys", return_value=(None, mocker.Mock(spec=["n", "e"], n=FAKE_N, e=65537)))
    with pytest.raises(sdkrsa.GenerationError):
        keygen.generate_material(512)


def test_generation_error_is_runtime_error(mocker):
    mocker.patch("rsa.newkeys", side_effect=ValueError("boom"))
    with pytest.raises(RuntimeError):
        keygen.generate_material(512)


def test_generate_encodes_both_halves(mocker):
    mocker.patch("rsa.newkeys", return_value=(None, fake_private(mocker)))
    private_text, public_text = keygen.generate(512)
    assert private_text == codec.encode_private(codec.KeyMaterial(modulus=FAKE_N, private_exponent=123456789))
    assert public_text == codec.encode_public(FAKE_N)


def test_generate_real_key_pair_matches():
    private_text, public_text = keygen.generate(512)
    d_hex, n_hex = codec.decode(private_text)
    e_hex, pub_n_hex = codec.decode(public_text)
    assert e_hex == "10001"
    assert n_hex == pub_n_hex
    assert int(n_hex, 16).bit_length() == 512
    assert 0 < int(d_hex, 16) < int(n_hex, 16)


def test_generate_propagates_encoding_error(mocker):
    mocker.patch("sdkrsa.keygen.generate_material", return_value=codec.KeyMaterial(modulus=0, private_exponent=0))
    with pytest.raises(sdkrsa.EncodingError):
        keygen.generate(512)
