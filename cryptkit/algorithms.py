"""Registry of supported Wycheproof algorithm families and a driver to load them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from cryptkit import vectors
from cryptkit.wycheproof import TestInfo, data

__all__ = ["Algorithm", "find_algorithm", "generate"]

Generator = Callable[[bytes, str, int], "list[TestInfo]"]


@dataclass(frozen=True)
class Algorithm:
    """A Wycheproof vector file and the generator that converts it."""

    file: str
    generator: Generator


_ALGORITHMS = MappingProxyType(
    {
        "AES-GCM": Algorithm("aes_gcm_test.json", vectors.aes_gcm_generator),
        "AES-GCM-SIV": Algorithm("aes_gcm_siv_test.json", vectors.aes_gcm_generator),
        "CHACHA20-POLY1305": Algorithm(
            "chacha20_poly1305_test.json", vectors.chacha20_poly1305
        ),
        "XCHACHA20-POLY1305": Algorithm(
            "xchacha20_poly1305_test.json", vectors.xchacha20_poly1305
        ),
        "AES-SIV-CMAC": Algorithm("aes_siv_cmac_test.json", vectors.aes_siv_generator),
        "AES-CMAC": Algorithm("aes_cmac_test.json", vectors.mac_generator),
        "HKDF-SHA-1": Algorithm("hkdf_sha1_test.json", vectors.hkdf_generator),
        "HKDF-SHA-256": Algorithm("hkdf_sha256_test.json", vectors.hkdf_generator),
        "HKDF-SHA-384": Algorithm("hkdf_sha384_test.json", vectors.hkdf_generator),
        "HKDF-SHA-512": Algorithm("hkdf_sha512_test.json", vectors.hkdf_generator),
        "HMACSHA1": Algorithm("hmac_sha1_test.json", vectors.mac_generator),
        "HMACSHA224": Algorithm("hmac_sha224_test.json", vectors.mac_generator),
        "HMACSHA256": Algorithm("hmac_sha256_test.json", vectors.mac_generator),
        "HMACSHA384": Algorithm("hmac_sha384_test.json", vectors.mac_generator),
        "HMACSHA512": Algorithm("hmac_sha512_test.json", vectors.mac_generator),
        "EDDSA": Algorithm("eddsa_test.json", vectors.ed25519_generator),
        "secp224r1": Algorithm(
            "ecdsa_secp224r1_sha224_test.json", vectors.ecdsa_generator
        ),
        "secp256r1": Algorithm(
            "ecdsa_secp256r1_sha256_test.json", vectors.ecdsa_generator
        ),
        "secp256k1": Algorithm(
            "ecdsa_secp256k1_sha256_test.json", vectors.ecdsa_generator
        ),
        "secp256k1-p1316": Algorithm(
            "ecdsa_secp256k1_sha256_p1363_test.json", vectors.ecdsa_generator
        ),
        "secp384r1": Algorithm(
            "ecdsa_secp384r1_sha384_test.json", vectors.ecdsa_generator
        ),
        "secp521r1": Algorithm(
            "ecdsa_secp521r1_sha512_test.json", vectors.ecdsa_generator
        ),
    }
)


def find_algorithm(name: str) -> Algorithm:
    """Look up an algorithm family by name; raise ValueError if unknown."""
    try:
        return _ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unrecognized algorithm '{name}'") from None


def generate(
    wycheproof_dir: str | Path, algorithm: str, key_size: int
) -> list[TestInfo]:
    """Load the vectors for ``algorithm`` from a Wycheproof checkout and convert them.

    ``key_size`` is in bits; 0 selects all sizes.
    """
    algo = find_algorithm(algorithm)
    raw = data(wycheproof_dir, algo.file)
    return algo.generator(raw, algorithm, key_size)