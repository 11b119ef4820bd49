import json

import pytest

from cryptkit import vectors
from cryptkit.algorithms import Algorithm, find_algorithm, generate

KEY_HEX = "00" * 16
TAG_HEX = "ab" * 16


def _mac_suite(result="valid"):
    return {
        "algorithm": "HMACSHA256",
        "generatorVersion": "0.8r12",
        "numberOfTests": 1,
        "notes": {},
        "testGroups": [
            {
                "type": "MacTest",
                "keySize": 128,
                "tagSize": 128,
                "tests": [
                    {
                        "tcId": 1,
                        "comment": "empty message",
                        "key": KEY_HEX,
                        "msg": "",
                        "tag": TAG_HEX,
                        "result": result,
                        "flags": [],
                    }
                ],
            }
        ],
    }


def _write(tmp_path, filename, suite):
    vectors_dir = tmp_path / "testvectors"
    vectors_dir.mkdir()
    (vectors_dir / filename).write_text(json.dumps(suite))
    return tmp_path


@pytest.mark.parametrize(
    "name, filename, generator",
    [
        ("AES-GCM", "aes_gcm_test.json", vectors.aes_gcm_generator),
        ("AES-GCM-SIV", "aes_gcm_siv_test.json", vectors.aes_gcm_generator),
        ("CHACHA20-POLY1305", "chacha20_poly1305_test.json", vectors.chacha20_poly1305),
        ("XCHACHA20-POLY1305", "xchacha20_poly1305_test.json", vectors.xchacha20_poly1305),
        ("AES-SIV-CMAC", "aes_siv_cmac_test.json", vectors.aes_siv_generator),
        ("AES-CMAC", "aes_cmac_test.json", vectors.mac_generator),
        ("HKDF-SHA-256", "hkdf_sha256_test.json", vectors.hkdf_generator),
        ("HMACSHA512", "hmac_sha512_test.json", vectors.mac_generator),
        ("EDDSA", "eddsa_test.json", vectors.ed25519_generator),
        ("secp256k1-p1316", "ecdsa_secp256k1_sha256_p1363_test.json", vectors.ecdsa_generator),
        ("secp521r1", "ecdsa_secp521r1_sha512_test.json", vectors.ecdsa_generator),
    ],
)
def test_find_algorithm(name, filename, generator):
    algo = find_algorithm(name)
    assert algo == Algorithm(filename, generator)


def test_find_algorithm_unknown():
    with pytest.raises(ValueError, match="Unrecognized algorithm 'ROT13'"):
        find_algorithm("ROT13")


def test_find_algorithm_is_case_sensitive():
    with pytest.raises(ValueError):
        find_algorithm("hmacsha256")


def test_generate_mac(tmp_path):
    root = _write(tmp_path, "hmac_sha256_test.json", _mac_suite())
    infos = generate(root, "HMACSHA256", 0)
    assert len(infos) == 1
    assert infos[0].data == [bytes.fromhex(KEY_HEX), b"", bytes.fromhex(TAG_HEX)]
    assert infos[0].desc == "HMACSHA256 case 1 [valid] empty message"


def test_generate_filters_key_size(tmp_path):
    root = _write(tmp_path, "hmac_sha256_test.json", _mac_suite())
    assert generate(root, "HMACSHA256", 256) == []
    assert len(generate(str(root), "HMACSHA256", 128)) == 1


def test_generate_skips_invalid_mac_cases(tmp_path):
    root = _write(tmp_path, "hmac_sha256_test.json", _mac_suite(result="invalid"))
    assert generate(root, "HMACSHA256", 0) == []


def test_generate_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError, match="hmac_sha1_test.json"):
        generate(tmp_path, "HMACSHA1", 0)


def test_generate_unknown_algorithm(tmp_path):
    with pytest.raises(ValueError, match="Unrecognized algorithm"):
        generate(tmp_path, "NOPE", 0)


def test_generate_algorithm_mismatch(tmp_path):
    root = _write(tmp_path, "hmac_sha1_test.json", _mac_suite())
    with pytest.raises(ValueError, match="algorithm mismatch"):
        generate(root, "HMACSHA1", 0)