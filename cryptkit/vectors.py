"""Turn Wycheproof JSON suites into lists of raw test blobs."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from cryptkit.wycheproof import (
    Case,
    CaseResult,
    Group,
    Suite,
    TestInfo,
    _field,
    case_result,
    description,
    parse_hex,
)

__all__ = [
    "aes_gcm_generator",
    "chacha20_poly1305",
    "xchacha20_poly1305",
    "aes_siv_generator",
    "ecdsa_generator",
    "ed25519_generator",
    "hkdf_generator",
    "mac_generator",
]

_ECDSA_HASHES = frozenset({"SHA-224", "SHA-256", "SHA-384", "SHA-512"})


@dataclass(frozen=True)
class _Test:
    case: Case
    fields: dict[str, bytes]
    numbers: dict[str, int]


@dataclass(frozen=True)
class _Group:
    raw: Mapping[str, Any]
    numbers: dict[str, int]
    tests: list[_Test]


def _load_suite(data: bytes | str) -> tuple[Suite, list[Any]]:
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    suite = Suite.from_json(obj)
    return suite, _field(obj, "testGroups", list)


def _check_algorithm(algorithm: str, suite: Suite) -> None:
    if algorithm != suite.algorithm:
        raise ValueError(
            f"algorithm mismatch: requested {algorithm!r}, file holds {suite.algorithm!r}"
        )


def _parse_groups(
    raw_groups: Iterable[Any],
    *,
    group_ints: Iterable[str] = (),
    case_hex: Iterable[str] = (),
    case_ints: Iterable[str] = (),
) -> list[_Group]:
    group_ints, case_hex, case_ints = tuple(group_ints), tuple(case_hex), tuple(case_ints)
    groups = []
    for raw in raw_groups:
        Group.from_json(raw)
        numbers = {key: _field(raw, key, int) for key in group_ints}
        tests = [
            _Test(
                case=Case.from_json(test),
                fields={key: parse_hex(_field(test, key, str)) for key in case_hex},
                numbers={key: _field(test, key, int) for key in case_ints},
            )
            for test in _field(raw, "tests", list)
        ]
        groups.append(_Group(raw, numbers, tests))
    return groups


def _result_byte(case: Case) -> bytes:
    return bytes([case_result(case)])


def _aead(data: bytes | str, algorithm: str, key_size: int, iv_size: int) -> list[TestInfo]:
    suite, raw_groups = _load_suite(data)
    _check_algorithm(algorithm, suite)
    groups = _parse_groups(
        raw_groups,
        group_ints=("ivSize", "keySize", "tagSize"),
        case_hex=("aad", "ct", "iv", "key", "msg", "tag"),
    )
    infos = []
    for group in groups:
        for test in group.tests:
            if key_size != 0 and group.numbers["keySize"] != key_size:
                continue
            if group.numbers["ivSize"] != iv_size:
                print(f" skipping tests for iv_size={group.numbers['ivSize']}")
                continue
            f = test.fields
            infos.append(
                TestInfo(
                    data=[
                        f["key"],
                        f["iv"],
                        f["aad"],
                        f["msg"],
                        f["ct"] + f["tag"],
                        _result_byte(test.case),
                    ],
                    desc=description(suite, test.case),
                )
            )
    return infos


def aes_gcm_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """AES-GCM style AEAD vectors with 96-bit nonces, filtered by key size (0 = all)."""
    return _aead(data, algorithm, key_size, 12 * 8)


def chacha20_poly1305(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """ChaCha20-Poly1305 vectors (256-bit key, 96-bit nonce); ``key_size`` is ignored."""
    return _aead(data, algorithm, 256, 12 * 8)


def xchacha20_poly1305(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """XChaCha20-Poly1305 vectors (256-bit key, 192-bit nonce); ``key_size`` is ignored."""
    return _aead(data, algorithm, 256, 24 * 8)


def aes_siv_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """AES-SIV vectors as ``[key, aad, msg, ct, result]``."""
    suite, raw_groups = _load_suite(data)
    _check_algorithm(algorithm, suite)
    groups = _parse_groups(
        raw_groups, group_ints=("keySize",), case_hex=("key", "aad", "msg", "ct")
    )
    infos = []
    for group in groups:
        if key_size != 0 and group.numbers["keySize"] != key_size:
            continue
        for test in group.tests:
            f = test.fields
            infos.append(
                TestInfo(
                    data=[f["key"], f["aad"], f["msg"], f["ct"], _result_byte(test.case)],
                    desc=description(suite, test.case),
                )
            )
    return infos


def ecdsa_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """ECDSA verification vectors as ``[wx, wy, msg, sig, result]``.

    Acceptable cases are left out.
    """
    suite, raw_groups = _load_suite(data)
    groups = _parse_groups(raw_groups, case_hex=("msg", "sig"))
    parsed = []
    for group in groups:
        _field(group.raw, "keyDer", str)
        _field(group.raw, "keyPem", str)
        sha = _field(group.raw, "sha", str)
        key = _field(group.raw, "key", Mapping)
        _field(key, "type", str)
        curve = _field(key, "curve", str)
        wx = parse_hex(_field(key, "wx", str))
        wy = parse_hex(_field(key, "wy", str))
        parsed.append((group, sha, curve, wx, wy))

    infos = []
    for group, sha, curve, wx, wy in parsed:
        if not algorithm.startswith(curve):
            raise ValueError(f"algorithm {algorithm!r} does not match curve {curve!r}")
        if sha not in _ECDSA_HASHES:
            raise ValueError(f"unexpected hash function {sha!r}")
        for test in group.tests:
            if test.case.result is CaseResult.ACCEPTABLE:
                continue
            infos.append(
                TestInfo(
                    data=[
                        wx,
                        wy,
                        test.fields["msg"],
                        test.fields["sig"],
                        _result_byte(test.case),
                    ],
                    desc=description(suite, test.case),
                )
            )
    return infos


def ed25519_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """EdDSA vectors as ``[sk, pk, msg, sig, result]``."""
    suite, raw_groups = _load_suite(data)
    _check_algorithm(algorithm, suite)
    groups = _parse_groups(raw_groups, case_hex=("msg", "sig"))
    parsed = []
    for group in groups:
        _field(group.raw, "keyDer", str)
        _field(group.raw, "keyPem", str)
        key = _field(group.raw, "key", Mapping)
        sk = parse_hex(_field(key, "sk", str))
        pk = parse_hex(_field(key, "pk", str))
        parsed.append((group, sk, pk))

    infos = []
    for group, sk, pk in parsed:
        for test in group.tests:
            infos.append(
                TestInfo(
                    data=[
                        sk,
                        pk,
                        test.fields["msg"],
                        test.fields["sig"],
                        _result_byte(test.case),
                    ],
                    desc=description(suite, test.case),
                )
            )
    return infos


def hkdf_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """HKDF vectors as ``[ikm, salt, info, okm]``; only valid cases are kept."""
    suite, raw_groups = _load_suite(data)
    _check_algorithm(algorithm, suite)
    groups = _parse_groups(
        raw_groups,
        group_ints=("keySize",),
        case_hex=("ikm", "salt", "info", "okm"),
        case_ints=("size",),
    )
    infos = []
    for group in groups:
        for test in group.tests:
            if test.case.result is not CaseResult.VALID:
                continue
            f = test.fields
            size = test.numbers["size"]
            if len(f["okm"]) != size:
                print(
                    f"Skipping case {test.case.case_id} with size={size} "
                    f"!= okm.len()={len(f['okm'])}",
                    file=sys.stderr,
                )
            infos.append(
                TestInfo(
                    data=[f["ikm"], f["salt"], f["info"], f["okm"]],
                    desc=description(suite, test.case),
                )
            )
    return infos


def mac_generator(data: bytes | str, algorithm: str, key_size: int) -> list[TestInfo]:
    """MAC vectors as ``[key, msg, tag]``; only valid cases are kept.

    The tag may be truncated to the group's tag size.
    """
    suite, raw_groups = _load_suite(data)
    _check_algorithm(algorithm, suite)
    groups = _parse_groups(
        raw_groups, group_ints=("keySize", "tagSize"), case_hex=("key", "msg", "tag")
    )
    infos = []
    for group in groups:
        group_key_size = group.numbers["keySize"]
        tag_size = group.numbers["tagSize"]
        for test in group.tests:
            if key_size != 0 and group_key_size != key_size:
                continue
            if test.case.result is not CaseResult.VALID:
                continue
            f = test.fields
            if len(f["key"]) * 8 != group_key_size:
                raise ValueError(
                    f"key of {len(f['key'])} bytes does not match key size {group_key_size}"
                )
            if tag_size % 8 != 0:
                raise ValueError(f"tag size {tag_size} is not a whole number of bytes")
            infos.append(
                TestInfo(
                    data=[f["key"], f["msg"], f["tag"]],
                    desc=description(suite, test.case),
                )
            )
    return infos