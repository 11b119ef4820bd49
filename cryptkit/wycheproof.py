"""Common structures and helpers for Wycheproof test-vector files."""

from __future__ import annotations

import binascii
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

__all__ = [
    "CaseResult",
    "Suite",
    "Group",
    "Case",
    "TestInfo",
    "parse_hex",
    "parse_case_result",
    "case_result",
    "data",
    "description",
]


def _field(obj: Any, key: str, kind: type) -> Any:
    """Return ``obj[key]`` checked to be of ``kind``; raise ValueError otherwise."""
    if not isinstance(obj, Mapping):
        raise ValueError("expected a JSON object")
    if key not in obj:
        raise ValueError(f"missing field `{key}`")
    value = obj[key]
    wrong_bool = kind is int and isinstance(value, bool)
    if wrong_bool or not isinstance(value, kind):
        raise ValueError(f"invalid type for field `{key}`")
    return value


class CaseResult(Enum):
    """Expected outcome of a Wycheproof test case."""

    VALID = "valid"
    INVALID = "invalid"
    ACCEPTABLE = "acceptable"

    def __str__(self) -> str:
        return self.value


def parse_hex(value: Any) -> bytes:
    """Decode a strict hex string (no whitespace, even length)."""
    if not isinstance(value, str):
        raise ValueError(f"invalid value {value!r}, expected hex data")
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError):
        raise ValueError(f"invalid value {value!r}, expected hex data") from None


def parse_case_result(value: Any) -> CaseResult:
    """Map a ``result`` string to a :class:`CaseResult`."""
    if isinstance(value, str):
        for member in CaseResult:
            if member.value == value:
                return member
    raise ValueError(f"invalid value {value!r}, unexpected result value")


@dataclass(frozen=True)
class Suite:
    """Top-level fields shared by every Wycheproof file."""

    algorithm: str
    generator_version: str
    number_of_tests: int
    notes: dict[str, str]

    @classmethod
    def from_json(cls, obj: Any) -> Suite:
        notes = _field(obj, "notes", Mapping)
        for key, value in notes.items():
            if not isinstance(value, str):
                raise ValueError(f"invalid note {key!r}: expected a string")
        return cls(
            algorithm=_field(obj, "algorithm", str),
            generator_version=_field(obj, "generatorVersion", str),
            number_of_tests=_field(obj, "numberOfTests", int),
            notes=dict(notes),
        )


@dataclass(frozen=True)
class Group:
    """Fields shared by every entry of ``testGroups``."""

    group_type: str

    @classmethod
    def from_json(cls, obj: Any) -> Group:
        return cls(group_type=_field(obj, "type", str))


@dataclass(frozen=True)
class Case:
    """Fields shared by every test case in a group."""

    case_id: int
    comment: str
    result: CaseResult
    flags: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Any) -> Case:
        flags = obj.get("flags", []) if isinstance(obj, Mapping) else []
        if not isinstance(flags, list) or not all(isinstance(f, str) for f in flags):
            raise ValueError("invalid type for field `flags`")
        return cls(
            case_id=_field(obj, "tcId", int),
            comment=_field(obj, "comment", str),
            result=parse_case_result(_field(obj, "result", str)),
            flags=list(flags),
        )


@dataclass
class TestInfo:
    """Raw blobs for one test case together with its description."""

    __test__ = False

    data: list[bytes]
    desc: str


def case_result(case: Case) -> int:
    """Encode a case result as a byte value: 0 for invalid, 1 for valid."""
    if case.result is CaseResult.INVALID:
        return 0
    if case.result is CaseResult.VALID:
        return 1
    raise ValueError(f"Unexpected case result {case.result}")


def data(wycheproof_dir: str | Path, filename: str) -> bytes:
    """Read ``testvectors/<filename>`` from a Wycheproof checkout."""
    path = Path(wycheproof_dir) / "testvectors" / filename
    try:
        return path.read_bytes()
    except OSError:
        raise FileNotFoundError(
            f"Test vector file {filename} not found at {str(path)!r}"
        ) from None


def description(suite: Suite, case: Case) -> str:
    """Build a one-line description for a test case in a suite."""
    return f"{suite.algorithm} case {case.case_id} [{case.result}] {case.comment}"