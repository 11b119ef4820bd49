"""Input/output buffer views whose output may be longer than the input."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from typing import Any

from cryptkit.errors import OutIsTooSmallError

__all__ = ["InOutBufReserved"]


class InOutBufReserved:
    """An input buffer paired with an output buffer at least as long.

    The spare room at the end of the output is reserved for data that an
    operation may append, such as padding.  Input and output are either the
    same buffer (in-place mode) or two separate buffers.
    """

    __slots__ = ("_in", "_out", "_in_len", "_out_len")

    def __init__(
        self,
        inp: Sequence[Any],
        out: MutableSequence[Any],
        in_len: int,
        out_len: int,
    ) -> None:
        if in_len < 0 or out_len < 0:
            raise ValueError("lengths must not be negative")
        if in_len > len(inp):
            raise ValueError("input length exceeds the input buffer")
        if out_len > len(out):
            raise ValueError("output length exceeds the output buffer")
        if in_len > out_len:
            raise OutIsTooSmallError()
        self._in = inp
        self._out = out
        self._in_len = in_len
        self._out_len = out_len

    @classmethod
    def from_mut_slice(
        cls, buf: MutableSequence[Any], msg_len: int
    ) -> InOutBufReserved:
        """Use the first ``msg_len`` elements of ``buf`` as input and all of it as output.

        Raises OutIsTooSmallError if ``msg_len`` exceeds the buffer length.
        """
        if msg_len > len(buf):
            raise OutIsTooSmallError()
        return cls(buf, buf, msg_len, len(buf))

    @classmethod
    def from_slices(
        cls, in_buf: Sequence[Any], out_buf: MutableSequence[Any]
    ) -> InOutBufReserved:
        """Pair two separate buffers.

        Raises OutIsTooSmallError if the output is shorter than the input.
        """
        if len(in_buf) > len(out_buf):
            raise OutIsTooSmallError()
        return cls(in_buf, out_buf, len(in_buf), len(out_buf))

    @property
    def in_len(self) -> int:
        """Length of the input."""
        return self._in_len

    @property
    def out_len(self) -> int:
        """Length of the output, including the reserved room."""
        return self._out_len

    @property
    def input(self) -> Sequence[Any]:
        """A copy of the input."""
        return self._in[: self._in_len]

    @property
    def output(self) -> Sequence[Any]:
        """A copy of the whole output; assign to overwrite it."""
        return self._out[: self._out_len]

    @output.setter
    def output(self, values: Sequence[Any]) -> None:
        if len(values) != self._out_len:
            raise ValueError(
                f"expected {self._out_len} values for the output, got {len(values)}"
            )
        self._out[: self._out_len] = values

    def __repr__(self) -> str:
        return (
            f"InOutBufReserved(in_len={self._in_len}, out_len={self._out_len})"
        )