"""Buffer views that read from an input and write to an output.

The input and output may be the same buffer (in-place operation) or two
different buffers (buffer-to-buffer operation); code written against these
types handles both modes the same way.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any

from cryptkit.errors import IntoArrayError, NotEqualError

__all__ = ["InOut", "InOutBuf"]


class InOut:
    """A single element read from an input sequence and written to an output one."""

    __slots__ = ("_in", "_out", "_in_index", "_out_index")

    def __init__(
        self,
        inp: Sequence[Any],
        out: MutableSequence[Any],
        in_index: int = 0,
        out_index: int = 0,
    ) -> None:
        if not 0 <= in_index < len(inp):
            raise IndexError(f"input index {in_index} out of range")
        if not 0 <= out_index < len(out):
            raise IndexError(f"output index {out_index} out of range")
        self._in = inp
        self._out = out
        self._in_index = in_index
        self._out_index = out_index

    @property
    def input(self) -> Any:
        """The input value."""
        return self._in[self._in_index]

    @property
    def output(self) -> Any:
        """The current output value."""
        return self._out[self._out_index]

    @output.setter
    def output(self, value: Any) -> None:
        self._out[self._out_index] = value

    def __repr__(self) -> str:
        return f"InOut(input={self.input!r}, output={self.output!r})"


class InOutBuf:
    """A window of equal length over an input and an output sequence."""

    __slots__ = ("_in", "_out", "_in_offset", "_out_offset", "_len")

    def __init__(
        self,
        inp: Sequence[Any],
        out: MutableSequence[Any],
        in_offset: int = 0,
        out_offset: int = 0,
        length: int | None = None,
    ) -> None:
        if length is None:
            length = len(inp) - in_offset
        if in_offset < 0 or out_offset < 0 or length < 0:
            raise ValueError("offsets and length must not be negative")
        if in_offset + length > len(inp):
            raise ValueError("input window exceeds the input buffer")
        if out_offset + length > len(out):
            raise ValueError("output window exceeds the output buffer")
        self._in = inp
        self._out = out
        self._in_offset = in_offset
        self._out_offset = out_offset
        self._len = length

    @classmethod
    def new(cls, in_buf: Sequence[Any], out_buf: MutableSequence[Any]) -> InOutBuf:
        """Pair two whole buffers; raise NotEqualError if their lengths differ."""
        if len(in_buf) != len(out_buf):
            raise NotEqualError()
        return cls(in_buf, out_buf, 0, 0, len(in_buf))

    @classmethod
    def from_mut(cls, buf: MutableSequence[Any]) -> InOutBuf:
        """Use one mutable buffer as both input and output (in-place mode)."""
        return cls(buf, buf, 0, 0, len(buf))

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[InOut]:
        for pos in range(self._len):
            yield InOut(self._in, self._out, self._in_offset + pos, self._out_offset + pos)

    def get(self, pos: int) -> InOut:
        """Return the element at ``pos``; raise IndexError if out of range."""
        if not 0 <= pos < self._len:
            raise IndexError(f"position {pos} out of range for length {self._len}")
        return InOut(self._in, self._out, self._in_offset + pos, self._out_offset + pos)

    @property
    def input(self) -> Sequence[Any]:
        """A copy of the input window."""
        return self._in[self._in_offset : self._in_offset + self._len]

    @property
    def output(self) -> Sequence[Any]:
        """A copy of the output window; assign to overwrite it."""
        return self._out[self._out_offset : self._out_offset + self._len]

    @output.setter
    def output(self, values: Sequence[Any]) -> None:
        if len(values) != self._len:
            raise NotEqualError()
        self._out[self._out_offset : self._out_offset + self._len] = values

    def split_at(self, mid: int) -> tuple[InOutBuf, InOutBuf]:
        """Split into ``[0, mid)`` and ``[mid, len)``; raise ValueError if mid > len."""
        if not 0 <= mid <= self._len:
            raise ValueError(f"split point {mid} exceeds length {self._len}")
        head = InOutBuf(self._in, self._out, self._in_offset, self._out_offset, mid)
        tail = InOutBuf(
            self._in,
            self._out,
            self._in_offset + mid,
            self._out_offset + mid,
            self._len - mid,
        )
        return head, tail

    def into_chunks(self, size: int) -> tuple[list[InOutBuf], InOutBuf]:
        """Split into whole chunks of ``size`` elements and a shorter tail."""
        if size <= 0:
            raise ValueError("chunk size must be positive")
        count = self._len // size
        chunks = [
            InOutBuf(
                self._in,
                self._out,
                self._in_offset + n * size,
                self._out_offset + n * size,
                size,
            )
            for n in range(count)
        ]
        tail_pos = count * size
        tail = InOutBuf(
            self._in,
            self._out,
            self._in_offset + tail_pos,
            self._out_offset + tail_pos,
            self._len - tail_pos,
        )
        return chunks, tail

    def into_array(self, size: int) -> InOutBuf:
        """Return this window as a fixed-size block; raise IntoArrayError on mismatch."""
        if self._len != size:
            raise IntoArrayError()
        return InOutBuf(self._in, self._out, self._in_offset, self._out_offset, size)

    def xor_in2out(self, data: Sequence[int]) -> None:
        """Write ``input ^ data`` to the output; lengths must match."""
        if len(data) != self._len:
            raise ValueError(
                f"data length {len(data)} does not match buffer length {self._len}"
            )
        self.output = [a ^ b for a, b in zip(self.input, data)]

    def __repr__(self) -> str:
        return f"InOutBuf(input={self.input!r}, output={self.output!r})"