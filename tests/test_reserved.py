import pytest

from cryptkit.errors import OutIsTooSmallError
from cryptkit.reserved import InOutBufReserved


def test_from_mut_slice_lengths():
    buf = bytearray(b"hello\x00\x00\x00")
    res = InOutBufReserved.from_mut_slice(buf, 5)
    assert res.in_len == 5
    assert res.out_len == len(buf)


def test_from_mut_slice_input_is_message_prefix():
    buf = bytearray(b"hello\x00\x00\x00")
    res = InOutBufReserved.from_mut_slice(buf, 5)
    assert bytes(res.input) == b"hello"
    assert bytes(res.output) == bytes(buf)


def test_from_mut_slice_exact_length_allowed():
    buf = bytearray(b"abc")
    res = InOutBufReserved.from_mut_slice(buf, len(buf))
    assert res.in_len == res.out_len == len(buf)


def test_from_mut_slice_zero_message():
    buf = bytearray(4)
    res = InOutBufReserved.from_mut_slice(buf, 0)
    assert res.in_len == 0
    assert bytes(res.input) == b""


def test_from_mut_slice_too_long_message():
    buf = bytearray(3)
    with pytest.raises(OutIsTooSmallError, match="Output buffer is smaller than input"):
        InOutBufReserved.from_mut_slice(buf, 4)


def test_from_slices_lengths():
    in_buf = b"abc"
    out_buf = bytearray(6)
    res = InOutBufReserved.from_slices(in_buf, out_buf)
    assert res.in_len == len(in_buf)
    assert res.out_len == len(out_buf)
    assert bytes(res.input) == in_buf


def test_from_slices_output_too_small():
    with pytest.raises(OutIsTooSmallError):
        InOutBufReserved.from_slices(b"abcd", bytearray(3))


def test_from_slices_equal_lengths():
    res = InOutBufReserved.from_slices(b"xy", bytearray(2))
    assert res.in_len == res.out_len


def test_output_write_separate_buffers():
    in_buf = b"abc"
    out_buf = bytearray(5)
    res = InOutBufReserved.from_slices(in_buf, out_buf)
    new = bytes(reversed(b"abcde"))
    res.output = new
    assert bytes(out_buf) == new
    assert bytes(res.output) == new
    assert in_buf == b"abc"
    assert bytes(res.input) == b"abc"


def test_output_write_in_place_changes_input():
    buf = bytearray(b"abc\x00")
    res = InOutBufReserved.from_mut_slice(buf, 3)
    res.output = b"xyzw"
    assert bytes(res.input) == b"xyz"
    assert bytes(buf) == b"xyzw"


def test_output_write_wrong_length():
    out_buf = bytearray(4)
    res = InOutBufReserved.from_slices(b"ab", out_buf)
    with pytest.raises(ValueError):
        res.output = b"abc"
    assert bytes(out_buf) == bytes(4)
    assert bytes(res.output) == bytes(4)


def test_constructor_rejects_short_output():
    with pytest.raises(OutIsTooSmallError):
        InOutBufReserved(b"abcd", bytearray(4), 4, 2)


def test_constructor_rejects_length_beyond_buffer():
    with pytest.raises(ValueError):
        InOutBufReserved(b"ab", bytearray(4), 3, 4)


def test_works_with_lists():
    in_list = [1, 2]
    out_list = [0, 0, 0]
    res = InOutBufReserved.from_slices(in_list, out_list)
    res.output = [in_list[0], in_list[1], 9]
    assert out_list == [1, 2, 9]
    assert list(res.input) == in_list