# cryptkit

Small, dependency-free helpers for code that works with cryptographic
primitives and their test data.

## Hex strings: `cryptkit.hexlit`

`decode(*strings)` turns one or more hex strings (or `bytes`) into a
single `bytes` value. Spaces, tabs, carriage returns and newlines are
ignored, and upper- and lower-case digits may be mixed. Each string must
hold an even number of digits. `length(*strings)` returns how many bytes
`decode` would produce.

```python
from cryptkit.hexlit import decode, length

decode("ff e4")                       # b"\xff\xe4"
decode("01 dd f7 7f", "ee f0 d8")     # seven bytes
decode()                              # b""
length("ff", "e8 d0")                 # 3
```

An odd number of digits in a string, or any character that is neither a
hex digit nor whitespace, raises `ValueError`.

## In/out buffers: `cryptkit.inout` and `cryptkit.reserved`

These types let one function work both in place and from one buffer into
another.

`InOutBuf` pairs an input sequence with an output sequence window of the
same length.

- `InOutBuf.new(in_buf, out_buf)` pairs two whole buffers and raises
  `NotEqualError` when their lengths differ.
- `InOutBuf.from_mut(buf)` uses one mutable buffer as both input and
  output.
- `len(buf)` gives the length. Iterating yields one `InOut` per element,
  and `buf.get(pos)` returns one; an out-of-range position raises
  `IndexError`.
- `buf.input` is a copy of the input window. `buf.output` is a copy of the
  output window, and assigning a sequence of the same length to it
  overwrites the window.
- `split_at(mid)` returns the two halves `[0, mid)` and `[mid, len)`.
- `into_chunks(size)` returns a list of whole blocks of `size` elements
  and the shorter tail.
- `into_array(size)` returns the buffer as one block and raises
  `IntoArrayError` when its length is not `size`.
- `xor_in2out(data)` writes `input ^ data` to the output. The lengths must
  match.

An `InOut` is a single element with an `input` property and an `output`
property that can be assigned.

```python
from cryptkit.inout import InOutBuf

src = bytearray(b"\x00\x01\x02\x03")
dst = bytearray(4)
buf = InOutBuf.new(src, dst)
buf.xor_in2out(b"\xff\xff\xff\xff")
bytes(dst)                            # b"\xff\xfe\xfd\xfc"
```

`InOutBufReserved` pairs an input with an output that may be longer,
which leaves room for padding.

- `from_mut_slice(buf, msg_len)` uses the first `msg_len` elements of
  `buf` as input and the whole of `buf` as output.
- `from_slices(in_buf, out_buf)` pairs two separate buffers.

Both raise `OutIsTooSmallError` when the output cannot hold the input. The
`in_len` and `out_len` properties give the lengths. `input` and `output`
give copies, and `output` can be assigned a sequence of length `out_len`.

The exceptions `IntoArrayError`, `NotEqualError` and `OutIsTooSmallError`
live in `cryptkit.errors`. All three are subclasses of `ValueError`.

## Opaque reprs: `cryptkit.opaque`

`implement` replaces a class's `repr` with one that never shows its
fields, which keeps key material out of logs. It can be called directly
or used as a decorator.

```python
from cryptkit.opaque import implement

@implement
class Key:
    def __init__(self, material):
        self.material = material

repr(Key(b"secret"))                  # "Key { ... }"

@implement(params=["material"])
class Wrapped:
    def __init__(self, material):
        self.material = material

repr(Wrapped(b"secret"))              # "Wrapped<bytes> { ... }"
```

With `params`, the repr lists the type name of each named attribute.
Builtin types show a bare name; other types show `module.QualName`.

## Wycheproof test vectors

`cryptkit.wycheproof` holds the common parts of a Wycheproof JSON file:

- `Suite`, `Group` and `Case`, each with `from_json`.
- `CaseResult`, which is `VALID`, `INVALID` or `ACCEPTABLE`.
- `TestInfo`, which holds a list of byte strings (`data`) and a one-line
  `desc`.
- The helpers `parse_hex`, `parse_case_result`, `case_result`,
  `description` and `data`.

`case_result` returns 1 for valid and 0 for invalid. It raises
`ValueError` for acceptable. `data` reads `testvectors/<filename>` from a
Wycheproof checkout.

`cryptkit.vectors` turns a suite's JSON text into a list of `TestInfo`.
Each generator takes `(data, algorithm, key_size)`, and a key size of `0`
means all sizes.

| Generator | Fields of each `TestInfo.data` | Notes |
| --- | --- | --- |
| `aes_gcm_generator` | key, iv, aad, msg, ct + tag, result | Takes 96-bit-IV groups only. |
| `chacha20_poly1305` | key, iv, aad, msg, ct + tag, result | Always uses a 256-bit key and 96-bit IV. |
| `xchacha20_poly1305` | key, iv, aad, msg, ct + tag, result | Always uses a 256-bit key and 192-bit IV. |
| `aes_siv_generator` | key, aad, msg, ct, result | |
| `ecdsa_generator` | wx, wy, msg, sig, result | Acceptable cases are dropped. The curve must prefix the algorithm name. |
| `ed25519_generator` | sk, pk, msg, sig, result | |
| `hkdf_generator` | ikm, salt, info, okm | Valid cases only. |
| `mac_generator` | key, msg, tag | Valid cases only. |

The AEAD generators print a line to standard output for every test they
skip because of its IV size. `hkdf_generator` prints a warning to standard
error when a case's `size` differs from its `okm` length, but keeps the
case. Malformed JSON, missing fields and algorithm mismatches raise
`ValueError`.

`cryptkit.algorithms` maps algorithm family names to a vector file and a
generator. The supported names are:

- `AES-GCM`, `AES-GCM-SIV`
- `CHACHA20-POLY1305`, `XCHACHA20-POLY1305`
- `AES-SIV-CMAC`, `AES-CMAC`
- `HKDF-SHA-1`, `HKDF-SHA-256`, `HKDF-SHA-384`, `HKDF-SHA-512`
- `HMACSHA1`, `HMACSHA224`, `HMACSHA256`, `HMACSHA384`, `HMACSHA512`
- `EDDSA`
- `secp224r1`, `secp256r1`, `secp256k1`, `secp256k1-p1316`, `secp384r1`,
  `secp521r1`

`find_algorithm(name)` returns the `Algorithm` record and raises
`ValueError` for unknown names. `generate(wycheproof_dir, algorithm,
key_size)` reads the file and runs the generator.

```python
from cryptkit.algorithms import generate

infos = generate("/path/to/wycheproof", "AES-GCM", 128)
for info in infos:
    print(info.desc)
```

## What the package does not do

- There is no command-line tool; everything is used from Python.
- The converted vectors are returned as `TestInfo` objects only. Nothing
  is written to disk, and there is no encoder for a binary blob file
  format or for a descriptions file.

## Requirements

Python 3.10 or later. The package has no runtime dependencies. The tests
use pytest; install them with the `test` extra.