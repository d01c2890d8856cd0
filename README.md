# packframe

Building blocks for framed binary payloads. A frame is meant to be laid out as:

```
MARK (1 byte) + HEADER (10 bytes) + VERSION (1 byte) + CRC32 (4 bytes)
  + LENGTH (8 bytes) + DATA (variable) + HEADER (10 bytes) + MARK (1 byte)
```

Everything lives in the module `packframe.encoder`.

## What it provides

- `crc32_checksum(data)` returns the IEEE CRC32 of a bytes-like object as an unsigned 32-bit integer.
- `get_marker()` returns the current frame marker, which starts as `"@"`.
- `update_marker(new_marker)` changes the marker. The marker must be exactly one printable ASCII character (codes 32 to 126). Otherwise `EncodeError` is raised. The marker is shared by the whole module. Frames created afterwards use it, and `EncodeObj.validate()` compares against it.
- `escaper(data, search, replace)` returns `data` as bytes with every non-overlapping occurrence of `search` replaced by `replace`.
- `escaper_reverse(data, search, replace)` replaces every occurrence of `replace` with `search`.
- For both escaping functions, `search` and `replace` may be `str` (encoded as UTF-8) or `bytes`. If either one is empty, the data is returned unchanged.
- `new_encode_obj(header, version, data)` builds an `EncodeObj` from the current marker, the payload, its length and its CRC32. It checks three things and raises `EncodeError` if one fails:
  - the header must be exactly 10 bytes;
  - the version must fit in one byte (0 to 255);
  - the data must be no longer than 4294967295 bytes.
- `EncodeObj` is a dataclass with the fields `mark`, `header`, `version`, `crc32`, `length` and `data`.
- `EncodeObj.validate()` checks the frame and raises `EncodeError` on the first mismatch. It checks, in this order:
  - the mark equals the current marker;
  - the header is 10 bytes;
  - the version is between 1 and 255;
  - the checksum matches the data;
  - the length matches the data.

`EncodeError` is a subclass of `ValueError`.

## What it does not do

The package does not turn an `EncodeObj` into the byte layout above, and it does not parse such bytes back into a frame. It only builds frames, checks them and escapes byte strings.

## Installation

```
pip install .
```

## Example

```python
from packframe.encoder import EncodeError, escaper, escaper_reverse, new_encode_obj

obj = new_encode_obj("abcdefghij", 1, b"hello")
obj.validate()
print(obj.mark, obj.crc32, obj.length)

obj.data = b"changed"
try:
    obj.validate()
except EncodeError as exc:
    print(exc)  # CRC32 checksum does not match

escaped = escaper(b"a@b", "@", "\\@")
assert escaped == b"a\\@b"
assert escaper_reverse(escaped, "@", "\\@") == b"a@b"
```

## Running the tests

```
pip install .[test]
pytest
```