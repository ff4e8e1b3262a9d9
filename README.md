# commonkit

A collection of small, self-contained helpers with no dependencies outside the
standard library.

## Modules

- `commonkit.colors`: a named colour table. `ColorId` enumerates the colours;
  `id_to_text` gives a display name (`"???"` for an unknown id),
  `id_to_int_tcolor` gives the integer colour value (0 for an unknown id), and
  `int_tcolor_to_id` maps a value back to the first matching `ColorId`, or
  `ColorId.CUSTOM`.
- `commonkit.keys`: a table of keyboard virtual-key codes (`VKEY_LIST` of
  `VirtualKey` with `name`, `code`, `description`). `vkey_find(name)` returns
  the index of the first entry with that name, or `None`; `vkey_list_size()`
  returns the table length.
- `commonkit.mathutils`: `almost_equal(v1, v2)` compares floats within a
  relative machine epsilon; values both below `1e-10` in magnitude are equal.
- `commonkit.sipnumbers`: `extract_number_from_uri` returns the user part of a
  SIP URI (the text before `@`, after a leading `sip:`), and `clean_number`
  keeps only digits, `*`, `#` and `+`.
- `commonkit.well512`: the WELL512 pseudo-random generator. `Well512(state, index)`
  takes sixteen 32-bit words; `Well512.seeded_randomly()` fills them with random
  bits. Call `next()` or iterate to get 32-bit values.
- `commonkit.fifo`: `Fifo(size)`, a ring buffer of `size` slots that holds at
  most `size - 1` items, with `push`, `peek`, `pop`, `len()` and `is_full()`.
  It raises `FifoFull` and `FifoEmpty`.
- `commonkit.observable`: an abstract `Observer` with `obs_update(observable, arg)`
  and an `Observable` that keeps observers and a changed flag
  (`add_observer`, `delete_observer`, `delete_observers`, `count_observers`,
  `set_changed`, `clear_changed`, `has_changed`, `notify_observers`,
  `notify_observers_if_changed`).
- `commonkit.b64codec`: `b64encode` and `b64decode` with `Alphabet.BASIC`
  (`+`, `/`) or the file-safe `Alphabet.FSAFE` (`-`, `,`). Decoding stops at the
  first `=` or at the first character outside `A-Z a-z 0-9 + /`.
- `commonkit.hexconv`: `hex_string_to_int`, `int_to_hex_string` (upper case,
  even length), `bin_string_to_int`, `int_to_bin_string` (padded to a multiple
  of 7 digits), `hex_string_to_buf`, `buf_to_hex_string`, and
  `hex_string_clean_to_buf`, which drops `0x` prefixes and non-hex characters
  and raises `HexFormatError` when an odd number of hex digits remains.
- `commonkit.textutils`: `urlencode(text, limit=None)` percent-encodes all but
  letters, digits and `-_.`, optionally within a buffer size that counts a
  terminator; `get_file_write_time(path)` returns a file's modification time as
  an aware UTC `datetime`; `utf8_to_ansi(data, encoding=None)` re-encodes UTF-8
  bytes in the given or the system's preferred encoding, replacing what cannot
  be mapped.
- `commonkit.ecc_curves`: `Curve` and `Point`, with the curves `SECP128R1`,
  `SECP192R1`, `SECP256R1` and `SECP384R1` (also in `CURVES` by name;
  `DEFAULT_CURVE` is `SECP256R1`). A curve offers `add`, `double`, `multiply`,
  `is_on_curve`, `mod_sqrt`, `compress`, `decompress`, `to_bytes` and
  `from_bytes`. The point at infinity is `None`.
- `commonkit.ecc`: `make_key`, `ecdh_shared_secret`, `ecdsa_sign` and
  `ecdsa_verify`. Public keys are compressed (one parity byte, then x); private
  keys, hashes and shared secrets are exactly the curve's byte length, and a
  signature is `r` followed by `s`. Failures raise `EccError`.
- `commonkit.font5x8`: `font_5x8(full=False)` returns a `Font` of 5x8 glyphs,
  one byte per column with the least significant bit at the top, starting at
  code 32. The basic font covers printable ASCII; `full=True` extends it up to
  code 255. `Font.glyph(char)` returns a glyph's columns, `Font.glyph_count()`
  the number of glyphs, and `Font.raw` the table with width and height bytes
  in front.

## Install

```
pip install .
```

## Examples

```python
from commonkit.b64codec import Alphabet, b64decode, b64encode
from commonkit.hexconv import buf_to_hex_string, hex_string_clean_to_buf
from commonkit.sipnumbers import extract_number_from_uri

text = b64encode(b"hello", Alphabet.FSAFE)
assert b64decode(text, Alphabet.FSAFE) == b"hello"

data = hex_string_clean_to_buf("0x01 0x02 0xff")
assert buf_to_hex_string(data) == "0102FF"

assert extract_number_from_uri("sip:1234@example.com") == "1234"
```

Signing and verifying a message hash on the default curve (the hash must be as
long as the curve's byte length, 32 bytes here):

```python
import hashlib
from commonkit.ecc import ecdsa_sign, ecdsa_verify, make_key

keys = make_key()
digest = hashlib.sha256(b"message").digest()
signature = ecdsa_sign(keys.private_key, digest)
assert ecdsa_verify(keys.public_key, digest, signature)
```

## What it does not do

This is a library only: it has no command-line program. It does not read
version information embedded in executables, does not manage tray icons,
windows or timers, and its elliptic-curve code is plain integer arithmetic
with no protection against timing attacks.

## Tests

```
pip install .[test]
pytest
```