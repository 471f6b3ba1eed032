# typeconv

Forgiving conversions between Python values and fixed-width numeric
types, plus a handful of helpers that tend to be needed alongside them.

## Install

```
pip install typeconv
```

## What is inside

- `typeconv.convert`: `to_int`, `to_int8` … `to_uint64`, `to_float32`,
  `to_float64`, `to_bool`, `to_string`, `to_bytes`, `to_decimal` and the
  type-name driven `convert(value, "int64")`. Strings are parsed loosely.
  Hexadecimal (`"-0xFF"`), octal and decimal integers are accepted, and so
  are floats. Unparseable input gives the zero value. Results wrap to the
  width of the target type. The `*_strict` variants raise `ValueError` on
  bad input instead. `unmarshal_use_number` decodes JSON and keeps
  fractional numbers as `Decimal`.
- `typeconv.maps`: `to_map`, `map_deep`, `map_exclude`, `map_str_str`
  and `map_str_str_deep` turn dicts, dataclasses, named tuples, plain
  objects and key/value lists into plain dicts. Dataclass fields can be
  renamed or left out through field metadata (`json`, `c`, `p` and similar
  keys, with `-` and `omitempty`).
- `typeconv.bytype.convert_to` converts a value to the type of an
  example value.
- `typeconv.empty`: `is_empty` and `is_nil`.
- `typeconv.decutil`: `Decimal` helpers. It covers e8 fixed-point integers
  (`dec_to_e8_int`, `from_e8_int`), `almost_equal`, `between` and
  `pow_decimal`. `decimal_to_en_str` formats amounts with thousands
  separators.
- `typeconv.binary`: packing of numbers, booleans and strings into bytes.
  `little` and `big` cover each byte order, and `default` is
  little-endian. `bits` works with individual bits.
- `typeconv.deepcopy`: `copy_exported` copies through a JSON round trip,
  and `simple_copy_struct` copies same-named public fields one level deep.
- `typeconv.aes.AES`: AES-GCM encryption of text. The random 12-byte nonce
  is put in front of the ciphertext.

## Examples

```python
from decimal import Decimal

from typeconv.convert import to_int, to_bool, to_string
from typeconv.maps import to_map
from typeconv.decutil import decimal_to_en_str
from typeconv.binary import little

to_int("-0xFF")          # -255
to_bool("off")           # False
to_string(123.456)       # "123.456"
to_map({"a": 1, "b": 2}, "a")   # {"a": 1}
decimal_to_en_str(Decimal("10000"))   # "10,000.00"
little.decode_to_int16(little.encode_int16(-2))   # -2
```

```python
import os

from typeconv.aes import AES

box = AES(os.urandom(32))
sealed = box.encrypt("hello")
assert box.decrypt(sealed) == "hello"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```