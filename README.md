# dicutil

Small building blocks for working with binary morphological-analysis
dictionaries. It has no dependencies outside the standard library.

## Installation

```
pip install dicutil
```

## What is inside

### `dicutil.cow_array`

`CowArray` is a read-only-until-written sequence of little-endian integers.
It supports two element kinds: `"i16"` (signed 16-bit) and `"u32"`
(unsigned 32-bit). Any other kind raises `ValueError`.

- `CowArray(data=(), kind="i16")` and `CowArray.from_owned(data, kind)` make an
  array that owns a copy of the given values.
- `CowArray.from_bytes(data, offset, size, kind)` reads `size` elements
  starting at byte `offset`. When `offset` is a multiple of the element size,
  the array reads the bytes in place through a `memoryview`. Otherwise it
  decodes them into its own copy. A negative offset or size, or a range past
  the end of the data, raises `ValueError`.
- `set(offset, value)` replaces one element. If the array still reads shared
  bytes, it first copies them, so the bytes it came from are never changed.
  A value that does not fit the element kind raises `ValueError`. An index
  out of range raises `IndexError`.
- `is_owned` tells whether the array holds its own copy. `kind` gives the
  element kind.
- It behaves as a `Sequence`: `len`, indexing (negative indices included),
  slicing to a list, and iteration. It compares equal to another `CowArray`,
  a list or a tuple with the same values.

The module also has `is_aligned(offset, alignment)`. It returns whether
`offset` is a multiple of `alignment`. It raises `ValueError` if `alignment`
is not a power of two.

### `dicutil.fxhash`

This module has the Fx hash, a fast 64-bit hash that works a word at a time.
It is **not** cryptographic. Do not use it where collision attacks matter.

- `hash_word(hash_value, word)` mixes one unsigned 64-bit word into the state
  and returns the new state.
- `write64(hash_value, data)` mixes a byte string into the state. It reads
  the bytes as little-endian 8-byte words, then a 4-, 2- and 1-byte tail.
- `FxHasher64` is a streaming hasher whose `state` starts at 0. It has
  `write(data)`, `write_u8`, `write_u16`, `write_u32`, `write_u64`,
  `write_usize` and `finish()`. `finish()` returns the current state. Each
  `write_uN` mixes in the value as one word. It raises `ValueError` if the
  value is outside the unsigned N-bit range (64 bits for `write_usize`).

## Example

```python
from dicutil.cow_array import CowArray
from dicutil.fxhash import FxHasher64

raw = bytes([1, 0, 2, 0, 3, 0])
arr = CowArray.from_bytes(raw, 0, 3, "i16")
print(list(arr))        # [1, 2, 3]
print(arr.is_owned)     # False
arr.set(1, -5)
print(list(arr))        # [1, -5, 3]
print(arr.is_owned)     # True

hasher = FxHasher64()
hasher.write("東京".encode("utf-8"))
hasher.write_u32(7)
print(hasher.finish())
```

## What it does not do

The package does not read or parse dictionary files, and it does not check
the values stored in them, such as connection ids or costs. It does not look
up or register parts of speech either. It gives you only the array and
hashing primitives described above.

## Running the tests

```
pip install -e .[test]
pytest
```