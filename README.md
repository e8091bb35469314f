# basekit

A collection of small helpers that need nothing outside the standard library.
It covers ASCII character classification, 32-bit integer parsing and
formatting, byte-buffer operations, string routines, writing to file
descriptors, a minimal `printf`, reading a file descriptor line by line, and a
singly linked list.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `basekit.chars`

`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`.
Each accepts either an integer code or a one-character string. The
classifiers return `bool` and only recognise ASCII. `toupper` and `tolower`
return a value of the same kind they were given, and return it unchanged if
it is not an ASCII letter. A string longer than one character raises
`ValueError`, and a value of any other type raises `TypeError`.

### `basekit.numbers`

- `atoi(text)` skips leading whitespace, takes one optional `+` or `-`, and
  reads digits until the first non-digit. Text without digits gives `0`. A
  value outside the 32-bit signed range raises `OverflowError`.
- `itoa(n)` returns the decimal text of `n`. It raises `OverflowError` if `n`
  is outside the 32-bit signed range.

`INT_MAX` and `INT_MIN` are also provided.

### `basekit.memory`

These work on `bytes`, `bytearray` and `memoryview`:

- `bzero(buf, n)` sets the first `n` bytes to zero.
- `memset(buf, c, n)` fills the first `n` bytes with `c` mod 256.
- `memcpy(dest, src, n)` copies the first `n` bytes of `src` into `dest`.
- `memmove(buf, dest_offset, src_offset, n)` copies within one buffer. The
  two regions may overlap.
- `memcmp(a, b, n)` returns the difference of the first pair of bytes that
  differ, or `0`.
- `memchr(data, c, n)` returns the index of the first matching byte, or
  `None`.
- `calloc(nmemb, size)` returns a zeroed `bytearray`. It raises `MemoryError`
  when the request reaches `INT_MAX` bytes.

A negative length, or a length past the end of a buffer, raises `ValueError`.

### `basekit.strings`

- `split(s, c)` splits on a single character and drops empty pieces.
- `strlen(s)` returns the length. `None` counts as `0`, and a byte buffer
  stops at its first NUL.
- `strchr(s, c)` and `strrchr(s, c)` return the index of the first or last
  match, or `None`. Searching for NUL gives `len(s)`.
- `strncmp(s1, s2, n)` compares at most `n` characters and returns the
  difference of code points at the first mismatch.
- `strnstr(haystack, needle, length)` searches within the first `length`
  characters. An empty needle is found at `0`.
- `strdup(s)` returns a copy. A byte buffer is copied up to its first NUL.
- `substr(s, start, length)` returns at most `length` characters starting at
  `start`.
- `strjoin(s1, s2)` concatenates the two. `None` counts as empty.
- `strtrim(s, charset)` strips characters in `charset` from both ends.
- `strmapi(s, f)` builds a new string from `f(index, char)`.
- `striteri(chars, f)` replaces each item of a mutable sequence in place with
  `f(index, item)`.
- `strlcpy(dest, src, size)` and `strlcat(dest, src, size)` write
  NUL-terminated byte strings into a `bytearray`, keeping within `size`
  bytes. Each returns the length the untruncated result would have had.

### `basekit.output`

`putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`, `putnb_base_fd` and
`write_nb` write to a raw file descriptor and return the number of bytes
written.

- `putstr_fd(None, fd)` writes `(null)`.
- `putnb_base_fd(n, base, fd)` writes `n` using the digits of `base`. The base
  must have at least two distinct digits and no `+` or `-`; otherwise it
  raises `ValueError`.
- `putnbr_fd` accepts only 32-bit signed values.
- A failed write raises `OSError`.

### `basekit.printf`

`printf(fmt, *args)` supports `%c %s %p %d %i %u %x %X %%`. It writes to
standard output (descriptor 1) and returns the number of bytes written.

- `%d` and `%i` wrap to 32-bit signed. `%u`, `%x` and `%X` wrap to 32-bit
  unsigned.
- A `None` string prints `(null)`. A `None` or zero pointer prints `(nil)`.
- An unknown conversion or a trailing `%` raises `ValueError` before anything
  is written.
- Too few arguments raise `TypeError`.

### `basekit.lines`

- `LineReader(fd, buffer_size=4095)` reads a descriptor in chunks. Its
  `read_line()` returns the next line as `bytes`, including the newline, or
  `None` at end of input. The last line may lack a newline. Iterating a
  `LineReader` yields lines until the input is exhausted.
- `get_next_line(fd)` keeps one reader per descriptor between calls.

### `basekit.linked`

`Node` has a `content` and a `next`. `LinkedList(items=())` provides:

- `add_front`, `add_back`, `last`, `pop_front`, `clear`, `for_each` and
  `map`, plus `len()` and iteration over contents.
- `pop_front` and `clear` take an optional `delete` callback, which is called
  on each content as it is removed.
- `map(f, delete)` calls `delete` on every content already produced if `f`
  raises, then lets the exception propagate.

## Example

```python
from basekit.strings import split, strtrim
from basekit.numbers import atoi, itoa
from basekit.linked import LinkedList

split("  a b  c ", " ")        # ['a', 'b', 'c']
strtrim("--hi--", "-")         # 'hi'
atoi("   -42xyz")              # -42
itoa(-2147483648)              # '-2147483648'

items = LinkedList([1, 2, 3])
doubled = items.map(lambda x: x * 2, None)
list(doubled)                  # [2, 4, 6]
```

## What it does not do

basekit is a library only. It installs no command-line program.