# libft

A small collection of low-level helpers modelled on the classic C string and
memory routines, with Python behaviour: functions return values instead of
writing through pointers, strings are read up to their first `"\0"`, and
byte-level operations work in place on `bytearray` or `memoryview`.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `libft.chars`: classification and case mapping of single ASCII characters,
  given as an integer code or a one-character string (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`). The case
  mappings return a value of the same kind they were given.
- `libft.memory`: byte-buffer helpers (`bzero`, `calloc`, `memset`, `memcpy`,
  `memmove`, `memchr`, `memcmp`). `memmove(buf, dst, src, n)` copies between
  two offsets of one buffer, overlapping or not. A negative length raises
  `ValueError`; a span past the end of a buffer raises `IndexError`.
- `libft.strings`: parsing and searching (`atoi`, `itoa`, `strlen`, `strchr`,
  `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`). Searches return an
  index or `None`; `strlcpy` and `strlcat` return the new contents together
  with the length of the string they tried to create.
- `libft.textops`: building new strings (`strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`) and `striteri`, which calls a function on
  each item of a mutable sequence and stores any value it returns.
- `libft.output`: writing to file descriptors (`putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd`).
- `libft.printf`: a minimal formatter for the conversions `d i c x X u s p %`.
  `sprintf` returns the text; `printf` writes it to standard output and
  returns its length. The `format_*` helpers render a single value. Any other
  character after `%` yields a lone `%`.
- `libft.linkedlist`: a singly linked list (`Node`, `LinkedList` with
  `push_front`, `push_back`, `last`, `iter`, `clear`, `map`, `len()` and
  iteration over contents).
- `libft.lines`: reading a file descriptor line by line as `bytes`
  (`LineReader`, `get_next_line`, `iter_lines`), with separate pending data
  kept for each descriptor.

## Examples

```python
from libft.strings import atoi, itoa, strlcpy
from libft.textops import split, strtrim
from libft.printf import sprintf

atoi("   -42abc")                 # -42
itoa(-2147483648)                 # "-2147483648"
strlcpy("hello", 3)               # ("he", 5)
split("  hello  world ", " ")     # ["hello", "world"]
strtrim("xxhixx", "x")            # "hi"
sprintf("%s is %d (%x)", "answer", 42, 42)   # "answer is 42 (2a)"
```

```python
from libft.memory import memmove

buf = bytearray(b"abcdef")
memmove(buf, 2, 0, 4)             # bytearray(b"ababcd")
```

```python
import os
import sys
from libft.lines import iter_lines

fd = os.open("notes.txt", os.O_RDONLY)
try:
    for line in iter_lines(fd):
        sys.stdout.buffer.write(line)
finally:
    os.close(fd)
```

```python
from libft.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
items.push_back(4)
len(items)                                 # 5
list(items.map(lambda x: x * 10, None))    # [0, 10, 20, 30, 40]
```

## What it does not do

This is a library only: it installs no command-line program. `printf`
supports no flags, widths or precisions, only the conversions listed above.