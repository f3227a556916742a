# ftkit

Small helpers with precisely defined, C-library-like behaviour, written
with plain Python types. The package has no dependencies beyond the
standard library.

## Modules

- `ftkit.chars`: ASCII character tests and case conversion:
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower`. Each accepts a one-character string or an
  integer code; `to_upper` and `to_lower` return the same kind they got.
- `ftkit.convert`: `atoi` and `atol` parse leading whitespace, an
  optional sign and digits, stopping at the first other character (no
  digits gives 0); results wrap to 32-bit and 64-bit signed integers.
  `itoa` returns the decimal text of an int.
- `ftkit.search`: `strlen`, `strchr`, `strrchr`, `strnstr`, `strncmp`,
  `strlcpy`, `strlcat`. Strings are read up to their first `"\0"`.
  Searches return an index or `None`; `strlcpy` and `strlcat` return a
  tuple of the resulting buffer text and the length they tried to create.
- `ftkit.transform`: `split`, `strdup`, `substr`, `strjoin`, `strtrim`,
  `strmapi`, which return new strings or lists, and `striteri`, which
  edits a mutable buffer in place.
- `ftkit.memory`: byte-buffer helpers `memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`, `realloc`, `free_array`.
  `memmove` copies between two offsets within one `bytearray`; counts
  larger than a buffer raise `ValueError`, and `calloc` raises
  `OverflowError` for sizes beyond 64 bits.
- `ftkit.linked_list`: `Node` and `LinkedList`, a singly linked list
  with `add_front`, `add_back`, `last`, `for_each`, `map`, `clear`,
  `len()` and iteration.
- `ftkit.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`, writing
  to a text stream (standard output by default).
- `ftkit.printf`: `sprintf` and `printf` supporting
  `%c %s %p %d %i %u %x %X %%` with no flags, widths or precisions.
  An unknown conversion or a missing argument raises `FormatError`.
  `printf` returns the number of characters written.
- `ftkit.stack`: `Stack`, a doubly linked list of integers built from
  `StackNode`s, with `append`, `contains`, `clear`, `len()` and
  iteration; `is_error_syntax` and `is_error_duplicate` for validating
  input numbers; `abort_with_error`, which empties a stack, writes
  `Error` and raises `SystemExit(1)`.

## Examples

```python
from ftkit.transform import split, strtrim
from ftkit.convert import atoi
from ftkit.printf import sprintf

split("  hello  world ", " ")         # ['hello', 'world']
strtrim("xxhixx", "x")                # 'hi'
atoi("  -42abc")                      # -42
sprintf("%d items, %x hex", 7, 255)   # '7 items, ff hex'
```

```python
from ftkit.linked_list import LinkedList

items = LinkedList()
items.add_back(1)
items.add_back(2)
items.add_front(0)
list(items)      # [0, 1, 2]
len(items)       # 3
```

```python
from ftkit.stack import Stack, is_error_syntax, is_error_duplicate

stack = Stack([3, 1, 2])
is_error_syntax("-12")          # False
is_error_syntax("1a")           # True
is_error_duplicate(stack, 1)    # True
```

## What it does not do

`ftkit.stack` only stores and validates integers. It provides no stack
operations such as swapping, pushing between stacks or rotating, no
sorting of stacks, and no command-line program. `StackNode` carries
fields such as `index`, `push_cost` and `target_node` for a sorter to
use, but nothing in the package sets them.

## Running the tests

```
pip install -e ".[test]"
pytest
```