# miniprintf

`miniprintf` is a small printf-style formatter. It handles a fixed set of
conversions and returns the number of characters it wrote. The package also
has helpers for characters, strings, byte buffers and singly linked lists.

## Installation

```
pip install .
```

To get the test dependencies, install the `test` extra (`pip install .[test]`).

## Formatting

```python
from miniprintf.formatting import sformat, printf

sformat("%s has %d items", "cart", 3)   # 'cart has 3 items'
sformat("%x / %X", 255, 255)            # 'ff / FF'
sformat("%u", -1)                       # '4294967295'
sformat("%p", 0)                        # '0x0'
sformat("%s", None)                     # '(null)'

count = printf("Hello, %s!\n", "world") # writes to stdout, returns 14
```

`printf` takes an optional `file=` keyword. Output goes to that text stream
when it is given and to standard output when it is not.

| Spec | Meaning |
|------|---------|
| `%c` | a one-character string, or an integer taken as a byte value |
| `%s` | a string; `None` is printed as `(null)` |
| `%p` | `0x` and then lower-case hex. `None` prints as `0x0`. An object that is not an integer is shown by its `id()` |
| `%d`, `%i` | a signed 32-bit decimal |
| `%u` | an unsigned 32-bit decimal |
| `%x`, `%X` | unsigned 32-bit hex, in lower or upper case |
| `%%` | a literal percent sign |

Integers are wrapped to 32 bits, or to 64 bits for `%p`. The formatter has no
flags, widths or precisions. An unknown conversion character prints nothing
and uses up no argument. A `%` at the very end of the format ends the output.
`TypeError` is raised when there are too few arguments or when an argument has
the wrong type.

The number conversions can also be called on their own: `itoa`,
`format_unsigned`, `format_hex(n, upper=False)` and `format_pointer`.

## Other modules

- `miniprintf.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`. Each
  writes to a text stream given as `stream`, or to standard output if none is
  given.
- `miniprintf.chars`: `atoi` parses leading whitespace, an optional sign and
  digits, and returns the result as a 32-bit signed value. The module also has
  `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
  `to_lower`, which accept either a character or an integer code.
- `miniprintf.strsearch`: `strlen`, `strdup`, `strncmp`, `strchr`, `strrchr`
  and `strnstr`. A string is treated as ending at its first NUL. The search
  functions return an index, or `None` when there is no match. `strlcpy(src,
  size)` and `strlcat(dst, src, size)` return a tuple of the resulting text and
  the length the full result would have had.
- `miniprintf.strbuild`: `substr`, `strjoin`, `strtrim`, `split` (which drops
  empty words), `strmapi` and `striteri`.
- `miniprintf.memory`: helpers for `bytearray` buffers. These are `memset`,
  `memchr`, `memcpy`, `memmove(buf, dst, src, n)` (which moves bytes between
  offsets inside a single buffer), `memcmp`, `bzero` and `calloc`. Counts that
  run past the end of a buffer raise `ValueError`.
- `miniprintf.linkedlist`: `LinkedList`, which supports `append`, `prepend`,
  `last`, `pop_first`, `clear`, `for_each`, `map`, `len()` and iteration.
  `pop_first` and `clear` accept an optional `on_delete` callback.

## Demo

The following command shows each conversion next to Python's own `%`
formatting, along with the character count of each line:

```
miniprintf-demo
```