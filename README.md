# printfkit

A C-style `printf` formatter for Python. It builds its output one conversion at
a time and supports flags, field widths, precisions and length modifiers. It
also has a `%k` conversion that prints an unsigned number using a digit set
that you supply.

It is a library only. There is no command-line program.

## Usage

```python
from printfkit.printf import sprintf, snprintf, printf

sprintf("%5d|%-5s|%#x", 42, "ab", 255)
# '   42|ab   |0xff'

snprintf(4, "%s", "truncate me")
# ('tru', 11): the text that fits in 4 bytes with the terminator,
# and the full length of the output

sprintf("%k", 5, "01")
# '101'

printf("%.3f\n", 3.14159)
# writes '3.141\n' to file descriptor 1 and returns 6
```

## Functions

Every entry point lives in `printfkit.printf`. The `v...` variants take the
arguments as one iterable. The others take them as positional arguments.

- `render(fmt, args)` formats and returns a `printfkit.buffer.OutputBuffer`.
  Its `to_string()` gives the text, `len()` gives the number of characters,
  `truncated(size)` gives at most `size - 1` characters, and `write_to(fd)`
  writes the text as UTF-8 to a file descriptor.
- `sprintf(fmt, *args)`, `vsprintf(fmt, args)`, `asprintf(fmt, *args)` and
  `vasprintf(fmt, args)` return the formatted string.
- `snprintf(size, fmt, *args)` and `vsnprintf(size, fmt, args)` return a tuple
  `(text, full_length)`. Here `text` holds at most `size - 1` characters and is
  empty when `size` is 0 or less.
- `printf(fmt, *args)` and `vprintf(fmt, args)` flush `sys.stdout`, write the
  output to file descriptor 1, and return its length.
- `dprintf(fd, fmt, *args)` and `vdprintf(fd, fmt, args)` write to the given
  file descriptor and return the length. A short write raises `OSError`.

## Conversions

| Specifier | Argument | Output |
|-----------|----------|--------|
| `c` | a one-character `str`, or an integer code. The code is taken modulo 256, or used whole with `l`. | the character |
| `s` | a `str`, or `None` | the string, or `(null)` |
| `p` | an integer address, or `None` | `0x` followed by lowercase hex, or `(nil)` for 0 or `None` |
| `d`, `i` | an integer | signed decimal |
| `u` | an integer | unsigned decimal |
| `x`, `X` | an integer | unsigned hex, lowercase or uppercase |
| `o` | an integer | unsigned octal |
| `f`, `F` | a real number | fixed-point notation |
| `e`, `E` | a real number | exponential notation, with an exponent of at least two digits |
| `n` | a `printfkit.textconv.CountRef` | nothing. The count of characters so far is stored in `ref.value`. |
| `k` | an integer, then a digit-set `str` | unsigned number in that digit set |
| `%` | none | a literal `%` |

The flags are `-`, `+`, space, `#` and `0`. Width and precision are given as
digits or as `*`. A `*` takes an integer from the arguments, wrapped to a
32-bit signed value. The length modifiers are `hh`, `h`, `l`, `ll`, `j`, `z`,
`t` and `L`.

### Argument handling

- Integer arguments are wrapped to the width of the matching C type: 8 bits for
  `hh`, 16 for `h`, 32 with no modifier, and 64 for `l`, `ll`, `j`, `z` and
  `t`. For example, `sprintf("%u", -1)` gives `'4294967295'`.
- Float digits come from repeated scaling and truncation. The last digit is
  cut, not rounded. `inf` and `nan` print as lowercase for `f` and `e`, and as
  uppercase for `F` and `E`.
- For `%k`, the digit set must have at least two printable characters. It may
  not contain whitespace or repeat a character. If its first character is not
  `'0'`, the precision is set to 0 and the `0` flag does not zero-pad.

```python
from printfkit.printf import sprintf
from printfkit.textconv import CountRef

ref = CountRef()
sprintf("hello%n world", ref)
# ref.value == 5
```

## Errors

Formatting problems raise `printfkit.spec.FormatError`, which is a subclass of
`ValueError`. These include:

- a repeated flag, an unknown or missing conversion character, and a width or
  precision above 2147483647;
- a flag or length modifier that a conversion does not accept. For example,
  `#` with `d`, any flag or width with `%%`, and `L` with integer conversions;
- too few arguments, or an argument of the wrong kind;
- an invalid `%k` digit set;
- output longer than 2147483647 characters.