# countprint

`countprint` is a small `printf` with a fixed set of conversions. It writes
to a text stream as it reads the format and returns the number of characters
it wrote.

## Conversions

| Specifier | Argument              | Output                                           |
|-----------|-----------------------|--------------------------------------------------|
| `%s`      | string or `None`      | the string up to its first NUL, or `(null)`      |
| `%c`      | character or int      | a single character; an int is taken as a byte    |
| `%d` `%i` | int                   | signed decimal; the value wraps to 32 bits       |
| `%u`      | int                   | unsigned decimal; the value wraps to 32 bits     |
| `%x`      | int                   | lowercase hexadecimal; wraps to 32 bits          |
| `%X`      | int                   | uppercase hexadecimal; wraps to 32 bits          |
| `%p`      | int address or `None` | `0x` and lowercase hex (64 bits), or `(nil)` for `None` or `0` |
| `%%`      | none                  | a literal `%`                                    |

`FormatError` (a subclass of `ValueError`) is raised when:

- the format is `None`;
- the character after `%` is not one of the specifiers above, or a `%` ends
  the format;
- a conversion has no argument left to consume.

Text written before the failing conversion has already gone to the stream
when the error is raised. Arguments left over after the format is done are
ignored. The format itself ends at its first NUL character. Flags, widths
and precisions are not supported.

## Usage

```python
import io
from countprint.printf import printf, format_string, FormatError

buf = io.StringIO()
count = printf("value %d, hex %x, name %s\n", -42, 255, "box", stream=buf)
assert buf.getvalue() == "value -42, hex ff, name box\n"
assert count == len(buf.getvalue())

format_string("%u", -1)       # '4294967295'
format_string("%p", None)     # '(nil)'
format_string("%p", 0x1f)     # '0x1f'
format_string("%s", None)     # '(null)'

try:
    format_string("bad %q")
except FormatError as exc:
    print(exc)                # invalid conversion specifier: %q
```

`printf` writes to `sys.stdout` when no `stream` is given. `format_string`
returns what `printf` would have written, as a string.

## Writers

The functions in `countprint.writers` each handle one conversion. Each takes
a value and an optional stream (default `sys.stdout`) and returns the number
of characters written:

- `put_char(c, stream)` – one character; raises `ValueError` for a string
  that is not exactly one character long
- `put_str(s, stream)`
- `put_nbr(n, stream)`
- `put_uint(n, stream)`
- `put_lower_hex(n, stream)`
- `put_upper_hex(n, stream)`
- `put_address_hex(n, stream)` – 64-bit lowercase hex without a prefix
- `put_address(address, stream)`

## What it does not do

`countprint` is a library only: it has no command-line tool, and it does not
implement the rest of the standard `printf` family (no padding, field widths,
precision, length modifiers or floating-point conversions).

## Running the tests

```
pip install -e ".[test]"
pytest
```