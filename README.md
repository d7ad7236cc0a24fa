# easyfunc

Small, dependency-free helpers for everyday string and value handling. The
function names will be familiar to anyone who has used the classic
`chr`/`ord`/`trim`/`strpos`/`str_pad` family of functions. It is a library
only: there is no command-line tool.

## Installation

```
pip install easyfunc
```

## Modules

| Module                | Contents                                                               |
|-----------------------|------------------------------------------------------------------------|
| `easyfunc.chars`      | `char`, `ordinal`, `crc32`, `md5_hex`                                  |
| `easyfunc.trimming`   | `TrimType`, `trim_with`, `trim`, `ltrim`, `rtrim`                      |
| `easyfunc.compare`    | `strcasecmp`, `strncmp`                                                |
| `easyfunc.search`     | `strchr`, `strstr`, `strpos`, `strpbrk`, `strrchr`, `strcspn`          |
| `easyfunc.formatting` | `PadType`, `chunk_split`, `str_pad`, `str_repeat`, `strrev`, `ucwords` |
| `easyfunc.variables`  | `boolval`, `debug_zval_dump`, `is_int`                                 |

## Examples

```python
from easyfunc.chars import char, ordinal, crc32, md5_hex
from easyfunc.trimming import trim, ltrim
from easyfunc.search import strstr, strpos
from easyfunc.formatting import PadType, str_pad, chunk_split, ucwords

char(72)                 # 'H'
char(-159)               # 'a'  (negative values have 256 added)
char(128)                # ''   (NUL and non-ASCII values give '')
ordinal("Hello")         # 72
crc32("foo")             # 2356372769
md5_hex("a")             # '0cc175b9c0f1b6a831c399e269772661'

trim(" 12 3 ")           # '12 3'
ltrim("abAc 12", "bacA") # ' 12'

strstr("a@example.com", "@")        # '@example.com'
strstr("a@example.com", "@", True)  # 'a'
strpos("test string string", "string", 8)  # 12

str_pad("str_pad()", 20, "-+", PadType.BOTH)  # '-+-+-str_pad()-+-+-+'
chunk_split("abc", 1, "-")                    # 'a-b-c-'
ucwords("testing ucwords")                    # 'Testing Ucwords'
```

## Behaviour worth knowing

- The default trim set is space, `\r`, `\n`, `\t`, `\v`, NUL **and the digit
  `"0"`**. Pass an explicit cutset to avoid stripping zeros; an empty cutset
  strips nothing.
- `strcasecmp` returns `0` when the strings are equal ignoring case and `1`
  otherwise.
- `strncmp` compares at most `length` bytes (capped by the shorter string)
  and returns `-1`, `0` or `1`; a negative length raises `ValueError`.
- `strpos` returns `-1` when the needle is not found and raises `ValueError`
  for an offset past the end of the string.
- `strpbrk` searches for `char_list` as a whole substring and returns `None`
  when it is empty or absent.
- `strchr` and `strstr` return `""` when nothing is found.
- `str_pad` leaves the text unchanged for an unknown pad type; with
  `PadType.BOTH` the smaller half goes on the left.
- `boolval` is `False` only for `""` and the integer `0`; `is_int` excludes
  booleans; `debug_zval_dump` prints `repr()` of each argument on its own line.

## Running the tests

```
pip install -e ".[test]"
pytest
```