# labelenum

Small integer enumerations whose values are positions in a list of string
labels. The package also has helpers that turn such values into JSON, YAML,
text, binary and SQL representations and back.

Requires Python 3.10 or later and has no runtime dependencies.

## Installation

```
pip install labelenum
```

## Enumerations

`labelenum.enum.Enum` maps the values `0 .. n-1` to the labels it is given,
in order.

```python
from labelenum.enum import Enum

colors = Enum("red", "green", "blue")

colors.name_of(1)           # "green"
colors.name_of(7)           # "Invalid(7)"
colors.from_string("blue")  # 2
colors.all()                # [0, 1, 2]  (a new list)
colors.labels()             # ["red", "green", "blue"]  (a new list)
colors.labels_read_only()   # ("red", "green", "blue")  (the enum's own tuple)
len(colors)                 # 3
list(colors)                # [0, 1, 2]
```

`from_string` raises `ValueError` for a label that is not part of the enum.
Lookups are case sensitive.

## Wrapping a current value

A `labelenum.wrapper.Wrapper` holds a current value together with the enum
that names it, and converts that value to and from several representations.
Its `kind` is an `int` type (`int` itself or a subclass); decoded values are
converted to it.

`new_wrapper(kind, *labels)` builds a wrapper at value 0 and also records the
labels in the registry under `kind`.

```python
from labelenum.wrapper import Wrapper, new_wrapper


class Size(int):
    pass


size = new_wrapper(Size, "small", "medium", "large")
size.current = 2

str(size)         # "large"
size.to_json()    # '"large"'
size.to_yaml()    # "large"
size.to_text()    # b"large"
size.to_binary()  # b"\x00\x05large"  (2-byte big-endian length + label)
size.value()      # "large"           (for storing in an SQL column)

size.from_json('"medium"')
size.from_text(b"large")
size.from_binary(b"\x00\x05small")
size.scan(b"small")   # accepts str, bytes or None (None resets to 0)
```

`from_yaml(unmarshal)` takes a callable that is called with `str` and must
return the YAML node decoded as a string; its errors propagate unchanged.

Out-of-range values turn into `"Invalid"` in `to_json`, `to_yaml`, `to_text`
and `to_binary`, and into `"Invalid(<value>)"` in `str()`. `value()` raises
`InvalidEnumValueError` instead.

A wrapper constructed without an enum builds one on first use, from the
labels passed to it or, failing that, from the labels registered for its
kind (`ensure_enum()` does this explicitly). If neither exists, its methods
raise `EnumError`.

```python
w = Wrapper(Size)       # labels come from the registry
w.from_json('"medium"')
int(w.current)          # 1
```

## Registry

`labelenum.registry` keeps a thread-safe, process-wide mapping from a kind to
its labels. Kinds are keyed by name: a string is used as is, a type by its
`__name__`. Registering again replaces the earlier entry.

```python
from labelenum.registry import register, get_labels

register("Weekday", "mon", "tue", "wed")
get_labels("Weekday")   # ["mon", "tue", "wed"]
get_labels("Unknown")   # None
```

## Errors

The exception classes in `labelenum.errors` derive from `EnumError` and from
`ValueError`:

- `InvalidEnumValueError` – a label that is not part of the enum
  (`value`, `valid_values`)
- `BinaryDataTooShortError` – binary data shorter than the length prefix
  (`expected`, `actual`)
- `BinaryDataTruncatedError` – binary data shorter than its length prefix
  announces (`expected`, `actual`)
- `LabelTooLongError` – a label longer than 65535 bytes in binary form
  (`length`, `max_length`)

Other failures use built-in exceptions: `Enum.from_string` raises
`ValueError`, `from_json` raises `ValueError` for malformed JSON or a
non-string document, `from_yaml` raises `TypeError` when `unmarshal` returns
something other than a string, and `validation.validate_index` and
`validation.get_label` raise `IndexError`.

## Lower-level helpers

- `labelenum.marshal` – the conversions as plain functions taking a list of
  labels: `to_json`, `from_json`, `to_yaml`, `from_yaml`, `to_text`,
  `from_text`, `to_binary`, `from_binary`, `to_sql_value`, `from_sql_value`.
- `labelenum.lookup` – `string_to_index` (returns the index or `None`; it
  scans linearly up to 10 labels and uses a mapping above that),
  `linear_lookup`, `map_lookup` and `build_label_map`.
- `labelenum.validation` – `is_valid_index`, `validate_index`,
  `safe_get_label` and `get_label`.
- `labelenum.cache.CacheBuilder` – builds the value list and label mapping an
  enum keeps.

## What it does not do

The package only produces and consumes values: strings, bytes and Python
objects. It does not read or write YAML documents, talk to a database or
provide a command-line tool; pair it with the YAML or database library of
your choice.

## Running the tests

```
pip install -e ".[test]"
pytest
```