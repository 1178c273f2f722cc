# utilkit

Small, dependable helpers for everyday Python code:

- aggregates and membership checks over sequences,
- set-style operations (difference, intersection, symmetric difference,
  union), each also available with a custom equality function,
- index lookups, mapping with indexes, reversal and deletion by position,
- column values that are stored as JSON or as AES-GCM encrypted bytes,
- thread-safe containers: a map, an object pool and an atomic value,
- a builder that turns a flat list of records into a nested tree.

## Installation

```
pip install utilkit
```

To run the test suite, install the test extra:

```
pip install "utilkit[test]"
pytest
```

## Sequences

Functions that take sequences also accept `None` and treat it as empty.

### Aggregates — `utilkit.aggregate`

```python
from utilkit.aggregate import max_of, min_of, sum_of

max_of([2, 3, 1])   # 3
min_of([3, 1, 2])   # 1
sum_of([1, 2, 3])   # 6
sum_of([])          # 0
```

`max_of` and `min_of` raise `ValueError` when there is no value. Take care
with floating-point precision when comparing or summing floats.

### Membership — `utilkit.contains`

```python
from utilkit.contains import contains, contains_all, contains_any, contains_func

contains([1, 4, 6, 2, 6], 4)                      # True
contains_any([1, 2, 3], [3, 6])                   # True
contains_all([1, 2, 3], [3, 1, 4])                # False
contains_func([1, 2, 3], 3, lambda a, b: a == b)  # True
```

`contains_any_func` and `contains_all_func` take an `equal(a, b)` callable
for values that are not hashable or need their own notion of equality.
Prefer the plain versions when the values are hashable.

### Set operations — `utilkit.setops`

```python
from utilkit.setops import diff_set, intersect_set, symmetric_diff_set, union_set

sorted(diff_set([1, 3, 2, 2, 4], [3, 4, 5, 6]))          # [1, 2]
sorted(intersect_set([1, 2, 3, 3, 4], [1, 1, 3]))        # [1, 3]
sorted(symmetric_diff_set([1, 3, 4, 2], [2, 5, 7, 3]))   # [1, 4, 5, 7]
sorted(union_set([1, 3, 4, 5], [1, 4, 7]))               # [1, 3, 4, 5, 7]
```

All results are de-duplicated and returned as lists. Treat their order as
unspecified and sort the result when order matters. `diff_set_func`,
`intersect_set_func`, `symmetric_diff_set_func` and `union_set_func` take an
extra `equal` callable and work with any values.

### Indexes — `utilkit.index`

```python
from utilkit.index import index, index_all, last_index

index([1, 2, 3], 1)                  # 0
index([1, 2, 3], 4)                  # -1
last_index([0, 1, 3, 4, 2, 0], 0)    # 5
index_all([1, 2, 3, 4, 5, 3, 9], 3)  # [2, 5]
```

`-1` means "not found". `index_func`, `last_index_func` and
`index_all_func` take an `equal` callable.

### Transformations — `utilkit.transform`

```python
from utilkit.transform import delete, filter_map, map_indexed, reverse, reverse_self

map_indexed([1, 2, 3], lambda idx, v: str(v))            # ['1', '2', '3']
filter_map([1, -2, 3], lambda idx, v: (str(v), v >= 0))  # ['1', '3']

reverse([1, 3, 2, 2, 4])    # [4, 2, 2, 3, 1], a new list

items = ["a", "b", "c"]
reverse_self(items)         # items is now ['c', 'b', 'a']

delete([1, 2, 3, 4], 2)     # [1, 2, 4], a new list
delete([1, 2, 3, 4], -1)    # raises IndexOutOfRangeError
```

The callable given to `filter_map` returns a pair: the converted value and
whether to keep it; every element is visited. `delete` raises
`IndexOutOfRangeError` (a subclass of `IndexError`, with `length` and
`index` attributes) for a negative index or one past the end.

## Column values

These classes turn a Python value into what a database column stores and
back. They do not talk to a database themselves: pass the result of
`value()` to your driver, and hand what the driver reads back to `scan()`.

### `utilkit.json_column.JsonColumn`

```python
from dataclasses import dataclass
from utilkit.json_column import JsonColumn

@dataclass
class User:
    name: str

JsonColumn(val=User("Tom"), valid=True).value()   # b'{"name":"Tom"}'

col = JsonColumn(factory=lambda d: User(**d))
col.scan('{"name": "Tom"}')
col.val, col.valid                                # (User(name='Tom'), True)
```

`value()` returns compact UTF-8 JSON as bytes, or `None` when the column is
not valid; dataclass values are encoded as objects. `scan(src)` accepts
`bytes` or `str`, decodes the JSON, passes it through `factory` when one is
given, and marks the column valid. `None` leaves the column untouched; any
other type raises `TypeError`.

### `utilkit.encrypt_column.EncryptColumn`

```python
import os
from utilkit.encrypt_column import EncryptColumn, ValueKind

key = os.urandom(32)
stored = EncryptColumn(val=123, valid=True, key=key, kind=ValueKind.INT32).value()

col = EncryptColumn(key=key, kind=ValueKind.INT32)
col.scan(stored)
col.val, col.valid                                # (123, True)
```

Values are encrypted with AES in GCM mode; `value()` returns a random
12-byte nonce followed by the sealed data. The key is `bytes` or a `str`
(encoded as UTF-8) of 16, 24 or 32 bytes. How the value is turned into
bytes is chosen by `kind` (a `ValueKind`): strings and bytes as they are,
fixed-width integers and floats as big-endian binary, and `JSON` for
anything else. When `kind` is `None` it is inferred from `val`: `str`,
`bytes`, `int` (as 64-bit `INT`), `float` (as `FLOAT64`), and JSON for
everything else, `bool` included. Give `kind` explicitly when scanning
into an empty column, and a `factory` to rebuild values decoded from JSON.

`value()` raises `InvalidColumnError` when the column is not valid and
`KeyLengthError` for a key of the wrong length. `scan(src)` accepts
`bytes` or `str`. For `bytes`, a failed decryption raises (for instance
`cryptography.exceptions.InvalidTag`); a `str` that cannot be decrypted is
ignored and leaves the column unchanged. Other source types raise
`TypeError`.

Keep the key out of your source code, for example in an environment
variable read at start-up.

## Concurrency helpers

- `utilkit.sync_map.SyncMap` — a thread-safe map. `load(key)` and
  `load_and_delete(key)` return `(value, present)`; `load_or_store(key,
  value)` returns `(value, loaded)`; `store` and `delete` change entries.
  A missing key and a key stored with `None` are told apart by the flag.
  `range(f)` calls `f(key, value)` on a snapshot of the entries and stops as
  soon as `f` returns a false value.
- `utilkit.pool.Pool` — an object pool built from a factory; `get()` returns
  a pooled object or makes a new one, `put(item)` hands one back.
- `utilkit.atomic.AtomicValue` — a value guarded by a lock, created as
  `AtomicValue(val)` (default `None`), with `load`, `store`, `swap` (returns
  the old value) and `compare_and_swap(old, new)`, which swaps when the
  current value is `old` or equal to it and returns whether it did.

## Trees — `utilkit.tree`

```python
from dataclasses import dataclass
from utilkit.tree import Builder, TreeConfig, get_parser

@dataclass
class Area:
    id: int
    parent_id: int
    name: str
    sort: int

areas = [Area(1, -1, "Country", 1), Area(2, 1, "North", 4), Area(3, 1, "South", 3)]
builder = Builder(1, TreeConfig())
builder.append(areas, get_parser(builder))
tree = builder.build()
[child["name"] for child in tree["children"]]     # ['South', 'North']
```

`TreeConfig` names the id, parent id, children and sort keys (by default
`"id"`, `"parentId"`, `"children"` and `"sort"`) and `deep`, the maximum
depth counting the root (0 for no limit). An empty `sort_key` keeps records
in the order they were appended; otherwise nodes are ordered by that key.

`Builder(root_id, config)` collects nodes; `append(items, parse)` turns each
item into a dictionary with `parse`, and `build()` links nodes to their
parents and returns the root. When no node carries the root id, the root is
a fresh dictionary holding only the id and the children. Nodes whose parent
is not known are left out.

`get_parser(builder)` returns a parser that calls `default_parser`, which
reads the public fields of a dataclass or plain object and turns each field
name into a lowerCamelCase key (`parent_id` and `ParentId` both give
`parentId`). It raises `TreeBuildError` when a record lacks the id, the
parent id or the configured sort key, and `TypeError` when the sort value is
not an `int`. A builder can be built only once; appending to it or building
it again afterwards raises `TreeBuildError`.