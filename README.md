# hashcache

Small, self-contained container types, and a few helpers for timing a string
dictionary built on them:

- `hashcache.dynamic_array.DynamicArray` – an array whose length is its
  capacity (unset slots hold `None`). It can be resized with `recapacity`,
  shrunk by one with `delete`, and its contents exchanged with another array
  with `swap`.
- `hashcache.linked_list.LinkedList` – a doubly linked list. `append`,
  `prepend` and `insert_at` return the new `Node`; `erase(node)` removes a
  node in place and returns the one after it.
- `hashcache.dictionary.HashDictionary` – a separately chained hash table
  driven by a hash function you supply, with a fill factor and a growth
  factor. It grows when it fills up and shrinks again as entries are removed.
- `hashcache.lru_cache.LRUCache` – a bounded cache in front of a loader
  function, indexed through a `HashDictionary`.
- `hashcache.array_sequence` – `MutableArraySequence` and
  `ImmutableArraySequence`, array-backed sequences built on the abstract
  `ArraySequence`.
- `hashcache.records`, `hashcache.operations`, `hashcache.session` and
  `hashcache.workbench` – validating `key value` text records, timing
  dictionary operations and tabulating the results.

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Hash dictionary

```python
from hashcache.dictionary import HashDictionary
from hashcache.records import string_hash

names = HashDictionary(string_hash, 0.7, 2, 0)
names.add("alice", "first")
names.add("bob", "second")

assert "alice" in names
assert names.get("bob") == "second"

names["alice"] = "updated"   # replaces the value, or adds a new key
names.remove("bob")
assert len(names) == 1
```

`add` with a key that is already present, and `get`, `remove` or `names[key]`
with a key that is absent, raise `KeyError`. The constructor raises
`ValueError` for a fill factor outside `(0, 1)`, a growth factor of 1 or less,
a negative capacity or a missing hash function.

The table grows by the growth factor once the number of entries exceeds
`fill_factor * capacity`, and shrinks by it once the number falls below
`fill_factor * capacity / increase_factor`. `capacity` is the number of
buckets. Iterating yields keys; `items()` yields `Entry` objects whose `key`
is fixed and whose `value` can be reassigned in place. `erase(entry)` removes
an entry obtained from `items()` without resizing the table.

## Cache

```python
from hashcache.lru_cache import LRUCache

table = [10, 20, 30, 40, 50]

def load(index):
    return table[index]

cache = LRUCache(load, 3, lambda key: key)
for key in (0, 1, 2, 3):
    cache.get(key)

assert len(cache) == 3
assert cache.keys() == [3, 1, 0]
```

The cache keeps an access history. A freshly loaded key is placed at its
front; a cache hit moves the key to its back. When the cache is full, the key
at the front is evicted before a new one is loaded. `keys()` lists the history
front first, so its first key is the next to be evicted. `items()` yields
`(key, value)` pairs.

If the loader raises `LookupError` (or any other exception), it propagates
from `get` and the cache is left unchanged. A capacity of zero or less raises
`ValueError`.

## Array sequences

```python
from hashcache.array_sequence import ImmutableArraySequence, MutableArraySequence

mutable = MutableArraySequence([1, 2, 3])
mutable.append(4)
assert list(mutable) == [1, 2, 3, 4]

frozen = ImmutableArraySequence([1, 2, 3])
longer = frozen.append(4)
assert list(frozen) == [1, 2, 3]
assert list(longer) == [1, 2, 3, 4]
```

`set`, `append`, `prepend`, `insert_at`, `delete` and `concat` return the
sequence that holds the result: the sequence itself for the mutable variant, a
new one for the immutable variant. `subsequence(start, end)` always returns a
new sequence. Appending to a full sequence doubles its `capacity`.

## Text records and timed sessions

`hashcache.records` provides:

- `is_valid_record(line, max_length=10)` – a line of exactly one space with a
  non-empty key and value, each at most `max_length` characters.
- `is_valid_key(key)` – at most ten characters and no spaces.
- `string_hash(text)` – the sum of the UTF-16 code units of `text` modulo
  10**9 + 7.
- `random_token(length=10, rng=None)` – random characters drawn from the
  first 61 of `A–Z`, `a–z`, `0–9`.

`hashcache.operations` defines the `Operation` enum (`ADD`, `GET`, `REMOVE`),
the frozen `Measurement` dataclass (operation, time in seconds, size) and
`OperationTable`, a three-column table with `cell`, `set_cell`, `header`,
`insert_rows` and `record`.

`hashcache.session.DictionarySession` keeps a string `HashDictionary` and an
`OperationTable`:

```python
from hashcache.session import DictionarySession

session = DictionarySession()
session.add_records("alpha one\nbeta two")
assert session.lookup("beta") == "two"
session.update_value("beta", "three")
session.remove_records("alpha\nbeta three")
assert session.dump_lines() == []
assert len(session.table) == 3
```

Every batch of additions, value update and batch of removals records one row.
Malformed lines, duplicate keys, missing keys and mismatched values raise
`SessionError`; a batch stopped part way keeps the changes made before the
failing line and records no row.

`hashcache.workbench` adds `random_records(count, max_length=10, rng=None)`
for sample input, `write_text_file(name, text)` (writes `<name>.txt` and
raises `FileExistsError` rather than overwrite), `read_text_lines(path)`
(yields lines without their endings, splitting lines longer than 1023
characters) and `plot_series(table)`, which groups the rows of an
`OperationTable` into `(size, time)` points under `"Add"`, `"Get"` and
`"Remove"`.

## What the package does not do

There is no command-line program and no graphical interface: everything is
used from Python code. `plot_series` only prepares the data points; drawing a
chart is left to whatever plotting tool you choose.