# vfcutils

A small collection of general-purpose helpers:

- `vfcutils.hashtable`: `HashTable` and `HashTableEntry`. `HashTable` is a hash table with string keys, a fixed number of buckets, separate chaining and a hash function that you supply.
- `vfcutils.linked_list`: `LinkedList` and `Node`. `LinkedList` is a doubly linked list with node handles, index operations, sorting, searching and concatenation.
- `vfcutils.json_utils`: `escape()` turns text into the body of a JSON string literal.
- `vfcutils.log_utils`: level-filtered logging that prints one JSON object per line to stdout.
- `vfcutils.math_utils`: `clamp`, `clampf`, `maximum`, `minimum` and the immutable 2D vector `Vec2`.
- `vfcutils.rand_utils`: `seed`, `rand_int` and `rand_float`.

The package needs only the standard library.

## Installation

```
pip install vfcutils
```

## Hash table

```python
from vfcutils.hashtable import HashTable

def simple_hash(key):
    h = 0
    for ch in key:
        h = h * 31 + ord(ch)
    return h

table = HashTable(10, simple_hash)
table.set("foo", 42)
table.set("bar", 99)
table.set("foo", 123)          # replaces the value

table.get("foo")               # 123
table.get("missing")           # None
len(table)                     # 2
"bar" in table                 # True
table.keys()                   # keys in bucket order
table.values()                 # values in the same order
table.entries()                # HashTableEntry objects with .key and .value
table.clear(print)             # passes each value to the callback, then empties the table
```

Notes:

- The number of buckets is fixed when the table is created. A size below 1 raises `ValueError`.
- `set()` raises `ValueError` if the key or the value is `None`.
- `keys()`, `values()` and `entries()` list the buckets in order. Within a bucket, entries come in the order they were inserted.
- There is no method that removes a single key. `clear()` removes every entry.

## Linked list

```python
from vfcutils.linked_list import LinkedList

items = LinkedList([3, 1, 2])
items.add(5)
items.insert_at(0, 9)
items.sort(lambda a, b: a.value - b.value)
list(items)                    # [1, 2, 3, 5, 9]

evens = items.select(lambda node, ctx: node.value % 2 == 0, None)
list(evens)                    # [2]
items.find(lambda node, ctx: node.value > ctx, 2)   # 3
```

Notes:

- `LinkedList(values)` stops at the first `None` in `values`. `LinkedList.from_array(array, count)` takes the first `count` items, including any `None`. It raises `ValueError` if there are fewer than `count` items.
- Iterating over a list yields its values. `nodes()`, `head()`, `tail()`, `at(index)` and `random()` return `Node` objects, which have `.value`, `.previous` and `.next`.
- `at()`, `remove_at()` and `insert_at()` raise `IndexError` for an index out of range. For `insert_at()`, an index equal to the length appends. `random()` on an empty list also raises `IndexError`.
- `remove(node)` raises `ValueError` for a node that belongs to another list.
- `remove_after(index)` detaches every node after `index` and returns them as a list. `free_at(index, on_free)`, `free_after(index, on_free)` and `clear(on_free)` remove nodes and pass each removed node to `on_free`. An index out of range leaves the list unchanged.
- `for_each(func)` and `nodes()` allow the current node to be removed while iterating.
- `sort(compare)` is stable and takes a three-way comparison of two nodes.
- `concat(other)` moves every node of `other` onto the end of this list and leaves `other` empty.

## Logging

```python
from vfcutils import log_utils
from vfcutils.log_utils import Level

log_utils.set_min_level(Level.INFO)
log_utils.info("server", "listening on port %d", 8080)
# { "timestamp": "2024/01/01 12:00:00:000", "level": "INFO", "context": "server", "content": "listening on port 8080" }
log_utils.debug("server", "not printed")
```

- The message is formatted with `%`-style arguments.
- The context and the content are escaped with `json_utils.escape`.
- The timestamp is local time, in the form `YYYY/MM/DD HH:MM:SS:mmm`.
- `error` messages are always printed, whatever the minimum level.
- `format_event(level, context, message, *args)` returns the line without printing it. A level outside `Level` is shown as `UNKNOWN`.

## JSON escaping

```python
from vfcutils.json_utils import escape

escape('say "hi"\n')           # 'say \\"hi\\"\\n'
escape("\x01")                 # '\\u0001'
escape(None)                   # 'null'
```

## Math

```python
from vfcutils.math_utils import Vec2, clamp, clampf, maximum, minimum

clamp(15, 0, 10)               # 10.0 (the arguments are truncated to integers)
clampf(0.5, 0.0, 1.0)          # 0.5
maximum(2.0, 3.0)              # 3.0
minimum(2.0, 3.0)              # 2.0
Vec2(1.0, 2.0) + Vec2(3.0, 4.0)   # Vec2(x=4.0, y=6.0)
Vec2(3.0, 4.0) - Vec2(1.0, 1.0)   # Vec2(x=2.0, y=3.0)
Vec2(1.0, 2.0).scale(2.0)      # Vec2(x=2.0, y=4.0)
```

## Random numbers

```python
from vfcutils.rand_utils import rand_int, rand_float, seed

rand_int(1, 6)                 # 1..6 inclusive
rand_float(0.0, 1.0)           # in [0.0, 1.0)
rand_int(5, 5)                 # 5: when max is not above min, min is returned
```

The generator is seeded from the current time on first use. Call `seed()` to reseed it from the current time.

## Running the tests

```
pip install -e ".[test]"
pytest
```