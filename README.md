# indexbench

Two in-memory index structures, each of which counts the work it does while
looking a key up:

- `BPlusTree` (in `indexbench.bplustree`): a B+ tree whose leaves are linked,
  so ordered iteration and range queries walk the leaf chain. A node splits
  once it holds `order` keys (default 4, at least 3, otherwise `ValueError`).
  Duplicate keys are ignored.
- `ChainedHashTable` (in `indexbench.hashtable`): a fixed-size hash table with
  separate chaining. New keys go to the front of their bucket's chain. The size
  defaults to 26 and must be positive. Two hash functions come with it:
  `int_hash`, the key modulo the table size, and `first_char_hash`, the code of
  the string's first character modulo the table size (an empty string goes to
  bucket 0).

Keys can be integers or strings; each structure should hold one kind of key.

## Installation

```
pip install .
```

## Library use

```python
from indexbench.bplustree import BPlusTree, UpdateOutcome
from indexbench.hashtable import ChainedHashTable, int_hash, first_char_hash

tree = BPlusTree(4)
for key in (10, 20, 5, 30, 25):
    tree.insert(key)         # True if added, False if already present

5 in tree                    # True
len(tree)                    # 5
list(tree)                   # keys in ascending order
tree.range_query(5, 25)      # [5, 10, 20, 25], bounds inclusive
result = tree.search(30)     # SearchResult(found, comparisons): how many
                             # keys of the leaf were compared
tree.update(20, 21)          # UpdateOutcome.UPDATED, ALREADY_EXISTS or NOT_FOUND
tree.remove(5)               # True if removed, False if absent
list(tree.leaves())          # one tuple of keys per leaf
print(tree.display(), end="")  # one line per leaf, "k -> k -> NULL"

table = ChainedHashTable(int_hash, 26)
table.insert(27)
probe = table.search(27)     # Probe(found, iterations): chain entries visited
table.update(27, 53)         # a Probe; fails if 53 exists or 27 is missing
table.remove(53)             # a Probe
table.buckets()              # every chain as a tuple, front first
print(table.display(), end="")  # one line per bucket, "i: k -> NULL"

names = ChainedHashTable(first_char_hash)
names.insert("Jagger")
```

`SearchResult` and `Probe` are true in a boolean context exactly when the key
was found.

## Commands

Each command loads a data file into one structure, runs a fixed set of
updates, removals and searches on it, and prints the structure together with
the probe counts and timings (in microseconds) of the searches. The messages
are in Indonesian.

```
indexbench-bplus-int numbers.txt        # whitespace-separated integers
indexbench-bplus-string names.txt       # one key per line, blank lines skipped
indexbench-hash-int [numbers.txt]       # default: data/int500hash.txt
indexbench-hash-string [names.txt]      # default: data/string500hash.txt
```

Integer input is read up to the first word that is not an integer. The default
files of the hash table commands are looked up relative to the current
directory.

`indexbench` runs any of the four by name, passing on the remaining arguments:

```
indexbench bplus-int numbers.txt
indexbench hashtable-string
```

Called without a known name it prints its usage and exits with status 1.

## What it does not do

Both structures live in memory only; nothing is saved to disk, and the
commands run their fixed scenario rather than taking operations from the user.

## Tests

```
pip install .[test]
pytest
```