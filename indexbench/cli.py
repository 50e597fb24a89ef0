"""Command-line demonstrations of the B+ tree and the chained hash table."""

from __future__ import annotations

import re
import sys
import time
from typing import Any, Callable, Iterator, List, Optional, Sequence, Tuple

from indexbench.bplustree import BPlusTree, UpdateOutcome
from indexbench.hashtable import ChainedHashTable, first_char_hash, int_hash

RULE = "------------------------------------------"
INT_HASH_DATA = "data/int500hash.txt"
STRING_HASH_DATA = "data/string500hash.txt"

_INT_PATTERN = re.compile(r"[+-]?\d+")


def _timed(func: Callable[..., Any], *args: Any) -> Tuple[Any, int]:
    start = time.perf_counter_ns()
    result = func(*args)
    return result, (time.perf_counter_ns() - start) // 1000


def _read_ints(text: str) -> Iterator[int]:
    """Yield leading integers, stopping at the first word that is not one."""
    for word in text.split():
        match = _INT_PATTERN.match(word)
        if match is None:
            return
        yield int(match.group())
        if match.end() != len(word):
            return


def _args(argv: Optional[Sequence[str]]) -> List[str]:
    return list(sys.argv[1:] if argv is None else argv)


# ------------------------------------------------------------------ B+ tree


def _tree_remove(tree: BPlusTree, key: Any) -> None:
    if tree.remove(key):
        print(f"Hapus {key} berhasil.")
    else:
        print(f"{key} tidak ditemukan.")


def _tree_update(tree: BPlusTree, old_key: Any, new_key: Any) -> None:
    outcome = tree.update(old_key, new_key)
    if outcome is UpdateOutcome.UPDATED:
        print(f"Hapus {old_key} berhasil.")
        print(f"{old_key} di update menjadi {new_key}")
    elif outcome is UpdateOutcome.ALREADY_EXISTS:
        print("Nilai sudah ada.")
    else:
        print(f"{old_key} tidak ditemukan.")


def _tree_report(
    tree: BPlusTree,
    updates: Sequence[Tuple[Any, Any]],
    removals: Sequence[Any],
    bounds: Tuple[Any, Any],
    worst: Any,
    best: Any,
) -> None:
    for old_key, new_key in updates:
        _tree_update(tree, old_key, new_key)
    for key in removals:
        _tree_remove(tree, key)

    print("B+ Tree:")
    print(tree.display(), end="")

    low, high = bounds
    print(f"\nRange query ({low} - {high}): ", end="")
    print("".join(f"{key} " for key in tree.range_query(low, high)))

    for label, key in (("Worst Case", worst), ("Best Case", best)):
        result, micros = _timed(tree.search, key)
        print(f"\n{label}: {key}")
        status = "Ditemukan" if result.found else "Tidak ditemukan"
        print(f"{status} pada iterasi ke {result.comparisons}")
        print(f"Waktu: {micros} us")


def bplus_int_main(argv: Optional[Sequence[str]] = None) -> int:
    """Load integers into a B+ tree from a file and run the fixed demonstration."""
    args = _args(argv)
    if len(args) != 1:
        print("Usage: bplus-int <filename.txt>", file=sys.stderr)
        return 1
    path = args[0]
    tree = BPlusTree(4)
    try:
        with open(path, encoding="utf-8") as handle:
            for value in _read_ints(handle.read()):
                tree.insert(value)
    except OSError:
        print(f"Error membuka file {path}", file=sys.stderr)
        return 1

    _tree_report(
        tree,
        updates=[(1200, 15), (15, 8), (9999, 8)],
        removals=[8, 1324],
        bounds=(5, 50),
        worst=999999,
        best=1,
    )
    return 0


def bplus_string_main(argv: Optional[Sequence[str]] = None) -> int:
    """Load one name per line into a B+ tree and run the fixed demonstration."""
    args = _args(argv)
    if len(args) != 1:
        print("Usage: bplus-string <filename.txt>", file=sys.stderr)
        return 1
    path = args[0]
    tree = BPlusTree(4)
    try:
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                if line:
                    tree.insert(line)
    except OSError:
        print(f"Error membuka file {path}", file=sys.stderr)
        return 1

    _tree_report(
        tree,
        updates=[("IZUL", "Izul"), ("Izul", "Budi"), ("konz", "Budi")],
        removals=["Budi", "azril"],
        bounds=("A", "M"),
        worst="Zyaire",
        best="Aarya",
    )
    return 0


# --------------------------------------------------------------- hash table


def _probe_status(found: bool, iterations: int) -> str:
    if found:
        return f"Status: Ditemukan pada iterasi ke {iterations}"
    return f"Status: Tidak ditemukan setelah {iterations} iterasi"


def _hash_searches(table: ChainedHashTable, cases: Sequence[Tuple[str, Any, str]]) -> None:
    for label, key, shown in cases:
        print(f"{label}: Mencari {shown}")
        probe, micros = _timed(table.search, key)
        print(_probe_status(probe.found, probe.iterations))
        print(f"Waktu yang dibutuhkan: {micros} microseconds\n")


def _load_table(
    path: str, error: str, table: ChainedHashTable, parse: Callable[[str], Iterator[Any]]
) -> bool:
    try:
        with open(path, encoding="utf-8") as handle:
            for key in parse(handle.read()):
                table.insert(key)
    except OSError as exc:
        print(f"{error}: {exc.strerror}", file=sys.stderr)
        return False
    return True


def hashtable_int_main(argv: Optional[Sequence[str]] = None) -> int:
    """Load integers into the chained hash table and run the fixed demonstration."""
    args = _args(argv)
    if len(args) > 1:
        print("Usage: hashtable-int [filename.txt]", file=sys.stderr)
        return 1
    path = args[0] if args else INT_HASH_DATA
    table = ChainedHashTable(int_hash)
    if not _load_table(path, "Error: Tidak dapat membuka file txt", table, _read_ints):
        return 1

    print("Hash table:")
    print(table.display(), end="")
    print(f"\n{RULE}")

    _hash_searches(table, [("Worst Case", 1, "key 1"), ("Best Case", 499, "key 499")])

    old_key, new_key = 488, 601
    print(f"Update key value {old_key} menjadi {new_key}")
    probe, micros = _timed(table.update, old_key, new_key)
    if not probe.found and new_key not in table:
        print(f"Gagal update: Nilai lama {old_key} tidak ada.")
    if probe.found:
        print(
            f"Status: Berhasil update, memerlukan {probe.iterations} iterasi "
            "untuk menemukan dan menghapus nilai lama."
        )
    else:
        print(
            f"Status: Gagal update, {old_key} tidak ditemukan setelah "
            f"{probe.iterations} iterasi."
        )
    print(f"Waktu yang dibutuhkan: {micros} microseconds\n")

    value = 77
    print(f"Delete key value {value}")
    probe, micros = _timed(table.remove, value)
    if probe.found:
        print(f"Status: Berhasil delete, memerlukan {probe.iterations} iterasi.")
    else:
        print(
            f"Status: Gagal delete, {value} tidak ditemukan setelah "
            f"{probe.iterations} iterasi."
        )
    print(f"Waktu yang dibutuhkan: {micros} microseconds")
    print(RULE)
    return 0


def hashtable_string_main(argv: Optional[Sequence[str]] = None) -> int:
    """Load whitespace-separated names into the hash table and run the demonstration."""
    args = _args(argv)
    if len(args) > 1:
        print("Usage: hashtable-string [filename.txt]", file=sys.stderr)
        return 1
    path = args[0] if args else STRING_HASH_DATA
    table = ChainedHashTable(first_char_hash)
    if not _load_table(
        path,
        "Error: Tidak dapat membuka file nilai.txt",
        table,
        lambda text: iter(text.split()),
    ):
        return 1

    print("Hash table awal:")
    print(table.display(), end="")
    print(f"\n{RULE}")

    _hash_searches(
        table,
        [
            ("Worst Case", "Maurice", 'nama "Maurice"'),
            ("Best Case", "Jagger", 'nama "Jagger"'),
        ],
    )

    old_key, new_key = "Major", "Lesley"
    print(f'Update nama "{old_key}" menjadi "{new_key}"')
    probe, micros = _timed(table.update, old_key, new_key)
    if probe.found:
        print(
            f"Status: Berhasil update, memerlukan {probe.iterations} iterasi "
            "untuk menemukan dan menghapus nama lama."
        )
    else:
        print(
            f'Status: Gagal update, "{old_key}" tidak ditemukan setelah '
            f"{probe.iterations} iterasi."
        )
    print(f"Waktu yang dibutuhkan: {micros} microseconds\n")

    name = "Lennox"
    print(f'Delete nama "{name}"')
    probe, micros = _timed(table.remove, name)
    if probe.found:
        print(f"Status: Berhasil delete, memerlukan {probe.iterations} iterasi.")
    else:
        print(
            f'Status: Gagal delete, "{name}" tidak ditemukan setelah '
            f"{probe.iterations} iterasi."
        )
    print(f"Waktu yang dibutuhkan: {micros} microseconds")
    print(RULE)
    return 0


# ----------------------------------------------------------------- dispatch

_COMMANDS = {
    "bplus-int": bplus_int_main,
    "bplus-string": bplus_string_main,
    "hashtable-int": hashtable_int_main,
    "hashtable-string": hashtable_string_main,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the demonstrations, chosen by the first argument."""
    args = _args(argv)
    if not args or args[0] not in _COMMANDS:
        names = "|".join(_COMMANDS)
        print(f"Usage: indexbench {{{names}}} [filename.txt]", file=sys.stderr)
        return 1
    return _COMMANDS[args[0]](args[1:])


if __name__ == "__main__":
    sys.exit(main())