# transforms.py
from __future__ import annotations

# Variables
SHIFT_MODULUS = 26
CODE_UNIT_MASK = 0xFFFF
COMPLEXITY_MODULUS = 1_000_000
FACTOR_MODULUS = 100


# ========== Helpers ==========
# Every operation below works on UTF-16 code units, not code points:
# an astral character counts as two units and each half is shifted,
# sorted, sliced or xored on its own.

def code_units(s: str) -> list[int]:
    raw = s.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i:i + 2], "little") for i in range(0, len(raw), 2)]


def from_code_units(units: list[int]) -> str:
    raw = b"".join(u.to_bytes(2, "little") for u in units)
    return raw.decode("utf-16-le", "surrogatepass")


def unit_length(s: str) -> int:
    return len(s.encode("utf-16-le", "surrogatepass")) // 2


# ========== Transform ==========

def shift_characters(s: str, intensity: int) -> str:
    """
    Caesar-style shift: every code unit moves forward by ``intensity % 26``.
    Arithmetic stays within 16 bits, so the output may hold
    non-printable characters or unpaired surrogates.
    """
    if intensity < 0:
        raise ValueError(f"intensity must be non-negative, got {intensity}")
    step = intensity % SHIFT_MODULUS
    return from_code_units([(u + step) & CODE_UNIT_MASK for u in code_units(s)])


def reverse_text(s: str) -> str:
    return from_code_units(code_units(s)[::-1])


def sort_isbn_segments(isbn: str) -> str:
    """
    Sorts the code units of each hyphen-delimited segment on its own:
    'ISBN-3-zab' -> 'BINS-3-abz'.
    """
    return "-".join(from_code_units(sorted(code_units(part))) for part in isbn.split("-"))


# ========== Merge ==========

def merge_titles(first: str, second: str) -> str:
    # Short titles just contribute what they have; no padding.
    return from_code_units(code_units(first)[:3] + code_units(second)[-3:])


def interleave(a: str, b: str) -> str:
    ua, ub = code_units(a), code_units(b)
    out: list[int] = []
    for i in range(max(len(ua), len(ub))):
        if i < len(ua):
            out.append(ua[i])
        if i < len(ub):
            out.append(ub[i])
    return from_code_units(out)


def xor_strings(a: str, b: str) -> str:
    """
    Position-wise XOR of code units. The shorter string is zero-padded,
    so the result is as many units long as the longer input.
    """
    ua, ub = code_units(a), code_units(b)
    out: list[int] = []
    for i in range(max(len(ua), len(ub))):
        c1 = ua[i] if i < len(ua) else 0
        c2 = ub[i] if i < len(ub) else 0
        out.append(c1 ^ c2)
    return from_code_units(out)


# ========== Scoring ==========

def next_factor(factor: int, intensity: int) -> int:
    return (factor * intensity) % FACTOR_MODULUS


def fold_complexity(books, factor: int) -> int:
    """
    Running fold over books in store order. The multiply makes it order
    dependent; the modulo is applied on every step.
    """
    acc = 0
    for book in books:
        acc += unit_length(book.title) * factor
        acc -= unit_length(book.author)
        acc *= unit_length(book.isbn)
        acc %= COMPLEXITY_MODULUS
    return acc
