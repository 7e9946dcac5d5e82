# numint/algebra.py
"""
Elementwise algebra over arbitrary state containers.

Steppers never touch container internals directly: every update goes through
the helpers below, which take a vectorised path for NumPy arrays and fall back
to an index loop for any other sequence with ``__getitem__``,
``__setitem__`` and ``__len__``.
"""

from __future__ import annotations
from collections.abc import MutableSequence
from typing import Any, Callable
import copy
import math

import numpy as np


def additive(current, *terms):
    """Combine operation for ``accumulate_operation``: current + sum(terms)."""
    for term in terms:
        current = current + term
    return current


def accumulate_operation(dst, combine_op: Callable, *scaled_terms) -> None:
    """
    Overwrite ``dst`` elementwise with scaled terms from companion sequences.

    Computes ``dst[i] = combine_op(dst[i], c1*seq1[i], c2*seq2[i], ...)``.

    Parameters
    ----------
    dst : sequence
        Destination, modified in place.
    combine_op : callable
        ``combine_op(current, *terms)``. For NumPy destinations it receives
        whole arrays, so it must be elementwise arithmetic.
    *scaled_terms
        Alternating scale factors and sequences: ``c1, seq1, c2, seq2, ...``.
        Companions must have the same length as ``dst``; this is not checked.
    """
    if len(scaled_terms) % 2:
        raise ValueError("scaled_terms must alternate scale factors and sequences")

    factors = scaled_terms[0::2]
    sequences = scaled_terms[1::2]

    if isinstance(dst, np.ndarray):
        terms = [c * np.asarray(seq) for c, seq in zip(factors, sequences)]
        dst[...] = combine_op(dst, *terms)
        return

    for i in range(len(dst)):
        dst[i] = combine_op(dst[i], *(c * seq[i] for c, seq in zip(factors, sequences)))


def accumulate_abs(seq) -> float:
    """Sum of absolute values, accumulated in double precision."""
    if isinstance(seq, np.ndarray):
        return float(np.sum(np.abs(seq), dtype=np.float64))
    return math.fsum(abs(v) for v in seq)


def assign(dst, src) -> None:
    """Copy ``src`` into the existing container ``dst`` elementwise."""
    if isinstance(dst, np.ndarray):
        dst[...] = np.asarray(src).reshape(dst.shape)
        return
    for i in range(len(dst)):
        dst[i] = src[i]


def size_of(seq) -> int:
    """Number of scalar components in ``seq``."""
    if isinstance(seq, np.ndarray):
        return seq.size
    return len(seq)


def same_layout(a, b) -> bool:
    """True when ``a`` and ``b`` have the same shape (arrays) or length (other containers)."""
    if isinstance(a, np.ndarray) and isinstance(b, np.ndarray):
        return a.shape == b.shape
    return size_of(a) == size_of(b)


def has_resize(obj: Any) -> bool:
    """
    Capability query: can containers of this kind change length?

    NumPy arrays and mutable sequences can be reallocated at any length;
    other containers only if they expose a ``resize`` method.
    """
    if isinstance(obj, (np.ndarray, MutableSequence)):
        return True
    return callable(getattr(obj, "resize", None))


def zeros_like(reference, dtype: str = "float64"):
    """New zero-filled buffer of the same kind and length as ``reference``."""
    if isinstance(reference, np.ndarray):
        return np.zeros(reference.shape, dtype=np.result_type(reference.dtype, dtype))
    if isinstance(reference, list):
        return [0.0] * len(reference)
    buf = copy.deepcopy(reference)
    for i in range(len(buf)):
        buf[i] = reference[i] * 0
    return buf


def clone(state):
    """Independent copy of a state container."""
    if isinstance(state, np.ndarray):
        return state.copy()
    if isinstance(state, list):
        return list(state)
    return copy.deepcopy(state)
