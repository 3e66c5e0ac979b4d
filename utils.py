from typing import List

import numpy as np


def counts_to_cumulative_ascending(counts: List[int]) -> List[int]:
    """Return ascending cumulative array: cum[0]=0, cum[n]=total."""
    cum = [0]
    s = 0
    for c in counts:
        s += c
        cum.append(s)
    return cum


def empirical_entropy(data: bytes) -> float:
    """
    Order-0 empirical entropy of `data` in bits per byte.
    Returns 0.0 for empty input.
    """
    if len(data) == 0:
        return 0.0
    counts = np.bincount(np.frombuffer(data, dtype=np.uint8), minlength=256)
    probs = counts[counts > 0] / len(data)
    return float(-(probs * np.log2(probs)).sum())


def bits_per_byte(original_len: int, encoded_len: int) -> float:
    if original_len <= 0:
        raise ValueError("original_len must be positive")
    return (encoded_len * 8) / original_len
