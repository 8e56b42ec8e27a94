"""Smallest number left after removing digits."""

from __future__ import annotations

__all__ = ["remove_k_digits"]


def remove_k_digits(num: str, k: int) -> str:
    """Remove ``k`` digits from ``num`` so that what remains is as small as possible.

    Leading zeros are dropped and an empty result becomes ``"0"``.
    """
    kept: list[str] = []
    for digit in num:
        while kept and k > 0 and kept[-1] > digit:
            kept.pop()
            k -= 1
        kept.append(digit)
    if k > 0:
        del kept[max(len(kept) - k, 0):]
    return "".join(kept).lstrip("0") or "0"