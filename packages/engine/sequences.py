from __future__ import annotations

from typing import Callable, Iterable, List, Optional


def unique_preserve_order(items: Iterable[str], key: Optional[Callable[[str], str]] = None) -> List[str]:
    """
    Drop repeats, keeping the first occurrence of each item in input order.
    `key` maps an item to the value compared for equality (default: the item).
    """
    seen, out = set(), []
    for s in items:
        k = key(s) if key else s
        if k not in seen:
            seen.add(k)
            out.append(s)
    return out
