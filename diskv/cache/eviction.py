"""
Insertion-Order Eviction Module

This module picks which cache entries to drop when an insert needs space.

Eviction Concept:
- Entries are visited in insertion order (oldest first)
- A replaced key is re-inserted, so it moves to the END
- Visiting stops as soon as the freed bytes cover what is needed

This is a FIFO scan kept for simplicity and deterministic tests. It does
not track recency or frequency: a value read a thousand times is evicted
just as readily as one never read. Nor is it random eviction; nothing
statistical should be assumed about which keys survive.
"""

from typing import List, Mapping


class InsertionOrderEviction:
    """
    Selects eviction victims oldest-insert first.

    Usage:
        policy = InsertionOrderEviction()
        victims = policy.select_victims(entries, needed=8)

    The policy is stateless; ordering comes from the mapping itself, which
    BoundedCache keeps in insertion order.
    """

    def select_victims(self, entries: Mapping[str, bytes], needed: int) -> List[str]:
        """
        Choose the keys to evict to free at least `needed` bytes.

        Args:
            entries: Cached key -> value mapping, in insertion order
            needed: Number of bytes that must be freed

        Returns:
            Keys to evict, in eviction order. Never more than required to
            reach `needed`; may free less only when `entries` holds less.
        """
        victims: List[str] = []
        if needed <= 0:
            return victims

        freed = 0
        for key, value in entries.items():
            victims.append(key)
            freed += len(value)
            if freed >= needed:
                break
        return victims
