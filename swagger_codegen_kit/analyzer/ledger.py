"""
Run-scoped registry of references that could not be resolved.
"""

from __future__ import annotations

import threading


class ReferenceLedger:
    """Records, per owning object identifier, the unresolved reference targets.

    One ledger covers one document-processing run. Inserts are serialized
    so concurrent traversals can share it; snapshots are copies and are
    safe to read at any time.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._references: dict[str, set[str]] = {}

    def add(self, reference: str, owner: str) -> None:
        """Record `reference` as unresolved for `owner`. Idempotent."""
        with self._lock:
            self._references.setdefault(owner, set()).add(reference)

    def snapshot(self) -> dict[str, frozenset[str]]:
        """Copy of the ledger: owner identifier -> unresolved targets."""
        with self._lock:
            return {owner: frozenset(targets) for owner, targets in self._references.items()}

    @property
    def references(self) -> dict[str, frozenset[str]]:
        return self.snapshot()

    def reset(self) -> None:
        """Forget everything recorded so far (start of a run)."""
        with self._lock:
            self._references = {}

    def drain(self) -> dict[str, frozenset[str]]:
        """Return the snapshot and reset, atomically."""
        with self._lock:
            references = {owner: frozenset(targets) for owner, targets in self._references.items()}
            self._references = {}
        return references

    def __len__(self) -> int:
        with self._lock:
            return sum(len(targets) for targets in self._references.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __repr__(self) -> str:
        return f"ReferenceLedger({self.snapshot()!r})"
