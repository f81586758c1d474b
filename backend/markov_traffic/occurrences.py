from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterator, List, Optional, Tuple

History = Tuple[Hashable, ...]


@dataclass
class OccurrenceTable:
    # histories[(e1, ..., en)][next] = count
    histories: Dict[History, Dict[Hashable, int]] = field(default_factory=dict)

    def observe(self, history: History, nxt: Hashable) -> None:
        bucket = self.histories.get(history)
        if bucket is None:
            bucket = {}
            self.histories[history] = bucket
        bucket[nxt] = bucket.get(nxt, 0) + 1

    def get(self, history: History) -> Optional[Dict[Hashable, int]]:
        return self.histories.get(history)

    def top_k(self, history: History, k: int = 5) -> List[Tuple[Hashable, int]]:
        # returns [(next, count)], ties keep first-seen order
        bucket = self.histories.get(history)
        if not bucket:
            return []
        cands = sorted(bucket.items(), key=lambda x: x[1], reverse=True)
        return cands[: max(k, 0)]

    def total(self) -> int:
        return sum(sum(bucket.values()) for bucket in self.histories.values())

    def transitions(self) -> int:
        return sum(len(bucket) for bucket in self.histories.values())

    def copy(self) -> "OccurrenceTable":
        return OccurrenceTable({h: dict(bucket) for h, bucket in self.histories.items()})

    def __contains__(self, history: object) -> bool:
        return history in self.histories

    def __len__(self) -> int:
        return len(self.histories)

    def __iter__(self) -> Iterator[History]:
        return iter(self.histories)
