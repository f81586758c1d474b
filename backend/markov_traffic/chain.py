from __future__ import annotations
import logging
from collections import deque
from typing import TYPE_CHECKING, Deque, Dict, Generic, Hashable, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

from .errors import HistoryLengthError, InvalidOrderError
from .occurrences import OccurrenceTable
from .sampling import RandomSampler, WeightedSampler
from .schemas import ChainConfig, ChainStats, Transition

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Hashable)


class MarkovChain(Generic[A]):
    """N-th order Markov chain over caller-supplied events.

    The chain learns how often each event follows a history of `order`
    events and draws continuations with probability proportional to those
    counts. Events can be any hashable value except `None`, which is the
    "no prediction" result of `generate_from` and `generate`.

    The chain keeps a rolling memory of the last `order` events, seeded by
    `update` and advanced by `generate`, so it can be driven as an endless
    continuation generator::

        chain = MarkovChain(1)
        chain.update([SignIn, ListTodos, CreateTodo, SignOut])
        for action in itertools.islice(chain, 16):
            ...

    Instances are not thread-safe.
    """

    def __init__(self, order: int, sampler: Optional[WeightedSampler] = None):
        if isinstance(order, bool) or not isinstance(order, int) or order <= 0:
            raise InvalidOrderError(order)
        self._order = order
        self._occurrences = OccurrenceTable()
        # Oldest first; appending past maxlen drops the oldest event.
        self._memory: Deque[A] = deque(maxlen=order)
        self._sampler: WeightedSampler = sampler if sampler is not None else RandomSampler()

    @classmethod
    def from_config(cls, config: ChainConfig) -> "MarkovChain[A]":
        return cls(config.order, RandomSampler(config.seed))

    @classmethod
    def from_settings(cls, s: Optional[Settings] = None) -> "MarkovChain[A]":
        if s is None:
            # Environment is read on demand.
            from .settings import Settings

            s = Settings()
        return cls.from_config(ChainConfig(order=s.order, seed=s.seed))

    @property
    def order(self) -> int:
        return self._order

    @property
    def occurrences(self) -> OccurrenceTable:
        return self._occurrences

    @property
    def memory(self) -> Tuple[A, ...]:
        return tuple(self._memory)

    def update(self, events: Iterable[A]) -> None:
        """Learn every `order + 1` window of `events` and reset memory to its tail.

        Counts accumulate across calls. Inputs shorter than `order + 1` learn
        nothing; inputs shorter than `order` only shift their events into the
        newest end of the memory window.
        """
        events = list(events)
        if not events:
            return

        learned = 0
        for i in range(len(events) - self._order):
            window = events[i : i + self._order + 1]
            self._occurrences.observe(tuple(window[:-1]), window[-1])
            learned += 1

        self._memory.extend(events[-self._order :])
        logger.debug(
            "learned %d windows from %d events (histories=%d, memory=%s)",
            learned,
            len(events),
            len(self._occurrences),
            self.memory,
        )

    def generate_from(self, history: Sequence[A]) -> Optional[A]:
        """Draw the event following `history`, or None if it was never seen."""
        key = self._key(history)
        bucket = self._occurrences.get(key)
        if not bucket:
            return None

        candidates = list(bucket)
        idx = self._sampler.choose_index([bucket[c] for c in candidates])
        return candidates[idx]

    def generate(self, update_memory: bool = True) -> Optional[A]:
        """Draw the event following the current memory.

        With `update_memory` the drawn event is shifted into the memory
        window; otherwise memory is left as is. Returns None, without
        touching memory, when the memory has no recorded continuation.
        """
        if len(self._memory) < self._order:
            # Nothing trained yet, or not enough events to fill the window.
            return None

        nxt = self.generate_from(self._memory)
        if nxt is not None and update_memory:
            self._memory.append(nxt)
            logger.debug("memory advanced to %s", self.memory)
        return nxt

    def iterate(self) -> Iterator[A]:
        """Yield generated events until the memory reaches an unseen history.

        The generator shares this chain's memory: it is not restartable and
        concurrent iterators interleave.
        """
        while True:
            nxt = self.generate(True)
            if nxt is None:
                logger.debug("no continuation for memory %s, stopping", self.memory)
                return
            yield nxt

    __iter__ = iterate

    def counts(self, history: Sequence[A]) -> Dict[A, int]:
        bucket = self._occurrences.get(self._key(history))
        return dict(bucket) if bucket else {}

    def top_k(self, history: Sequence[A], k: int = 5) -> List[Transition]:
        return [Transition(event=e, count=c) for e, c in self._occurrences.top_k(self._key(history), k=k)]

    def stats(self) -> ChainStats:
        return ChainStats(
            order=self._order,
            histories=len(self._occurrences),
            transitions=self._occurrences.transitions(),
            observations=self._occurrences.total(),
            memory=list(self._memory),
        )

    def copy(self) -> "MarkovChain[A]":
        """Independent chain with the same statistics and memory."""
        clone: MarkovChain[A] = MarkovChain(self._order, self._sampler.fork())
        clone._occurrences = self._occurrences.copy()
        clone._memory.extend(self._memory)
        return clone

    __copy__ = copy

    def _key(self, history: Sequence[A]) -> Tuple[A, ...]:
        key = tuple(history)
        if len(key) != self._order:
            raise HistoryLengthError(self._order, len(key))
        return key

    def __len__(self) -> int:
        return len(self._occurrences)

    def __repr__(self) -> str:
        return f"MarkovChain(order={self._order}, histories={len(self._occurrences)}, memory={self.memory!r})"
