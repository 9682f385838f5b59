import itertools
from dataclasses import dataclass


class OrderIdSequence:
    """Hands out consecutive order ids, starting from `start`.

    Callers own the sequence and pass it to `Order.create`, so two kitchens
    (or two tests) never share a counter.
    """

    def __init__(self, start: int = 1001) -> None:
        if not isinstance(start, int) or start < 0:
            raise ValueError("start must be a non-negative integer")
        self._start = start
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)

    def reset(self) -> None:
        self._counter = itertools.count(self._start)

    def __iter__(self) -> 'OrderIdSequence':
        return self

    def __next__(self) -> int:
        return self.next_id()


@dataclass(frozen=True, eq=False)
class Order:
    order_id: int
    dish: str
    prep_time: int

    def __post_init__(self) -> None:
        if not self.dish:
            raise ValueError("dish must be a non-empty string")
        if isinstance(self.prep_time, bool) or not isinstance(self.prep_time, int) or self.prep_time < 0:
            raise ValueError("prep_time must be a non-negative integer")

    @classmethod
    def create(cls, dish: str, prep_time: int, ids: OrderIdSequence) -> 'Order':
        return cls(ids.next_id(), dish, prep_time)

    # longer prep time means higher priority
    def __lt__(self, other: 'Order') -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.prep_time < other.prep_time

    def __gt__(self, other: 'Order') -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.prep_time > other.prep_time

    def __le__(self, other: 'Order') -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.prep_time <= other.prep_time

    def __ge__(self, other: 'Order') -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self.prep_time >= other.prep_time

    def __str__(self) -> str:
        return f"{self.order_id}({self.prep_time})"
