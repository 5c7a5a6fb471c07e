# state_search/core/frontiers.py
# Fringe containers for the search drivers: stack, FIFO queue and min-priority queue.
from __future__ import annotations
import heapq
import itertools
from collections import deque
from typing import Iterable

_NOTHING = object()


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def extend(self, xs: Iterable): self.q.extend(xs)
    def pop(self): return self.q.popleft()
    def empty(self) -> bool: return not self.q
    def __bool__(self): return bool(self.q)
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class LIFOStack:
    """Last in, first out.

    ``extend`` stores the iterable itself, so a bulk insert is consumed one
    item at a time as it is popped and the first item comes off first. An
    unbounded successor stream can therefore sit on the stack. For the same
    reason the stack has no len(); use empty() or bool().
    """
    def __init__(self):
        self.q = []  # iterators, top of stack last
        self._head = _NOTHING  # item pulled from the top iterator, not yet popped

    def _fill(self):
        while self._head is _NOTHING and self.q:
            self._head = next(self.q[-1], _NOTHING)
            if self._head is _NOTHING:
                self.q.pop()

    def _unfill(self):
        if self._head is not _NOTHING:
            self.q[-1] = itertools.chain((self._head,), self.q[-1])
            self._head = _NOTHING

    def push(self, x):
        self._unfill()
        self.q.append(iter((x,)))

    def extend(self, xs: Iterable):
        self._unfill()
        self.q.append(iter(xs))

    def pop(self):
        self._fill()
        if self._head is _NOTHING:
            raise IndexError("pop from an empty stack")
        x, self._head = self._head, _NOTHING
        return x

    def empty(self) -> bool:
        self._fill()
        return self._head is _NOTHING

    def __bool__(self): return not self.empty()

    def peek(self):
        self._fill()
        if self._head is _NOTHING:
            raise IndexError("peek at an empty stack")
        return self._head


class PriorityQueue:
    """Min-heap by key(x)."""
    def __init__(self, key):
        self.key = key
        self.h = []
        self.counter = 0  # tie-breaker for stability
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def extend(self, xs: Iterable):
        for x in xs:
            self.push(x)
    def pop(self):
        return heapq.heappop(self.h)[2]
    def empty(self) -> bool: return not self.h
    def __bool__(self): return bool(self.h)
    def __len__(self): return len(self.h)
    def peek(self):
        return self.h[0][2]
