"""Workflow planner: tasks joined by must-finish-before edges.

The edge set stays acyclic at every point: add_dependency adds an edge
tentatively, runs a full topological check and takes the edge back out if a
cycle appeared.

Iteration is always by ascending task id (the Kahn frontier is a min-heap and
the critical-path endpoint is the lowest id among the maxima), so orders and
paths are reproducible.
"""
from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from sme.domain.Outcome import Failure, Outcome
from sme.domain.Task import Task

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CriticalPath:
    path: List[Task] = field(default_factory=list)
    total_duration: int = 0

    def __str__(self) -> str:
        steps = " -> ".join(t.name for t in self.path)
        return f"Critical path ({self.total_duration} days): {steps}"


class DependencyGraph:
    def __init__(self):
        self._next_id = 1
        self._tasks: Dict[int, Task] = {}
        # predecessor id -> successor ids
        self._successors: Dict[int, List[int]] = {}

    def add_task(self, name: str, duration_days: int) -> Task:
        task = Task(self._next_id, name, duration_days)
        self._next_id += 1
        self._tasks[task.id] = task
        self._successors[task.id] = []
        return task

    def add_dependency(self, successor_id: int, predecessor_id: int) -> Outcome:
        '''
        successor_id depends on predecessor_id (edge predecessor -> successor).
        '''
        if successor_id not in self._tasks or predecessor_id not in self._tasks:
            logger.info(f"Dependency rejected: unknown task in {predecessor_id} -> {successor_id}")
            return Outcome.rejected(Failure.NOT_FOUND)
        outgoing = self._successors[predecessor_id]
        if successor_id in outgoing:
            return Outcome.success()
        outgoing.append(successor_id)
        if self.topological_order() is None:
            outgoing.pop()
            logger.warning(f"Dependency rejected: {predecessor_id} -> {successor_id} would close a cycle")
            return Outcome.rejected(Failure.CYCLE_DETECTED)
        return Outcome.success()

    def get(self, task_id: int) -> Optional[Task]:
        return self._tasks.get(task_id)

    def tasks(self) -> List[Task]:
        return [self._tasks[i] for i in sorted(self._tasks)]

    def task_count(self) -> int:
        return len(self._tasks)

    def edges(self) -> List[Tuple[int, int]]:
        '''Sorted (predecessor, successor) pairs.'''
        return sorted((u, v) for u, succ in self._successors.items() for v in succ)

    def topological_order(self) -> Optional[List[Task]]:
        '''
        Kahn's algorithm, lowest ready id first. None if the graph has a cycle.
        '''
        indegree = {task_id: 0 for task_id in self._tasks}
        for succ in self._successors.values():
            for v in succ:
                indegree[v] += 1
        frontier = [task_id for task_id, d in indegree.items() if d == 0]
        heapq.heapify(frontier)
        order: List[Task] = []
        while frontier:
            u = heapq.heappop(frontier)
            order.append(self._tasks[u])
            for v in self._successors[u]:
                indegree[v] -= 1
                if indegree[v] == 0:
                    heapq.heappush(frontier, v)
        if len(order) != len(self._tasks):
            return None
        return order

    def critical_path(self) -> Optional[CriticalPath]:
        '''
        Longest-duration chain of dependent tasks. None if the graph has a cycle.
        '''
        order = self.topological_order()
        if order is None:
            return None
        if not order:
            return CriticalPath()
        best = {t.id: t.duration_days for t in order}
        prev: Dict[int, Optional[int]] = {t.id: None for t in order}
        for u in order:
            for v in self._successors[u.id]:
                candidate = best[u.id] + self._tasks[v].duration_days
                if candidate > best[v]:
                    best[v] = candidate
                    prev[v] = u.id
        end = min(best, key=lambda task_id: (-best[task_id], task_id))
        path: List[Task] = []
        cur: Optional[int] = end
        while cur is not None:
            path.append(self._tasks[cur])
            cur = prev[cur]
        path.reverse()
        return CriticalPath(path, best[end])
