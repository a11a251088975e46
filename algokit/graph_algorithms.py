"""Graph problems: spreading news, course order, network delay, connectivity and paths."""

from __future__ import annotations

import heapq
from collections import defaultdict, deque
from typing import Sequence

from algokit.disjoint_set import DisjointSet

UNREACHED = 2**31 - 1


def num_of_minutes(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Return the minutes needed for news from ``head_id`` to reach every employee.

    ``n`` is the number of employees and matches the length of ``manager``.
    """
    subordinates: dict[int, list[int]] = defaultdict(list)
    for employee, boss in enumerate(manager):
        if boss != -1:
            subordinates[boss].append(employee)
    if not subordinates.get(head_id):
        return 0

    def spread(employee: int) -> int:
        below = (spread(sub) for sub in subordinates.get(employee, ()))
        return inform_time[employee] + max(below, default=0)

    return spread(head_id)


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Tell whether all courses can be taken; each pair is (course, prerequisite)."""
    unlocks: dict[int, list[int]] = defaultdict(list)
    in_degree = [0] * num_courses
    for course, required in prerequisites:
        unlocks[required].append(course)
        in_degree[course] += 1
    queue = deque(course for course, degree in enumerate(in_degree) if degree == 0)
    taken = 0
    while queue:
        taken += 1
        for course in unlocks[queue.popleft()]:
            in_degree[course] -= 1
            if in_degree[course] == 0:
                queue.append(course)
    return taken == num_courses


def network_delay_time_dijkstra(times: Sequence[Sequence[int]], n: int, k: int) -> int:
    """Return the time for a signal from ``k`` to reach all ``n`` nodes, or -1.

    Each edge is (source, target, delay); shortest times come from Dijkstra's method.
    """
    edges: dict[int, list[tuple[int, int]]] = defaultdict(list)
    for source, target, delay in times:
        edges[source].append((target, delay))
    arrival: dict[int, int] = {}
    heap = [(0, k)]
    while heap:
        distance, node = heapq.heappop(heap)
        if node in arrival and arrival[node] <= distance:
            continue
        arrival[node] = distance
        for target, delay in edges[node]:
            heapq.heappush(heap, (distance + delay, target))
    if len(arrival) < n:
        return -1
    return max(0, *arrival.values())


def network_delay_time_bellman_ford(
    times: Sequence[Sequence[int]], n: int, k: int
) -> int:
    """Return the time for a signal from ``k`` to reach all ``n`` nodes, or -1.

    Edges are relaxed ``n - 1`` times. An edge leaving a node not yet reached
    counts that node as ``UNREACHED`` away.
    """
    distances = {k: 0}
    for _ in range(n - 1):
        for source, target, delay in times:
            candidate = distances.get(source, UNREACHED) + delay
            if target not in distances or distances[target] > candidate:
                distances[target] = candidate
    if len(distances) < n:
        return -1
    return max(0, *distances.values())


def valid_path(
    n: int, edges: Sequence[Sequence[int]], source: int, destination: int
) -> bool:
    """Tell whether ``source`` and ``destination`` are joined in an undirected graph."""
    sets = DisjointSet(n)
    for a, b in edges:
        sets.union(a, b)
    return sets.connected(source, destination)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of groups of cities joined directly or indirectly."""
    n = len(is_connected)
    sets = DisjointSet(n)
    provinces = n
    for i in range(n):
        for j in range(i + 1, n):
            if is_connected[i][j] == 1 and not sets.connected(i, j):
                sets.union(i, j)
                provinces -= 1
    return provinces


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return every path from node 0 to the last node of a DAG, shortest first."""
    target = len(graph) - 1
    paths: list[list[int]] = []
    queue = deque([[0]])
    while queue:
        path = queue.popleft()
        for following in graph[path[-1]]:
            extended = [*path, following]
            if following == target:
                paths.append(extended)
            else:
                queue.append(extended)
    return paths


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Tell whether every room can be entered starting from room 0 with the keys found."""
    seen: set[int] = set()
    stack = [0]
    while stack:
        room = stack.pop()
        if room not in seen:
            seen.add(room)
            stack.extend(rooms[room])
    return len(seen) == len(rooms)