"""Graph problems: traversal, cloning, cycle detection, colouring and grids."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(eq=False)
class Node:
    """A vertex of an undirected graph with its neighbouring vertices."""

    val: int = 0
    neighbors: list[Node] = field(default_factory=list)


class _State(Enum):
    UNSEEN = 0
    VISITING = 1
    DONE = 2


def clone_graph(node: Node | None) -> Node | None:
    """Return a deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies: dict[int, Node] = {id(node): Node(node.val)}
    pending = [node]
    while pending:
        original = pending.pop()
        copy = copies[id(original)]
        for neighbor in original.neighbors:
            twin = copies.get(id(neighbor))
            if twin is None:
                twin = copies[id(neighbor)] = Node(neighbor.val)
                pending.append(neighbor)
            copy.neighbors.append(twin)
    return copies[id(node)]


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Tell whether every course can be taken, given ``[course, prerequisite]``
    pairs; false exactly when the prerequisites form a cycle."""
    graph: list[list[int]] = [[] for _ in range(num_courses)]
    for course, prerequisite in prerequisites:
        graph[course].append(prerequisite)

    state = [_State.UNSEEN] * num_courses
    for root in range(num_courses):
        if state[root] is not _State.UNSEEN:
            continue
        state[root] = _State.VISITING
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(graph[root]))]
        while stack:
            course, remaining = stack[-1]
            for nxt in remaining:
                if state[nxt] is _State.VISITING:
                    return False
                if state[nxt] is _State.UNSEEN:
                    state[nxt] = _State.VISITING
                    stack.append((nxt, iter(graph[nxt])))
                    break
            else:
                state[course] = _State.DONE
                stack.pop()
    return True


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Return the vertex of highest degree; the smallest label wins ties.

    Returns 0 when there are no edges.
    """
    degree = Counter(vertex for edge in edges for vertex in edge[:2])
    return max(sorted(degree), key=degree.__getitem__, default=0)


def valid_path(
    n: int, edges: Sequence[Sequence[int]], source: int, destination: int
) -> bool:
    """Tell whether ``destination`` can be reached from ``source`` in an
    undirected graph of ``n`` vertices."""
    graph: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        graph[u].append(v)
        graph[v].append(u)

    visited = {source}
    pending = [source]
    while pending:
        vertex = pending.pop()
        if vertex == destination:
            return True
        for neighbor in graph[vertex]:
            if neighbor not in visited:
                visited.add(neighbor)
                pending.append(neighbor)
    return False


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Tell whether the vertices can be split in two sets with every edge
    running between the sets."""
    colour: dict[int, int] = {}
    for root in range(len(graph)):
        if root in colour:
            continue
        colour[root] = 0
        queue = deque([root])
        while queue:
            u = queue.popleft()
            for v in graph[u]:
                if v not in colour:
                    colour[v] = 1 - colour[u]
                    queue.append(v)
                elif colour[v] == colour[u]:
                    return False
    return True


def max_star_sum(
    vals: Sequence[int], edges: Sequence[Sequence[int]], k: int
) -> int:
    """Return the largest sum of a centre vertex and at most ``k`` of its
    neighbours; neighbours that would lower the sum are left out."""
    if not vals:
        raise ValueError("max_star_sum() needs at least one vertex")
    gains: list[list[int]] = [[] for _ in vals]
    for u, v in edges:
        if vals[v] > 0:
            gains[u].append(vals[v])
        if vals[u] > 0:
            gains[v].append(vals[u])
    limit = max(k, 0)
    return max(
        value + sum(sorted(gain, reverse=True)[:limit])
        for value, gain in zip(vals, gains)
    )


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of ``"1"`` cells joined up, down, left or right."""
    seen: set[tuple[int, int]] = set()

    def is_land(i: int, j: int) -> bool:
        return 0 <= i < len(grid) and 0 <= j < len(grid[i]) and grid[i][j] == "1"

    count = 0
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell != "1" or (i, j) in seen:
                continue
            count += 1
            seen.add((i, j))
            pending = [(i, j)]
            while pending:
                x, y = pending.pop()
                for dx, dy in _STEPS:
                    cell_at = (x + dx, y + dy)
                    if cell_at not in seen and is_land(*cell_at):
                        seen.add(cell_at)
                        pending.append(cell_at)
    return count


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange (1) is left, rot (2) spreading
    to adjacent cells each minute; -1 when some orange never rots."""
    cells = [list(row) for row in grid]
    frontier = [(i, j) for i, row in enumerate(cells) for j, v in enumerate(row) if v == 2]
    fresh = sum(row.count(1) for row in cells)
    if fresh == 0:
        return 0

    minutes = 0
    while frontier:
        following = []
        for i, j in frontier:
            for di, dj in _STEPS:
                x, y = i + di, j + dj
                if 0 <= x < len(cells) and 0 <= y < len(cells[x]) and cells[x][y] == 1:
                    cells[x][y] = 2
                    fresh -= 1
                    following.append((x, y))
        if following:
            minutes += 1
        frontier = following
    return minutes if fresh == 0 else -1


def bfs_of_graph(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices reached from vertex 0 in breadth-first order."""
    if not adj:
        return []
    visited = {0}
    order = []
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nxt in adj[node]:
            if nxt not in visited:
                visited.add(nxt)
                queue.append(nxt)
    return order


def dfs_of_graph(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices reached from vertex 0 in depth-first order."""
    if not adj:
        return []
    visited = {0}
    order = [0]
    stack: list[Iterator[int]] = [iter(adj[0])]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(adj[nxt]))
                break
        else:
            stack.pop()
    return order


def has_cycle_bfs(adj: Sequence[Sequence[int]]) -> bool:
    """Tell whether an undirected graph holds a cycle, searching breadth-first."""
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        queue: deque[tuple[int, int | None]] = deque([(root, None)])
        while queue:
            node, parent = queue.popleft()
            for nxt in adj[node]:
                if not visited[nxt]:
                    visited[nxt] = True
                    queue.append((nxt, node))
                elif nxt != parent:
                    return True
    return False


def has_cycle_dfs(adj: Sequence[Sequence[int]]) -> bool:
    """Tell whether an undirected graph holds a cycle, searching depth-first."""
    visited = [False] * len(adj)
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, int | None, Iterator[int]]] = [
            (root, None, iter(adj[root]))
        ]
        while stack:
            node, parent, remaining = stack[-1]
            for nxt in remaining:
                if nxt == parent:
                    continue
                if visited[nxt]:
                    return True
                visited[nxt] = True
                stack.append((nxt, node, iter(adj[nxt])))
                break
            else:
                stack.pop()
    return False


def topo_sort_dfs(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices of a directed acyclic graph in topological order,
    found by depth-first search."""
    visited = [False] * len(adj)
    finished: list[int] = []
    for root in range(len(adj)):
        if visited[root]:
            continue
        visited[root] = True
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adj[root]))]
        while stack:
            node, remaining = stack[-1]
            for nxt in remaining:
                if not visited[nxt]:
                    visited[nxt] = True
                    stack.append((nxt, iter(adj[nxt])))
                    break
            else:
                finished.append(node)
                stack.pop()
    finished.reverse()
    return finished


def topo_sort_kahn(adj: Sequence[Sequence[int]]) -> list[int]:
    """Return the vertices in topological order by repeatedly removing those
    with no incoming edges.

    Vertices on or behind a cycle are never freed and are left out.
    """
    indegree = [0] * len(adj)
    for targets in adj:
        for v in targets:
            indegree[v] += 1

    queue = deque(u for u, d in enumerate(indegree) if d == 0)
    order = []
    while queue:
        u = queue.popleft()
        order.append(u)
        for v in adj[u]:
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)
    return order