"""Graph reachability over method-connection graphs."""

from collections import deque
from typing import Dict, Hashable, Iterable, Set, Tuple


class GraphMetrics:
    """Graph calculations for method graphs."""

    @staticmethod
    def undirected(
        nodes: Iterable[Hashable], edges: Iterable[Tuple[Hashable, Hashable]]
    ) -> Dict[Hashable, Set[Hashable]]:
        """Build a symmetric adjacency map; edges to unknown nodes are dropped."""
        adj: Dict[Hashable, Set[Hashable]] = {node: set() for node in nodes}
        for a, b in edges:
            if a in adj and b in adj and a != b:
                adj[a].add(b)
                adj[b].add(a)
        return adj

    @staticmethod
    def reachable_count(adjacency: Dict[Hashable, Set[Hashable]], start: Hashable) -> int:
        """Number of nodes reachable from ``start`` (excluding itself), via BFS."""
        seen = {start}
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbor in adjacency.get(node, ()):
                if neighbor not in seen:
                    seen.add(neighbor)
                    queue.append(neighbor)
        return len(seen) - 1
