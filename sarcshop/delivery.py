"""Undirected weighted graph of delivery routes with shortest-path lookup."""

from __future__ import annotations

import heapq
from pathlib import Path


class DeliveryGraph:
    """Places joined by routes of a given distance."""

    def __init__(self) -> None:
        self._adj: dict[str, list[tuple[str, int]]] = {}

    def add_edge(self, u: str, v: str, weight: int) -> None:
        """Add a route usable in both directions."""
        self._adj.setdefault(u, []).append((v, weight))
        self._adj.setdefault(v, []).append((u, weight))

    def load_graph(self, path: str | Path) -> None:
        """Add routes read from 'from to distance' records.

        Raises FileNotFoundError if the file is missing; reading stops at the
        first malformed record.
        """
        text = Path(path).read_text(encoding="utf-8")
        tokens = iter(text.split())
        for u, v, weight in zip(tokens, tokens, tokens):
            try:
                distance = int(weight)
            except ValueError:
                break
            self.add_edge(u, v, distance)

    def save_graph(self, path: str | Path) -> None:
        """Write each route once, from the lexically smaller end."""
        with open(path, "w", encoding="utf-8") as out:
            for u, neighbours in self._adj.items():
                for v, weight in neighbours:
                    if u < v:
                        out.write(f"{u} {v} {weight}\n")

    def shortest_path(self, start: str, end: str) -> tuple[list[str], int] | None:
        """The shortest route and its length, or None if end cannot be reached."""
        dist: dict[str, int] = {start: 0}
        parent: dict[str, str] = {}
        heap: list[tuple[int, str]] = [(0, start)]
        while heap:
            d, node = heapq.heappop(heap)
            if d > dist[node]:
                continue
            for neighbour, weight in self._adj.get(node, ()):
                candidate = d + weight
                if neighbour not in dist or candidate < dist[neighbour]:
                    dist[neighbour] = candidate
                    parent[neighbour] = node
                    heapq.heappush(heap, (candidate, neighbour))

        if end not in dist:
            return None
        path = [end]
        while path[-1] != start:
            path.append(parent[path[-1]])
        path.reverse()
        return path, dist[end]

    def render_route(self, start: str, end: str) -> str:
        """Describe the shortest route between two places."""
        found = self.shortest_path(start, end)
        if found is None:
            return f"❌ No delivery route found from {start} to {end}.\n"
        path, distance = found
        return (
            f"🚚 Shortest Path: {' → '.join(path)}\n"
            f"Estimated Delivery Distance: {distance} km/min\n"
        )

    def render(self) -> str:
        """Every place with its neighbours and distances, one line each."""
        return "".join(
            f"{u}: " + "".join(f"({v}, {weight}) " for v, weight in neighbours) + "\n"
            for u, neighbours in self._adj.items()
        )

    def adjacency(self) -> dict[str, list[tuple[str, int]]]:
        """A copy of the adjacency lists."""
        return {u: list(neighbours) for u, neighbours in self._adj.items()}