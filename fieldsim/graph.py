"""A weighted graph over Voronoi edges, with nearest-vertex and path search."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, TextIO, Tuple

from fieldsim.geometry import VEdge, VPoint

Point = Tuple[float, float]

# Cap on how many steps a path is traced back from its end.
MAX_PATH_STEPS = 100


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two (x, y) pairs."""
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return math.sqrt(dx * dx + dy * dy)


class Graph:
    """Undirected graph whose vertices are edge endpoints, keyed by point id."""

    def __init__(self, edges: Iterable[VEdge]) -> None:
        edge_list = list(edges)
        self.points_by_id: Dict[int, VPoint] = {}
        for edge in edge_list:
            if edge.end is None:
                raise ValueError("edge has no end point")
            for point in (edge.start, edge.end):
                self.points_by_id.setdefault(point.id, point)
        self.vertices: List[int] = sorted(self.points_by_id)
        self.edges: List[Tuple[float, Tuple[int, int]]] = []
        for edge in edge_list:
            # Coordinates are truncated to integers for the edge weight.
            start = (int(edge.start.x), int(edge.start.y))
            end = (int(edge.end.x), int(edge.end.y))
            self.edges.append((distance(start, end), (edge.start.id, edge.end.id)))

    def display(self, stream: TextIO) -> None:
        """Write the vertex ids and the weighted edges to ``stream``."""
        stream.write("Vertices : ")
        for vertex in self.vertices:
            stream.write(f"{vertex} ")
        stream.write("\n")
        stream.write("Edges : ")
        for weight, (a, b) in self.edges:
            stream.write(f"{a} {b} - {weight:g}\n")

    def nearest_vertex(self, x: float, y: float) -> int:
        """Id of the vertex closest to (x, y); the lowest id wins ties."""
        if not self.vertices:
            raise ValueError("graph has no vertices")
        return min(
            self.vertices,
            key=lambda vid: distance((x, y), self.vertex_by_id(vid)),
        )

    def path_endpoints(
        self,
        start_vertices: Tuple[int, int],
        end_vertices: Tuple[int, int],
        start_x: float,
        start_y: float,
        end_x: float,
        end_y: float,
    ) -> Tuple[int, int]:
        """Pick one start and one end vertex giving the shortest detour."""
        a = (start_x, start_y)
        b = self.vertex_by_id(start_vertices[0])
        c = self.vertex_by_id(start_vertices[1])
        d = (end_x, end_y)
        e = self.vertex_by_id(end_vertices[0])
        f = self.vertex_by_id(end_vertices[1])
        path1 = distance(a, b) + distance(b, f) + distance(f, d)
        path2 = distance(a, b) + distance(b, e) + distance(e, d)
        path3 = distance(a, c) + distance(c, f) + distance(f, d)
        path4 = distance(a, c) + distance(c, e) + distance(e, d)
        if path1 <= min(path2, path3, path4):
            return start_vertices[0], end_vertices[1]
        if path2 <= min(path1, path3, path4):
            return start_vertices[0], end_vertices[0]
        if path3 <= min(path1, path2, path4):
            return start_vertices[1], end_vertices[1]
        return start_vertices[1], end_vertices[0]

    def vertex_by_id(self, vertex_id: int) -> Point:
        """Coordinates of the vertex with ``vertex_id``."""
        point = self.points_by_id[vertex_id]
        return point.x, point.y

    def shortest_path(self, start: int, end: int) -> List[int]:
        """Vertex ids of a shortest path, listed from ``end`` back to ``start``."""
        if start not in self.points_by_id:
            raise KeyError(start)
        adjacency: Dict[int, List[Tuple[int, float]]] = defaultdict(list)
        for weight, (a, b) in self.edges:
            adjacency[a].append((b, weight))
            adjacency[b].append((a, weight))

        settled: Dict[int, float] = {}
        came_from: Dict[int, Optional[int]] = {}
        # Entries (dist, -vertex, -parent): ties favour higher vertex, then parent ids.
        heap: List[Tuple[float, int, int]] = [(0.0, -start, 1)]
        while heap:
            dist, neg_vertex, neg_parent = heapq.heappop(heap)
            vertex = -neg_vertex
            if vertex in settled:
                continue
            settled[vertex] = dist
            came_from[vertex] = None if vertex == start and neg_parent == 1 else -neg_parent
            for neighbour, weight in adjacency[vertex]:
                if neighbour not in settled:
                    heapq.heappush(heap, (dist + weight, -neighbour, -vertex))

        if end not in came_from:
            raise ValueError(f"no path from {start} to {end}")
        path = [end]
        current = end
        steps = 0
        while came_from[current] is not None:
            if steps > MAX_PATH_STEPS:
                break
            steps += 1
            current = came_from[current]
            path.append(current)
        return path