from perfect_maze.core.disjoint_set import DisjointSet
from perfect_maze.core.grid import Grid


class MazeAnalyzer:
    @staticmethod
    def _passage_sets(grid: Grid):
        """
        Unions the endpoints of every open passage.
        Returns (sets, passages, cycle_found).
        """
        sets = DisjointSet(grid.width * grid.height)
        passages = 0
        cycle_found = False
        for (x1, y1), (x2, y2) in grid.iter_passages():
            passages += 1
            if not sets.union(grid.get_index(x1, y1), grid.get_index(x2, y2)):
                cycle_found = True
        return sets, passages, cycle_found

    @staticmethod
    def count_components(grid: Grid) -> int:
        sets, _, _ = MazeAnalyzer._passage_sets(grid)
        return sets.set_count

    @staticmethod
    def has_cycle(grid: Grid) -> bool:
        _, _, cycle_found = MazeAnalyzer._passage_sets(grid)
        return cycle_found

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """Connected and acyclic: exactly one route between any two cells."""
        sets, passages, cycle_found = MazeAnalyzer._passage_sets(grid)
        return not cycle_found and sets.set_count == 1 and passages == len(grid) - 1

    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0 # 2 exits
        junctions = 0 # 3+ exits
        isolated = 0

        for y in range(grid.height):
            for x in range(grid.width):
                exits = sum(1 for _ in grid.get_open_neighbors(x, y))
                if exits == 0: isolated += 1
                elif exits == 1: dead_ends += 1
                elif exits == 2: corridors += 1
                else: junctions += 1

        sets, passages, cycle_found = MazeAnalyzer._passage_sets(grid)
        total = grid.width * grid.height
        return {
            "cells": total,
            "passages": passages,
            "components": sets.set_count,
            "perfect": not cycle_found and sets.set_count == 1,
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "isolated": isolated,
            "dead_end_percent": (dead_ends / total) * 100,
        }
