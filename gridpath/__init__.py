"""
Grid Pathfinding Engine.

Runs Dijkstra, A*, breadth-first and depth-first search over a weighted
2-D grid, routing through ordered waypoints, and returns the expansion
order and resulting path for playback.
"""

__version__ = "0.1.0"
