"""
Surface area of a lava droplet scanned as unit cubes (2022 day 18).
"""

from __future__ import annotations

from grid_types import Coord3D, Grid3D


class CubeParseError(ValueError):
    """Raised for lines that are not three comma-separated non-negative integers."""


def parse_cubes(text: str) -> list[Coord3D]:
    cubes: list[Coord3D] = []
    for line_idx, line in enumerate(text.splitlines()):
        if not line.strip():
            continue
        parts = line.strip().split(",")
        if len(parts) != 3 or not all(part.isdecimal() for part in parts):
            raise CubeParseError(
                f"Invalid cube '{line}' on line {line_idx + 1}\n"
                f"  Expected format: 'x,y,z' with non-negative integers"
            )
        # Shifted by one so every cube has an empty layer around it
        x, y, z = (int(part) + 1 for part in parts)
        cubes.append(Coord3D(x, y, z))
    return cubes


def _droplet(cubes: list[Coord3D]) -> Grid3D[bool]:
    width = max(c.x for c in cubes) + 2
    height = max(c.y for c in cubes) + 2
    depth = max(c.z for c in cubes) + 2
    field = Grid3D.filled(width, height, depth, False)
    for cube in cubes:
        field.set_unchecked(cube, True)
    return field


def surface_area(text: str) -> int:
    """Faces not touching another cube, including faces of internal air pockets."""
    cubes = parse_cubes(text)
    if not cubes:
        return 0
    field = _droplet(cubes)
    # The padding layer keeps every neighbour of a cube in bounds
    return sum(
        1 for cube in set(cubes) for neighbor in cube.neighbors() if not field.get_unchecked(neighbor)
    )


def exterior_surface_area(text: str) -> int:
    """Faces reachable by steam flowing in from outside the droplet."""
    cubes = parse_cubes(text)
    if not cubes:
        return 0
    field = _droplet(cubes)

    faces = 0
    visited: set[Coord3D] = set()
    stack = [Coord3D(0, 0, 0)]
    while stack:
        air = stack.pop()
        if air in visited:
            continue
        visited.add(air)
        for neighbor in air.neighbors():
            if not field.in_bounds(neighbor):
                continue
            if field.get_unchecked(neighbor):
                faces += 1
            elif neighbor not in visited:
                stack.append(neighbor)
    return faces
