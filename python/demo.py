"""
Console walkthrough of the grid toolkit on the worked example inputs.

Usage:
    python demo.py            # every puzzle
    python demo.py valley     # a single puzzle by module name
"""

import logging
import sys
from typing import Callable

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

import dish
import galaxies
import hill_climb
import lava
import monkey_map
import packets
import pipe_maze
import reflection
import rock_fall
import sand
import snafu
import tree_house
import valley
from ascii_render import render_grid, render_path, render_regions
from grid_parser import parse_char_grid
from grid_types import Coord
from samples import SAMPLES

console = Console()


def _answers(title: str, *lines: tuple[str, object]) -> Text:
    text = Text()
    text.append(f"{title}\n", style="bold")
    for label, value in lines:
        text.append(f"  {label}: ", style="cyan")
        text.append(f"{value}\n")
    return text


def hill_climb_demo() -> Panel:
    """Shortest climb, drawn over the height map."""
    text = SAMPLES["hill_climb"]
    route = hill_climb.summit_route(text)
    status = _answers(
        "Hill climbing",
        ("From S", hill_climb.fewest_steps_to_summit(text)),
        ("From any 'a'", hill_climb.fewest_steps_from_any_lowland(text)),
    )
    status.append("\n")
    status.append(Text.from_ansi(render_path(parse_char_grid(text), route)))
    return Panel(status, title="hill_climb", border_style="green", width=80)


def packets_demo() -> Panel:
    text = SAMPLES["packets"]
    return Panel(
        _answers(
            "Packet ordering",
            ("Ordered pair index sum", packets.ordered_pair_index_sum(text)),
            ("Decoder key", packets.decoder_key(text)),
        ),
        title="packets",
        border_style="green",
        width=80,
    )


def sand_demo() -> Panel:
    text = SAMPLES["sand"]
    cave = sand.Cave(sand.parse_rock_paths(text))
    grains = cave.pour()
    status = _answers(
        "Falling sand",
        ("Until the abyss", grains),
        ("Until the source is blocked", sand.sand_until_source_blocked(text)),
    )
    status.append("\n")
    sand_cells = [coord for coord in cave.grid.coords() if cave.grid.get_coord(coord) is sand.Tile.SAND]
    status.append(
        Text.from_ansi(render_grid(cave.grid, lambda tile: tile.value, highlight=sand_cells))
    )
    return Panel(status, title="sand", border_style="green", width=80)


def rock_fall_demo() -> Panel:
    text = SAMPLES["rock_fall"]
    long_run = rock_fall.tower_height_with_skip(text)
    cycle = long_run.cycle
    lines: list[tuple[str, object]] = [
        ("Height after 2022 rocks", rock_fall.tower_height(text)),
        ("Height after 10^12 rocks", long_run.measure),
        ("Rocks simulated", long_run.simulated_steps),
    ]
    if cycle is not None:
        lines.append(("Cycle", f"starts at rock {cycle.first_index}, length {cycle.length}, gain {cycle.gain}"))
    status = _answers("Falling rocks", *lines)

    chamber = rock_fall.Chamber(rock_fall.parse_jets(text))
    for _ in range(10):
        chamber.step()
    status.append("\nFirst ten rocks:\n")
    status.append(
        render_grid(
            chamber.grid,
            lambda rock: "#" if rock else ".",
            bottom_up=True,
            row_range=range(chamber.height),
            color=False,
        )
    )
    return Panel(status, title="rock_fall", border_style="green", width=80)


def lava_demo() -> Panel:
    text = SAMPLES["lava"]
    return Panel(
        _answers(
            "Lava droplet",
            ("Surface area", lava.surface_area(text)),
            ("Exterior surface area", lava.exterior_surface_area(text)),
        ),
        title="lava",
        border_style="green",
        width=80,
    )


def valley_demo() -> Panel:
    text = SAMPLES["valley"]
    parsed = valley.parse_valley(text)
    return Panel(
        _answers(
            "Blizzard valley",
            ("Blizzard period", parsed.period),
            ("Shortest crossing", valley.shortest_crossing(text)),
            ("There and back again", valley.there_and_back_again(text)),
        ),
        title="valley",
        border_style="green",
        width=80,
    )


def snafu_demo() -> Panel:
    text = SAMPLES["snafu"]
    total = sum(snafu.parse_snafu(line) for line in text.splitlines())
    return Panel(
        _answers(
            "SNAFU numbers",
            ("Decimal sum", total),
            ("SNAFU sum", snafu.fuel_requirement_sum(text)),
        ),
        title="snafu",
        border_style="green",
        width=80,
    )


def pipe_maze_demo() -> Panel:
    maze_text = SAMPLES["pipe_maze_enclosed"]
    maze = pipe_maze.parse_maze(maze_text)
    loop = [step.pos for step in pipe_maze.walk_loop(maze)]
    status = _answers(
        "Pipe maze",
        ("Farthest point", pipe_maze.farthest_loop_distance(maze_text)),
        ("Enclosed tiles", pipe_maze.enclosed_tiles(maze_text)),
    )
    status.append("\n")
    status.append(Text.from_ansi(render_grid(maze, lambda pipe: pipe.value, highlight=loop)))
    return Panel(status, title="pipe_maze", border_style="green", width=80)


def galaxies_demo() -> Panel:
    text = SAMPLES["galaxies"]
    return Panel(
        _answers(
            "Expanding galaxies",
            ("Expansion 2", galaxies.expanded_distance_sum(text)),
            ("Expansion 10", galaxies.expanded_distance_sum(text, 10)),
            ("Expansion 100", galaxies.expanded_distance_sum(text, 100)),
        ),
        title="galaxies",
        border_style="green",
        width=80,
    )


def dish_demo() -> Panel:
    text = SAMPLES["dish"]
    spins = dish.load_after_spins(text)
    lines: list[tuple[str, object]] = [
        ("North load after one tilt", dish.north_load(text)),
        ("Load after 10^9 spin cycles", spins.measure),
    ]
    if spins.cycle is not None:
        lines.append(("Cycle", f"starts at spin {spins.cycle.first_index}, length {spins.cycle.length}"))
    return Panel(_answers("Parabolic dish", *lines), title="dish", border_style="green", width=80)


def monkey_map_demo() -> Panel:
    """Where the flat and cube walks end, in red and green."""
    text = SAMPLES["monkey_map"]
    notes = monkey_map.parse_notes(text)
    flat = monkey_map.Walker(notes.board, monkey_map.flat_warps(notes.board))
    flat.follow(notes.path)
    cube = monkey_map.Walker(notes.board, monkey_map.cube_warps(notes.board, 4, monkey_map.SAMPLE_CUBE_SEAMS))
    cube.follow(notes.path)
    status = _answers(
        "Monkey map",
        ("Flat password", flat.password),
        ("Cube password", cube.password),
    )
    status.append("\n")
    status.append(
        Text.from_ansi(render_regions(notes.board, [[flat.pos], [cube.pos]], lambda tile: tile.value))
    )
    return Panel(status, title="monkey_map", border_style="green", width=80)


def tree_house_demo() -> Panel:
    """Visible trees in red, the most scenic one in green."""
    forest = tree_house.parse_forest(SAMPLES["tree_house"])
    visible = tree_house.visible_trees(forest)
    best = max(forest.coords(), key=lambda tree: tree_house.scenic_score(forest, tree))
    status = _answers(
        "Tree house",
        ("Visible trees", len(visible)),
        ("Best scenic score", tree_house.scenic_score(forest, best)),
    )
    status.append("\n")
    status.append(Text.from_ansi(render_regions(forest, [visible - {best}, [best]])))
    return Panel(status, title="tree_house", border_style="green", width=80)


def _mirror_halves(width: int, height: int, summary: int) -> list[list[Coord]]:
    vertical = summary < 100
    point = summary if vertical else summary // 100
    span = min(point, (width if vertical else height) - point)
    halves: list[list[Coord]] = [[], []]
    for offset in range(point - span, point + span):
        half = halves[0] if offset < point else halves[1]
        if vertical:
            half.extend(Coord(offset, y) for y in range(height))
        else:
            half.extend(Coord(x, offset) for x in range(width))
    return halves


def reflection_demo() -> Panel:
    """Each pattern with the cells either side of its mirror coloured."""
    text = SAMPLES["reflection"]
    status = _answers(
        "Point of incidence",
        ("Summary", reflection.summarize_notes(text)),
        ("Summary with one smudge", reflection.summarize_notes(text, smudges=1)),
    )
    for pattern in reflection.parse_patterns(text):
        halves = _mirror_halves(pattern.width, pattern.height, reflection.summarize(pattern))
        status.append("\n")
        status.append(Text.from_ansi(render_regions(pattern, halves)))
        status.append("\n")
    return Panel(status, title="reflection", border_style="green", width=80)


DEMOS: dict[str, Callable[[], Panel]] = dict(
    hill_climb=hill_climb_demo,
    packets=packets_demo,
    sand=sand_demo,
    rock_fall=rock_fall_demo,
    lava=lava_demo,
    valley=valley_demo,
    snafu=snafu_demo,
    pipe_maze=pipe_maze_demo,
    galaxies=galaxies_demo,
    dish=dish_demo,
    monkey_map=monkey_map_demo,
    tree_house=tree_house_demo,
    reflection=reflection_demo,
)


def main(names: list[str]) -> None:
    for name in names or list(DEMOS):
        if name not in DEMOS:
            console.print(
                Panel(
                    Text(f"Unknown puzzle '{name}'\nKnown: {', '.join(DEMOS)}", style="bold red"),
                    title="Error",
                    border_style="red",
                )
            )
            continue
        console.print(DEMOS[name]())


if __name__ == "__main__":
    # Cycle detection reports at INFO
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    main(sys.argv[1:])
