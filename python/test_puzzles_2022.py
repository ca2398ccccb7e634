"""Tests for the 2022 puzzle solutions against their worked examples."""

import pytest

import hill_climb
import lava
import monkey_map
import packets
import rock_fall
import sand
import snafu
import tree_house
import valley
from grid_parser import GridParseError
from grid_types import Coord, Direction, Turn
from samples import SAMPLES


class TestHillClimb:
    def test_from_start(self) -> None:
        assert hill_climb.fewest_steps_to_summit(SAMPLES["hill_climb"]) == 31

    def test_from_any_lowland(self) -> None:
        assert hill_climb.fewest_steps_from_any_lowland(SAMPLES["hill_climb"]) == 29

    def test_route(self) -> None:
        """The route climbs at most one level per step."""
        text = SAMPLES["hill_climb"]
        route = hill_climb.summit_route(text)
        elevations = hill_climb.parse_height_map(text).elevations

        assert len(route) == 32
        assert route[0] == Coord(0, 0)
        assert route[-1] == Coord(5, 2)
        for here, there in zip(route, route[1:]):
            assert elevations.get_coord(there) <= elevations.get_coord(here) + 1

    def test_missing_summit(self) -> None:
        with pytest.raises(hill_climb.HillClimbError, match="Summit marker"):
            hill_climb.parse_height_map("Sab\nccd")

    def test_invalid_character(self) -> None:
        with pytest.raises(GridParseError, match="Invalid elevation character"):
            hill_climb.parse_height_map("SaE\n1bc")


class TestPackets:
    def test_ordered_pairs(self) -> None:
        assert packets.ordered_pair_index_sum(SAMPLES["packets"]) == 13

    def test_decoder_key(self) -> None:
        assert packets.decoder_key(SAMPLES["packets"]) == 140

    def test_parse_nested(self) -> None:
        assert packets.parse_packet("[1,[2,[]],10]") == [1, [2, []], 10]
        assert packets.parse_packet("[]") == []

    def test_integer_promoted_to_list(self) -> None:
        """An integer against a list compares as a one-element list."""
        assert packets.compare(3, [3]) == 0
        assert packets.compare([[1], [2, 3, 4]], [[1], 4]) < 0
        assert packets.compare([9], [[8, 7, 6]]) > 0

    def test_shorter_list_first(self) -> None:
        assert packets.compare([7, 7, 7], [7, 7, 7, 7]) < 0
        assert packets.compare([[[]]], [[]]) > 0

    def test_compare_is_antisymmetric(self) -> None:
        lines = [line for line in SAMPLES["packets"].splitlines() if line]
        parsed = [packets.parse_packet(line) for line in lines]
        for left in parsed:
            for right in parsed:
                assert packets.compare(left, right) == -packets.compare(right, left)

    @pytest.mark.parametrize("text", ["[1,2", "[1]]", "[a]", "[1,,2]", "[\u00b2]"])
    def test_malformed(self, text: str) -> None:
        with pytest.raises(packets.PacketParseError):
            packets.parse_packet(text)


class TestSand:
    def test_until_abyss(self) -> None:
        assert sand.sand_until_abyss(SAMPLES["sand"]) == 24

    def test_until_source_blocked(self) -> None:
        assert sand.sand_until_source_blocked(SAMPLES["sand"]) == 93

    def test_rock_lines_drawn(self) -> None:
        cave = sand.Cave(sand.parse_rock_paths(SAMPLES["sand"]))
        assert cave.grid.get(498 - cave.x_offset, 5) is sand.Tile.ROCK
        assert cave.grid.get(497 - cave.x_offset, 6) is sand.Tile.ROCK
        assert cave.floor_y == 11

    def test_diagonal_rejected(self) -> None:
        with pytest.raises(sand.RockPathError, match="not horizontal or vertical"):
            sand.sand_until_abyss("490,1 -> 492,3")

    def test_malformed_point(self) -> None:
        with pytest.raises(sand.RockPathError, match="Invalid point"):
            sand.parse_rock_paths("498,4 -> 4986")

    def test_negative_point_rejected(self) -> None:
        """Points above the source never reach the cave grid."""
        with pytest.raises(sand.RockPathError, match="must be non-negative"):
            sand.sand_until_abyss("498,-1 -> 498,4")


class TestRockFall:
    def test_short_run(self) -> None:
        assert rock_fall.tower_height(SAMPLES["rock_fall"]) == 3068

    def test_skip_agrees_with_naive(self) -> None:
        """Cycle skipping reproduces the brute-force height."""
        result = rock_fall.tower_height_with_skip(SAMPLES["rock_fall"], 2022)
        assert result.measure == 3068

    def test_long_run(self) -> None:
        result = rock_fall.tower_height_with_skip(SAMPLES["rock_fall"])

        assert result.measure == 1514285714288
        assert result.cycle is not None
        assert result.simulated_steps < 10_000

    def test_shapes_are_shared_and_unchanged(self) -> None:
        chamber = rock_fall.Chamber(rock_fall.parse_jets(SAMPLES["rock_fall"]))
        before = [shape.fingerprint() for shape in rock_fall.ROCK_SHAPES]
        for _ in range(50):
            chamber.step()
        assert [shape.fingerprint() for shape in rock_fall.ROCK_SHAPES] == before

    def test_first_rock_lies_flat(self) -> None:
        chamber = rock_fall.Chamber(rock_fall.parse_jets(SAMPLES["rock_fall"]))
        chamber.step()
        assert chamber.height == 1
        assert [chamber.grid.get_unchecked(x, 0) for x in range(7)] == [False, False, True, True, True, True, False]

    def test_grid_grows(self) -> None:
        chamber = rock_fall.Chamber(rock_fall.parse_jets(SAMPLES["rock_fall"]))
        for _ in range(100):
            chamber.step()
        assert chamber.grid.height >= chamber.height

    def test_bad_jet(self) -> None:
        with pytest.raises(rock_fall.JetParseError, match="Invalid jet character 'x' at offset 1"):
            rock_fall.parse_jets("<x>")


class TestLava:
    def test_surface_area(self) -> None:
        assert lava.surface_area(SAMPLES["lava"]) == 64

    def test_exterior_surface_area(self) -> None:
        assert lava.exterior_surface_area(SAMPLES["lava"]) == 58

    def test_two_cubes(self) -> None:
        assert lava.surface_area("1,1,1\n2,1,1") == 10
        assert lava.exterior_surface_area("1,1,1\n2,1,1") == 10

    def test_cube_at_origin(self) -> None:
        """Cubes on the zero planes still have every face exposed."""
        assert lava.exterior_surface_area("0,0,0") == 6

    def test_bad_line(self) -> None:
        with pytest.raises(lava.CubeParseError, match="line 2"):
            lava.parse_cubes("1,2,3\n1,2")

    def test_non_ascii_digit(self) -> None:
        with pytest.raises(lava.CubeParseError, match="Invalid cube"):
            lava.parse_cubes("1,\u00b2,3")


class TestValley:
    def test_single_crossing(self) -> None:
        assert valley.shortest_crossing(SAMPLES["valley"]) == 18

    def test_there_and_back(self) -> None:
        assert valley.there_and_back_again(SAMPLES["valley"]) == 54

    def test_period(self) -> None:
        parsed = valley.parse_valley(SAMPLES["valley"])
        assert parsed.period == 12
        assert parsed.start == Coord(1, 0)
        assert parsed.end == Coord(6, 5)

    def test_snapshots_repeat_with_period(self) -> None:
        parsed = valley.parse_valley(SAMPLES["valley"])
        assert parsed.occupied_at(3) is parsed.occupied_at(3 + parsed.period)
        assert parsed.occupied_at(0) != parsed.occupied_at(1)

    def test_missing_exit(self) -> None:
        with pytest.raises(valley.ValleyParseError, match="exactly one opening"):
            valley.parse_valley("#.##\n#..#\n####")


class TestSnafu:
    def test_sample_sum(self) -> None:
        assert snafu.fuel_requirement_sum(SAMPLES["snafu"]) == "2=-1=0"

    @pytest.mark.parametrize(
        "number, encoded",
        [(0, "0"), (1, "1"), (3, "1="), (8, "2="), (2022, "1=11-2"), (314159265, "1121-1110-1=0"), (-1, "-")],
    )
    def test_known_values(self, number: int, encoded: str) -> None:
        assert snafu.to_snafu(number) == encoded
        assert snafu.parse_snafu(encoded) == number

    def test_round_trip_range(self) -> None:
        for number in range(-300, 301):
            assert snafu.parse_snafu(snafu.to_snafu(number)) == number

    def test_invalid_digit(self) -> None:
        with pytest.raises(snafu.SnafuParseError, match="Invalid SNAFU digit '3' at offset 1"):
            snafu.parse_snafu("130")


class TestMonkeyMap:
    def test_flat_password(self) -> None:
        assert monkey_map.flat_password(SAMPLES["monkey_map"]) == 6032

    def test_cube_password(self) -> None:
        password = monkey_map.cube_password(SAMPLES["monkey_map"], 4, monkey_map.SAMPLE_CUBE_SEAMS)
        assert password == 5031

    def test_parse_path(self) -> None:
        path = monkey_map.parse_path("10R5L0")
        assert path == [10, Turn.CLOCKWISE, 5, Turn.COUNTERCLOCKWISE, 0]

    @pytest.mark.parametrize("text", ["", "10X5", "R R", "5.5"])
    def test_bad_path(self, text: str) -> None:
        with pytest.raises(monkey_map.MonkeyMapError, match="Invalid path"):
            monkey_map.parse_path(text)

    def test_start_on_top_row(self) -> None:
        board = monkey_map.parse_board("  #..\n  ...")
        walker = monkey_map.Walker(board, monkey_map.flat_warps(board))
        assert walker.pos == Coord(3, 0)
        assert walker.facing is Direction.RIGHT

    def test_wall_stops_move(self) -> None:
        board = monkey_map.parse_board("..#.")
        walker = monkey_map.Walker(board, monkey_map.flat_warps(board))
        walker.forward(10)
        assert walker.pos == Coord(1, 0)

    def test_flat_wrap_reaches_far_end(self) -> None:
        board = monkey_map.parse_board("...\n...")
        walker = monkey_map.Walker(board, monkey_map.flat_warps(board))
        walker.turn(Turn.COUNTERCLOCKWISE)
        walker.forward(1)
        assert walker.pos == Coord(0, 1)
        assert walker.facing is Direction.UP

    def test_cube_seam_turns_walker(self) -> None:
        """Walking right off face 4 of the example lands on face 6 heading down."""
        board = monkey_map.parse_notes(SAMPLES["monkey_map"]).board
        warps = monkey_map.cube_warps(board, 4, monkey_map.SAMPLE_CUBE_SEAMS)
        assert warps[(Coord(11, 5), Direction.RIGHT)] == (Coord(14, 8), Direction.DOWN)
        assert warps[(Coord(14, 8), Direction.UP)] == (Coord(11, 5), Direction.LEFT)

    def test_open_cube_net_rejected(self) -> None:
        board = monkey_map.parse_notes(SAMPLES["monkey_map"]).board
        with pytest.raises(monkey_map.MonkeyMapError, match="does not close"):
            monkey_map.cube_warps(board, 4, monkey_map.SAMPLE_CUBE_SEAMS[:-1])

    def test_seam_on_missing_face(self) -> None:
        board = monkey_map.parse_notes(SAMPLES["monkey_map"]).board
        seams = ((0, 0, Direction.UP), (2, 0, Direction.UP)), *monkey_map.SAMPLE_CUBE_SEAMS
        with pytest.raises(monkey_map.MonkeyMapError, match="not on the board"):
            monkey_map.cube_warps(board, 4, seams)

    def test_bad_tile(self) -> None:
        with pytest.raises(monkey_map.MonkeyMapError, match="Invalid board tile 'x' at \\(1, 0\\)"):
            monkey_map.parse_board(".x.")


class TestTreeHouse:
    def test_visible_count(self) -> None:
        assert tree_house.count_visible(SAMPLES["tree_house"]) == 21

    def test_best_scenic_score(self) -> None:
        assert tree_house.best_scenic_score(SAMPLES["tree_house"]) == 8

    def test_scenic_score_of_example_tree(self) -> None:
        forest = tree_house.parse_forest(SAMPLES["tree_house"])
        assert tree_house.scenic_score(forest, Coord(2, 1)) == 4
        assert tree_house.scenic_score(forest, Coord(2, 3)) == 8

    def test_edges_always_visible(self) -> None:
        forest = tree_house.parse_forest("999\n909\n999")
        assert tree_house.visible_trees(forest) == {coord for coord in forest.coords() if coord != Coord(1, 1)}

    def test_interior_visible_from_one_side(self) -> None:
        forest = tree_house.parse_forest("999\n159\n999")
        assert Coord(1, 1) in tree_house.visible_trees(forest)

    def test_bad_height(self) -> None:
        with pytest.raises(GridParseError, match="Invalid tree height"):
            tree_house.parse_forest("12\n3a")
