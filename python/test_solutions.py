"""Tests for the day solvers against the published sample inputs."""

import pytest

from solutions import REGISTRY, get_puzzle
from solutions import (
    y2022_day12,
    y2022_day15,
    y2023_day10,
    y2023_day14,
    y2023_day16,
    y2023_day17,
    y2023_day18,
    y2023_day21,
    y2023_day23,
)


def sample(text: str) -> list[str]:
    return text.strip("\n").splitlines()


HILL = sample("""
Sabqponm
abcryxxl
accszExk
acctuvwj
abdefghi
""")

SENSORS = sample("""
Sensor at x=2, y=18: closest beacon is at x=-2, y=15
Sensor at x=9, y=16: closest beacon is at x=10, y=16
Sensor at x=13, y=2: closest beacon is at x=15, y=3
Sensor at x=12, y=14: closest beacon is at x=10, y=16
Sensor at x=10, y=20: closest beacon is at x=10, y=16
Sensor at x=14, y=17: closest beacon is at x=10, y=16
Sensor at x=8, y=7: closest beacon is at x=2, y=10
Sensor at x=2, y=0: closest beacon is at x=2, y=10
Sensor at x=0, y=11: closest beacon is at x=2, y=10
Sensor at x=20, y=14: closest beacon is at x=25, y=17
Sensor at x=17, y=20: closest beacon is at x=21, y=22
Sensor at x=16, y=7: closest beacon is at x=15, y=3
Sensor at x=14, y=3: closest beacon is at x=15, y=3
Sensor at x=20, y=1: closest beacon is at x=15, y=3
""")

SQUARE_LOOP = sample("""
.....
.S-7.
.|.|.
.L-J.
.....
""")

COMPLEX_LOOP = sample("""
..F7.
.FJ|.
SJ.L7
|F--J
LJ...
""")

ENCLOSING_LOOP = sample("""
...........
.S-------7.
.|F-----7|.
.||.....||.
.||.....||.
.|L-7.F-J|.
.|..|.|..|.
.L--J.L--J.
...........
""")

SQUEEZED_LOOP = sample("""
..........
.S------7.
.|F----7|.
.||....||.
.||....||.
.|L-7F-J|.
.|..||..|.
.L--JL--J.
..........
""")

PLATFORM = sample("""
O....#....
O.OO#....#
.....##...
OO.#O....O
.O.....O#.
O.#..O.#.#
..O..#O..O
.......O..
#....###..
#OO..#....
""")

CONTRAPTION = sample(r"""
.|...\....
|.-.\.....
.....|-...
........|.
..........
.........\
..../.\\..
.-.-/..|..
.|....-|.\
..//.|....
""")

HEAT_LOSS = sample("""
2413432311323
3215453535623
3255245654254
3446585845452
4546657867536
1438598798454
4457876987766
3637877979653
4654967986887
4564679986453
1224686865563
2546548887735
4322674655533
""")

UNFAIR_HEAT_LOSS = sample("""
111111111111
999999999991
999999999991
999999999991
999999999991
""")

DIG_PLAN = sample("""
R 6 (#70c710)
D 5 (#0dc571)
L 2 (#5713f0)
D 2 (#d2c081)
R 2 (#59c680)
D 2 (#411b91)
L 5 (#8ceee2)
U 2 (#caa173)
L 1 (#1b58a2)
U 2 (#caa171)
R 2 (#7807d2)
U 3 (#a77fa3)
L 2 (#015232)
U 2 (#7a21e3)
""")

GARDEN = sample("""
...........
.....###.#.
.###.##..#.
..#.#...#..
....#.#....
.##..S####.
.##..#...#.
.......##..
.##.#.####.
.##..##.##.
...........
""")

TRAILS = sample("""
#.#####################
#.......#########...###
#######.#########.#.###
###.....#.>.>.###.#.###
###v#####.#v#.###.#.###
###.>...#.#.#.....#...#
###v###.#.#.#########.#
###...#.#.#.......#...#
#####.#.#.#######.#.###
#.....#.#.#.......#...#
#.#####.#.#.#########v#
#.#...#...#...###...>.#
#.#.#v#######v###.###v#
#...#.>.#...>.>.#.###.#
#####v#.#.###v#.#.###.#
#.....#...#...#.#.#...#
#.#########.###.#.#.###
#...###...#...#...#.###
###.###.#.###v#####v###
#...#...#.#.>.>.#.>.###
#.###.###.#.###.#.#v###
#.....###...###...#...#
#####################.#
""")


class TestRegistry:
    """Tests for the solver registry."""

    def test_every_module_solves_both_parts(self) -> None:
        """Registered modules expose part1 and part2."""
        for puzzle in REGISTRY.values():
            assert callable(puzzle.module.part1)
            assert callable(puzzle.module.part2)

    def test_unknown_day(self) -> None:
        """Unknown days list what is available."""
        with pytest.raises(KeyError, match="No solver registered"):
            get_puzzle(2019, 1)

    def test_sample_args(self) -> None:
        """Sample and actual inputs take different extra arguments."""
        puzzle = get_puzzle(2022, 15)
        assert puzzle.args_for(1, sample=True) == (10,)
        assert puzzle.args_for(2, sample=False) == (4_000_000,)
        assert get_puzzle(2023, 17).args_for(1, sample=True) == ()

    def test_solve_dispatch(self) -> None:
        """solve routes to the requested part."""
        puzzle = get_puzzle(2023, 18)
        assert puzzle.solve(1, DIG_PLAN) == 62
        with pytest.raises(ValueError, match="Invalid part"):
            puzzle.solve(3, DIG_PLAN)


class TestHillClimbing:
    """2022 Day 12."""

    def test_part1(self) -> None:
        """Fewest steps from S to E."""
        assert y2022_day12.part1(HILL) == 31

    def test_part2(self) -> None:
        """Fewest steps from any lowest square."""
        assert y2022_day12.part2(HILL) == 29


class TestBeaconExclusion:
    """2022 Day 15."""

    def test_part1(self) -> None:
        """Positions ruled out on row 10."""
        assert y2022_day15.part1(SENSORS, 10) == 26

    def test_part2(self) -> None:
        """Tuning frequency of the distress beacon."""
        assert y2022_day15.part2(SENSORS, 20) == 56000011

    def test_candidate_rows(self) -> None:
        """The beacon's row is among the diamond-edge crossings."""
        rows = y2022_day15.candidate_rows(y2022_day15.parse_sensors(SENSORS), 20)
        assert 11 in rows
        assert rows == sorted(rows)
        assert all(0 <= row <= 20 for row in rows)

    def test_invalid_report(self) -> None:
        """Malformed lines are rejected."""
        with pytest.raises(ValueError, match="Invalid sensor report"):
            y2022_day15.parse_sensors(["Sensor at x=1, y=2"])


class TestPipeMaze:
    """2023 Day 10."""

    def test_part1(self) -> None:
        """Half the loop length."""
        assert y2023_day10.part1(SQUARE_LOOP) == 4
        assert y2023_day10.part1(COMPLEX_LOOP) == 8

    def test_part2(self) -> None:
        """Tiles enclosed by the loop, including when pipes squeeze together."""
        assert y2023_day10.part2(ENCLOSING_LOOP) == 4
        assert y2023_day10.part2(SQUEEZED_LOOP) == 4
        assert y2023_day10.part2(SQUARE_LOOP) == 1

    def test_missing_start(self) -> None:
        """A maze without S is rejected."""
        with pytest.raises(ValueError, match="has no 'S' tile"):
            y2023_day10.part1(["-7", "LJ"])

    def test_broken_loop(self) -> None:
        """A loop that dead-ends names the tile where it breaks."""
        with pytest.raises(ValueError, match=r"broken at \(2, 2\)"):
            y2023_day10.part1(["S-7", "|.|", "L-."])


class TestReflectorDish:
    """2023 Day 14."""

    def test_part1(self) -> None:
        """Load after tilting north."""
        assert y2023_day14.part1(PLATFORM) == 136

    def test_part2(self) -> None:
        """Load after a billion spin cycles."""
        assert y2023_day14.part2(PLATFORM) == 64

    def test_tilt_west(self) -> None:
        """Rocks stop at cube rocks and each other."""
        from grid_parser import parse_grid
        from grid_types import CardinalDirection

        grid = parse_grid([".O.#..O", "O.O.O.."])
        y2023_day14.tilt(grid, CardinalDirection.LEFT)
        assert grid.to_text() == "O..#O..\nOOO...."


class TestFloorWillBeLava:
    """2023 Day 16."""

    def test_part1(self) -> None:
        """Tiles energized from the top-left corner."""
        assert y2023_day16.part1(CONTRAPTION) == 46

    def test_part2(self) -> None:
        """Best edge entry."""
        assert y2023_day16.part2(CONTRAPTION) == 51


class TestClumsyCrucible:
    """2023 Day 17."""

    def test_part1(self) -> None:
        """Least heat loss for a normal crucible."""
        assert y2023_day17.part1(HEAT_LOSS) == 102

    def test_part2(self) -> None:
        """Least heat loss for an ultra crucible, which must run 4 blocks before stopping."""
        assert y2023_day17.part2(HEAT_LOSS) == 94
        assert y2023_day17.part2(UNFAIR_HEAT_LOSS) == 71


class TestLavaductLagoon:
    """2023 Day 18."""

    def test_part1(self) -> None:
        """Volume from the written instructions."""
        assert y2023_day18.part1(DIG_PLAN) == 62

    def test_part2(self) -> None:
        """Volume from the colour codes."""
        assert y2023_day18.part2(DIG_PLAN) == 952408144115

    def test_open_plan_rejected(self) -> None:
        """A trench that does not return to its start is an error."""
        with pytest.raises(ValueError, match="does not return to its start"):
            y2023_day18.part1(["R 2 (#000020)", "D 1 (#000011)"])


class TestStepCounter:
    """2023 Day 21."""

    def test_part1(self) -> None:
        """Plots reachable in exactly 6 steps."""
        assert y2023_day21.part1(GARDEN, 6) == 16

    @pytest.mark.parametrize(("steps", "plots"), [(6, 16), (10, 50), (50, 1594), (100, 6536)])
    def test_part2(self, steps: int, plots: int) -> None:
        """Plots reachable on the infinite garden."""
        assert y2023_day21.part2(GARDEN, steps) == plots


class TestLongWalk:
    """2023 Day 23."""

    def test_part1(self) -> None:
        """Longest hike down slippery slopes."""
        assert y2023_day23.part1(TRAILS) == 94

    def test_part2(self) -> None:
        """Longest hike when slopes are dry."""
        assert y2023_day23.part2(TRAILS) == 154
