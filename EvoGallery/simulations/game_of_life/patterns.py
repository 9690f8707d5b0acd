"""Named Game of Life patterns and multi-pattern starting scenarios."""

from __future__ import annotations

from dataclasses import dataclass


def parse_pattern(*rows: str) -> tuple[tuple[int, ...], ...]:
    """Convert ``O``/``.`` drawings into a rectangular 0/1 matrix."""
    width = max(len(row) for row in rows)
    return tuple(tuple(1 if char == "O" else 0 for char in row.ljust(width, ".")) for row in rows)


@dataclass(frozen=True)
class Pattern:
    name: str
    cells: tuple[tuple[int, ...], ...]


@dataclass(frozen=True)
class Scenario:
    name: str
    description: str
    placements: tuple[tuple[str, int, int], ...]  # (pattern key, row, col)


PATTERNS: dict[str, Pattern] = {
    "glider": Pattern("Glider", parse_pattern(".O.", "..O", "OOO")),
    "blinker": Pattern("Blinker", parse_pattern("OOO")),
    "block": Pattern("Block", parse_pattern("OO", "OO")),
    "beehive": Pattern("Beehive", parse_pattern(".OO.", "O..O", ".OO.")),
    "pulsar": Pattern(
        "Pulsar",
        parse_pattern(
            "..OOO...OOO..",
            ".............",
            "O....O.O....O",
            "O....O.O....O",
            "O....O.O....O",
            "..OOO...OOO..",
            ".............",
            "..OOO...OOO..",
            "O....O.O....O",
            "O....O.O....O",
            "O....O.O....O",
            ".............",
            "..OOO...OOO..",
        ),
    ),
    "lwss": Pattern("Lightweight Spaceship", parse_pattern(".O..O", "O....", "O...O", "OOOO.")),
    "pentadecathlon": Pattern(
        "Pentadecathlon",
        parse_pattern("..O....O..", "OO.OOOO.OO", "..O....O.."),
    ),
    "loafer": Pattern(
        "Loafer",
        parse_pattern(
            ".OO..O.OO",
            "O..O..OO.",
            ".O.O.....",
            "..O......",
            "........O",
            "......OOO",
            ".....O...",
            "......O..",
            ".......OO",
        ),
    ),
    "gosper_glider_gun": Pattern(
        "Gosper Glider Gun",
        parse_pattern(
            "........................O...........",
            "......................O.O...........",
            "............OO......OO............OO",
            "...........O...O....OO............OO",
            "OO........O.....O...OO..............",
            "OO........O...O.OO....O.O...........",
            "..........O.....O.......O...........",
            "...........O...O....................",
            "............OO......................",
        ),
    ),
}


SCENARIOS: dict[str, Scenario] = {
    "glider_gun": Scenario(
        "Gosper Glider Gun",
        "Creates an infinite stream of gliders",
        (("gosper_glider_gun", 20, 20),),
    ),
    "pulsar_garden": Scenario(
        "Pulsar Garden",
        "Multiple pulsars interacting",
        (("pulsar", 10, 10), ("pulsar", 30, 10), ("pulsar", 20, 30)),
    ),
    "spaceship_fleet": Scenario(
        "Spaceship Fleet",
        "Different types of spaceships in formation",
        (("lwss", 10, 10), ("lwss", 20, 15), ("glider", 30, 20), ("glider", 40, 25)),
    ),
    "oscillator_mix": Scenario(
        "Oscillator Mix",
        "Various oscillating patterns",
        (("blinker", 10, 10), ("pentadecathlon", 20, 20), ("pulsar", 40, 10)),
    ),
    "collision_course": Scenario(
        "Collision Course",
        "Multiple patterns set to collide",
        (("glider", 10, 10), ("lwss", 30, 30), ("loafer", 20, 20), ("block", 25, 25)),
    ),
    "stable_structures": Scenario(
        "Stable Structures",
        "Collection of stable patterns",
        (("block", 10, 10), ("beehive", 20, 10), ("loafer", 30, 10), ("block", 40, 10)),
    ),
}
