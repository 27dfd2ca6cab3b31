"""Skirmish -- one tactical turn on a small hex board.

Demonstrates:
- Building a rectangular hex graph with mixed terrain and a sight blocker
- Listing the cells a unit can reach with its movement points
- Moving the unit cell by cell and reading the queued events
- Listing the cells it can attack from where it stopped

Run: python packages/tick-tactics/examples/skirmish.py
"""

import logging

from tick_tactics import (
    EventQueue,
    MovementSession,
    Terrain,
    accessible_cells,
    attackable_cells,
    hex_graph,
    movement_path,
)

WIDTH, HEIGHT = 6, 5
KNIGHT, ARCHER = 1, 2

GLYPHS = {
    Terrain.OPEN: ".",
    Terrain.MEDIUM: "~",
    Terrain.HARD: "^",
    Terrain.IMPASSABLE: "#",
}


def draw(graph, marks: dict[int, str]) -> None:
    for row in range(HEIGHT):
        line = []
        for column in range(WIDTH):
            cell = graph.cell(row * WIDTH + column)
            glyph = "o" if cell.blocks_sight else GLYPHS[cell.terrain]
            line.append(marks.get(cell.id, glyph))
        print("  " + " ".join(line))


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    print("=== Skirmish ===\n")

    graph = hex_graph(
        WIDTH,
        HEIGHT,
        terrain={
            (2, 1): Terrain.IMPASSABLE,
            (2, 2): Terrain.IMPASSABLE,
            (3, 3): Terrain.HARD,
            (1, 3): Terrain.MEDIUM,
        },
        blockers=[(3, 1)],
    )
    graph.occupy(KNIGHT, 0)
    graph.occupy(ARCHER, 29)

    print("Board (K = knight, A = archer, o = blocks sight):")
    draw(graph, {0: "K", 29: "A"})

    reach = accessible_cells(graph, 0, 4)
    print(f"\nKnight can reach {len(reach) - 1} cells with 4 movement points:")
    draw(graph, {**{c: "*" for c in reach}, 0: "K", 29: "A"})

    path = movement_path(graph, 0, 16)
    print(f"\nPath to cell 16: {list(path.cells)} (cost {path.cost:g})")

    events = EventQueue()
    session = MovementSession(graph, KNIGHT, events, movement_left=4)
    session.start(16)
    session.run()
    for name, data in events.drain():
        print(f"  {name}: {data}")

    here = graph.cell_of(KNIGHT)
    targets = attackable_cells(graph, here, 1, 3)
    print(f"\nFrom cell {here}, the knight can attack {sorted(targets)}:")
    draw(graph, {**{c: "x" for c in targets}, here: "K", 29: "A"})


if __name__ == "__main__":
    main()
