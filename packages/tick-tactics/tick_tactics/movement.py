"""Turn movement: waypoint planning and cell-by-cell stepping.

Stepping only updates occupancy and movement points and queues events.
Animating an entity between cells is left to the presentation layer,
which reads the queued events after each step.
"""
from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

from tick_tactics.events import (
    ALTERED_CELL_ENTERED,
    ALTERED_CELL_LEFT,
    CELL_ENTERED,
    MOVEMENT_STARTED,
    MOVEMENT_STOPPED,
    TURN_ENDED_ON_ALTERED_CELL,
    EventQueue,
)
from tick_tactics.pathfind import movement_path
from tick_tactics.targeting import nearest_cell
from tick_tactics.types import Path, Vec3

if TYPE_CHECKING:
    from tick_tactics.graph import HexGraph

logger = logging.getLogger(__name__)


def plan_waypoints(
    graph: HexGraph,
    path: Path | Sequence[int],
    start: int | None,
    movement_left: int,
) -> list[int]:
    """Cells of ``path`` an entity on ``start`` can afford this turn.

    Costs are rounded entry costs. Planning stops at the first step that
    would exceed ``movement_left`` or cannot be entered.
    """
    cells = path.cells if isinstance(path, Path) else tuple(path)
    waypoints: list[int] = []
    spent = 0
    for cell_id in cells:
        if cell_id == start:
            continue
        cost = graph.entry_cost(cell_id)
        if cost == math.inf or spent + round(cost) > movement_left:
            break
        waypoints.append(cell_id)
        spent += round(cost)
    return waypoints


def warp(
    graph: HexGraph,
    eid: int,
    cell_id: int | None = None,
    position: Vec3 | None = None,
    occupy: bool = True,
) -> int | None:
    """Put ``eid`` directly on a cell, skipping movement rules.

    Without ``cell_id`` the entity stays on its current cell, or snaps to
    the passable cell nearest ``position``. Returns the chosen cell id.
    """
    if cell_id is None:
        cell_id = graph.cell_of(eid)
    if cell_id is None and position is not None:
        cell_id = nearest_cell(graph, position)
    if cell_id is None:
        return None
    if occupy:
        graph.occupy(eid, cell_id)
    return cell_id


class MovementSession:
    """Moves one entity across the graph during its turn.

    Attributes:
        eid: The moving entity. It must occupy a cell to start moving.
        movement_left: Movement points remaining this turn.
    """

    def __init__(
        self,
        graph: HexGraph,
        eid: int,
        events: EventQueue,
        movement_left: int = 3,
    ) -> None:
        self._graph = graph
        self._events = events
        self._waypoints: list[int] = []
        self.eid = eid
        self.movement_left = movement_left

    @property
    def cell(self) -> int | None:
        return self._graph.cell_of(self.eid)

    @property
    def waypoints(self) -> list[int]:
        return list(self._waypoints)

    @property
    def moving(self) -> bool:
        return bool(self._waypoints)

    def start(self, destination: int) -> list[int]:
        """Plan toward ``destination`` and begin moving.

        If the destination is out of reach this turn the entity gets as
        close along the cheapest path as its movement allows.
        """
        current = self.cell
        if current is None:
            logger.debug("entity %d is not on the grid", self.eid)
            return []
        return self.follow(movement_path(self._graph, current, destination))

    def follow(self, path: Path | Sequence[int]) -> list[int]:
        self._waypoints = plan_waypoints(
            self._graph, path, self.cell, self.movement_left
        )
        if self._waypoints:
            self._events.publish(
                MOVEMENT_STARTED, eid=self.eid, waypoints=list(self._waypoints)
            )
        return list(self._waypoints)

    def advance(self) -> int | None:
        """Step into the next waypoint. Returns the entered cell id.

        Stops the movement when the next cell can no longer be entered.
        """
        if not self._waypoints:
            return None
        target = self._waypoints[0]
        cost = self._graph.entry_cost(target)
        if cost == math.inf:
            logger.debug("entity %d blocked at cell %d", self.eid, target)
            self.stop()
            return None
        self._waypoints.pop(0)

        previous = self.cell
        if previous is not None:
            for other in sorted(self._graph.cell(previous).altering):
                self._events.publish(
                    ALTERED_CELL_LEFT, eid=self.eid, cell=previous, altering=other
                )
        self._graph.occupy(self.eid, target)
        self.movement_left = max(0, self.movement_left - round(cost))

        self._events.publish(CELL_ENTERED, eid=self.eid, cell=target, cost=cost)
        for other in sorted(self._graph.cell(target).altering):
            self._events.publish(
                ALTERED_CELL_ENTERED, eid=self.eid, cell=target, altering=other
            )
        if not self._waypoints:
            self._events.publish(MOVEMENT_STOPPED, eid=self.eid, cell=target)
        return target

    def run(self) -> list[int]:
        """Advance through every remaining waypoint."""
        entered: list[int] = []
        while self._waypoints:
            cell_id = self.advance()
            if cell_id is None:
                break
            entered.append(cell_id)
        return entered

    def stop(self) -> None:
        if self._waypoints:
            self._waypoints.clear()
            self._events.publish(MOVEMENT_STOPPED, eid=self.eid, cell=self.cell)

    def end_turn(self) -> None:
        current = self.cell
        if current is None:
            return
        for other in sorted(self._graph.cell(current).altering):
            self._events.publish(
                TURN_ENDED_ON_ALTERED_CELL, eid=self.eid, cell=current, altering=other
            )
