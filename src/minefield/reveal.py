"""
Cascading reveal.

Computes which cells open up when a cell is revealed, without touching
any cell state; the session applies the result.
"""
from collections import deque
from typing import Set

from .cell import Cell
from .grid import Grid


def reveal_from(grid: Grid, start_cell: Cell) -> Set[Cell]:
    """
    Collect every cell that becomes revealed by revealing `start_cell`.

    Mines and numbered cells reveal only themselves. A zero cell floods
    outward breadth-first: each zero cell pulls in all its neighbors, and
    zero neighbors are queued for expansion in turn. Numbered cells join
    the result as the border of the region but do not expand.

    Args:
        grid: Grid the cell belongs to.
        start_cell: Cell the player revealed.

    Returns:
        Duplicate-free set of cells to reveal, including `start_cell`.
    """
    revealed = {start_cell}
    if start_cell.is_mine or start_cell.adjacent_mines > 0:
        return revealed

    frontier = deque([start_cell])
    while frontier:
        zero = frontier.popleft()
        for neighbor in grid.neighbors_of(zero):
            if neighbor in revealed:
                continue
            revealed.add(neighbor)
            if neighbor.adjacent_mines == 0 and not neighbor.is_mine:
                frontier.append(neighbor)

    return revealed
