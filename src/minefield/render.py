"""Plain-text rendering of a session."""
from typing import List

from .session import GameSession, Phase


_FACES = {-1: ".", -2: "F", 9: "*", 0: " "}


def render_board(session: GameSession, show_axes: bool = True) -> str:
    """Render the board as rows of characters."""
    obs = session.get_observation()
    final = session.final_cell
    lines: List[str] = []

    if show_axes:
        lines.append("   " + " ".join(str(col % 10) for col in range(obs.shape[1])))

    for row in range(obs.shape[0]):
        row_chars = []
        for col in range(obs.shape[1]):
            val = int(obs[row, col])
            char = _FACES.get(val, str(val))
            if final is not None and final.position == (row, col):
                # Exploded mine or the winning click
                char = "X" if session.phase == Phase.LOST else "$"
            row_chars.append(char)
        line = " ".join(row_chars)
        lines.append(f"{row:2d} {line}" if show_axes else line)

    return "\n".join(lines)


def render_status(session: GameSession) -> str:
    """Flag counter, timer and phase on one line."""
    status = (
        f"Flags: {session.flags_remaining}  "
        f"Time: {session.elapsed_seconds}"
    )
    if session.phase == Phase.WON:
        status += "  -- You win!"
    elif session.phase == Phase.LOST:
        status += "  -- Boom. Game over."
    return status
