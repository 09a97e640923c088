"""
Plain-text rendering of a Kakurasu board for consoles and debugging.
"""
from typing import List

from core.game import Game


class BoardTextRenderer:
    """Renders a game as a text grid with weights and constraint values."""

    ACTIVE_ICON = "A"
    FLAGGED_ICON = "x"
    SOLUTION_ICON = "S"

    def __init__(self, reveal_solution: bool = False):
        """
        Args:
            reveal_solution: Mark clear solution fields with ``S``
        """
        self.reveal_solution = reveal_solution

    def cell_width(self, game: Game) -> int:
        """Width of one cell: widest of the row/column weights and constraint values."""
        largest_index = len(str(max(game.amount_rows(), game.amount_columns())))
        highest = game.get_highest_constraint_value()
        largest_constraint = len(str(highest)) if highest is not None else 0
        return max(largest_index, largest_constraint)

    def _icon(self, game: Game, row: int, column: int) -> str:
        field = game.get_field(row, column)
        if field.is_active():
            return self.ACTIVE_ICON
        if field.is_flagged():
            return self.FLAGGED_ICON
        if self.reveal_solution and field.is_solution():
            return self.SOLUTION_ICON
        return ""

    def render(self, game: Game) -> str:
        """
        Render the board.

        The first line lists column weights, each row line starts with the row
        weight and ends with the row target, the last line lists column targets.
        """
        width = self.cell_width(game)
        columns = game.amount_columns()
        separator = ("-" * width + "+") * (columns + 1) + "-" * width

        lines: List[str] = []
        header = " " * width + "|"
        header += "".join(str(game.get_weight(c)).rjust(width) + "|" for c in range(columns))
        lines.append(header + " " * width)

        for row in range(game.amount_rows()):
            lines.append(separator)
            line = str(game.get_weight(row)).rjust(width) + "|"
            line += "".join(self._icon(game, row, c).rjust(width) + "|" for c in range(columns))
            line += str(game.get_constraint_value_for_row(row)).rjust(width)
            lines.append(line)

        lines.append(separator)
        footer = " " * width + "|"
        footer += "".join(
            str(game.get_constraint_value_for_column(c)).rjust(width) + "|" for c in range(columns)
        )
        lines.append(footer)
        return "\n".join(lines)


def render_board(game: Game, reveal_solution: bool = False) -> str:
    return BoardTextRenderer(reveal_solution).render(game)
