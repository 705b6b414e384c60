"""Board factory."""

from .models import Board, Column
from .stages import STAGE_LABELS, STAGE_ORDER


def create_board() -> Board:
    """Build an empty board: one empty column per stage, in stage order."""
    return Board(
        columns=tuple(
            Column(stageId=stage, label=STAGE_LABELS[stage], tasks=())
            for stage in STAGE_ORDER
        )
    )
