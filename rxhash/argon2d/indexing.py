"""Data-dependent reference block selection for Argon2d."""

from __future__ import annotations

from dataclasses import dataclass

SYNC_POINTS = 4

_MASK32 = 0xFFFFFFFF


@dataclass(frozen=True)
class Position:
    """Where the fill currently is: pass, lane, slice and index within the slice."""

    pass_number: int
    lane: int
    slice_index: int
    index: int


def index_alpha(
    pos: Position, pseudo_rand: int, segment_length: int, lane_length: int
) -> int:
    """Map a pseudo-random word to the index of the block to reference.

    Arithmetic wraps at 32 bits exactly as the unsigned counters do.
    """
    if pos.pass_number == 0:
        if pos.slice_index == 0:
            area = pos.index - 1
        else:
            area = pos.slice_index * segment_length + pos.index - 1
    else:
        area = lane_length - segment_length + pos.index - 1
    area &= _MASK32
    if area == 0:
        area = 1

    relative = pseudo_rand & _MASK32
    relative = (relative * relative) >> 32
    relative = (area - 1) - ((area * relative) >> 32)

    if pos.pass_number != 0 and pos.slice_index != SYNC_POINTS - 1:
        start = ((pos.slice_index + 1) * segment_length) & _MASK32
    else:
        start = 0

    return ((start + (relative & _MASK32)) & _MASK32) % lane_length