"""The Argon2d memory-filling passes."""

from __future__ import annotations

from typing import List

from rxhash.argon2d.block import Block
from rxhash.argon2d.compression import fill_block
from rxhash.argon2d.indexing import SYNC_POINTS, Position, index_alpha


def fill_memory(memory: List[Block], passes: int, lanes: int) -> None:
    """Fill memory in place over the given number of passes."""
    if lanes < 1:
        raise ValueError(f"lanes must be at least 1, got {lanes}")
    lane_length = len(memory) // lanes
    segment_length = lane_length // SYNC_POINTS

    for pass_number in range(passes):
        for slice_index in range(SYNC_POINTS):
            for lane in range(lanes):
                fill_segment(
                    memory, pass_number, lane, slice_index, segment_length, lane_length
                )


def fill_segment(
    memory: List[Block],
    pass_number: int,
    lane: int,
    slice_index: int,
    segment_length: int,
    lane_length: int,
) -> None:
    """Fill one segment of one lane using data-dependent references.

    The first two blocks of the first segment of the first pass are left
    alone; they come from the initial hash.
    """
    start_index = slice_index * segment_length
    lane_start = lane * lane_length

    for i in range(segment_length):
        current_index = start_index + i
        if pass_number == 0 and slice_index == 0 and current_index < 2:
            continue

        curr_offset = lane_start + current_index
        if current_index == 0:
            prev_offset = lane_start + lane_length - 1
        else:
            prev_offset = curr_offset - 1

        pseudo_rand = memory[prev_offset][0]
        pos = Position(pass_number, lane, slice_index, i)
        ref_offset = lane_start + index_alpha(
            pos, pseudo_rand, segment_length, lane_length
        )

        fill_block(
            memory[prev_offset],
            memory[ref_offset],
            memory[curr_offset],
            pass_number != 0,
        )