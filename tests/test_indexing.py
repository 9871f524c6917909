import pytest

from rxhash.argon2d.indexing import SYNC_POINTS, Position, index_alpha

MASK64 = 0xFFFFFFFFFFFFFFFF


@pytest.mark.parametrize("pseudo_rand", [0x1000, 0x80000000, 0xFFFFFFFF])
def test_first_pass_first_slice_references_earlier_blocks(pseudo_rand):
    pos = Position(0, 0, 0, 10)
    ref = index_alpha(pos, pseudo_rand, 100, 400)
    assert ref < pos.index
    assert ref < 400


def test_first_pass_later_slice_bounds():
    pos = Position(0, 0, 2, 10)
    ref = index_alpha(pos, 0x12345678, 100, 400)
    assert ref < pos.slice_index * 100 + pos.index
    assert ref < 400


def test_later_pass_stays_in_lane_and_avoids_current_block():
    pos = Position(1, 0, 1, 50)
    ref = index_alpha(pos, 0xABCDEF01, 100, 400)
    assert ref < 400
    assert ref != pos.slice_index * 100 + pos.index


def test_deterministic():
    pos = Position(0, 0, 1, 25)
    results = {index_alpha(pos, 0xDEADBEEF, 100, 400) for _ in range(10)}
    assert len(results) == 1


def test_different_pseudo_rand_gives_spread_of_indices():
    pos = Position(1, 0, 2, 50)
    results = {
        index_alpha(pos, (i * 0x123456789ABCDEF) & MASK64, 100, 400)
        for i in range(100)
    }
    assert len(results) >= 10


def test_quadratic_distribution_favours_recent_blocks():
    pos = Position(0, 0, 0, 1000)
    refs = [
        index_alpha(pos, (i * 0x9E3779B97F4A7C15) & MASK64, 1000, 4000)
        for i in range(10000)
    ]
    most_recent = sum(1 for r in refs if r >= 900)
    oldest = sum(1 for r in refs if r < 100)
    assert most_recent > oldest
    recent_three = sum(1 for r in refs if r >= 700)
    oldest_three = sum(1 for r in refs if r < 300)
    assert recent_three > oldest_three


@pytest.mark.parametrize(
    "pos, pseudo_rand",
    [
        (Position(0, 0, 0, 1), 0),
        (Position(0, 0, 3, 99), 0xFFFFFFFF),
        (Position(1, 0, 0, 0), 0x80000000),
    ],
)
def test_boundary_conditions_stay_in_lane(pos, pseudo_rand):
    assert 0 <= index_alpha(pos, pseudo_rand, 100, 400) < 400


@pytest.mark.parametrize(
    "pos",
    [
        Position(0, 0, 0, 10),
        Position(0, 0, 1, 50),
        Position(1, 0, 2, 75),
        Position(2, 0, 3, 99),
    ],
)
def test_no_self_reference(pos):
    current = pos.slice_index * 100 + pos.index
    for i in range(100):
        pseudo_rand = (i * 0x123456789) & MASK64
        assert index_alpha(pos, pseudo_rand, 100, 400) != current


def test_block_two_can_only_reference_initial_blocks():
    assert index_alpha(Position(0, 0, 0, 2), 123456789, 8, 32) < 2


def test_very_first_block_references_block_zero():
    assert index_alpha(Position(0, 0, 0, 1), 0, 100, 400) == 0


def test_zero_pseudo_rand_selects_most_recent_block():
    assert index_alpha(Position(0, 0, 0, 10), 0, 100, 400) == 8


def test_last_sync_point_of_later_pass_starts_at_lane_start():
    assert index_alpha(Position(1, 0, SYNC_POINTS - 1, 0), 0, 100, 400) == 298


def test_position_is_immutable():
    pos = Position(1, 0, 2, 42)
    with pytest.raises(AttributeError):
        pos.index = 3  # type: ignore[misc]
    assert (pos.pass_number, pos.lane, pos.slice_index, pos.index) == (1, 0, 2, 42)