import logging

from crossy.config import GameConfig
from crossy.world import WorldTimeline, to_storage_index


def test_storage_index_is_shifted_by_one():
    assert to_storage_index(1) == 0
    assert to_storage_index(20) == 19
    assert to_storage_index(0) == -1


def test_first_batch(timeline):
    assert len(timeline) == 20
    assert timeline.row_at(1) is not None
    assert timeline.row_at(20) is not None
    assert timeline.row_at(21) is None


def test_safe_strip_has_no_rows(timeline):
    assert timeline.is_safe_strip(0)
    assert timeline.is_safe_strip(-5)
    assert timeline.row_at(0) is None
    assert timeline.row_at(-1) is None


def test_ensure_ahead_is_idempotent(timeline):
    before = [row for _, row in timeline.stored_rows()]
    assert timeline.ensure_ahead(0) == 0
    assert timeline.ensure_ahead(0) == 0
    after = [row for _, row in timeline.stored_rows()]
    assert len(after) == len(before)
    assert all(a is b for a, b in zip(before, after))


def test_ensure_ahead_threshold(timeline):
    assert timeline.ensure_ahead(10) == 0
    assert timeline.ensure_ahead(11) == 20
    assert len(timeline) == 40
    assert timeline.ensure_ahead(11) == 0


def test_explicit_lookahead(timeline):
    assert timeline.ensure_ahead(5, lookahead=16) == 20


def test_same_seed_same_world():
    a = WorldTimeline(GameConfig(seed=77))
    b = WorldTimeline(GameConfig(seed=77))
    a.ensure_ahead(0)
    b.ensure_ahead(0)
    assert list(a.stored_rows()) == list(b.stored_rows())


def test_road_rows_only_yields_roads(timeline):
    for _, row in timeline.road_rows():
        assert row.kind in ("car", "truck")


def test_unbounded_history_never_trims(timeline):
    assert timeline.trim_behind(500) == 0
    assert len(list(timeline.stored_rows())) == 20


def test_trim_keeps_window_and_length():
    world = WorldTimeline(GameConfig(seed=5, retain_behind=5))
    world.ensure_ahead(0)
    assert world.trim_behind(15) == 9
    stored = [row for row, _ in world.stored_rows()]
    assert stored[0] == 10
    assert len(world) == 20
    assert world.ensure_ahead(10) == 0


def test_trimmed_row_comes_back_identical(caplog):
    cfg = GameConfig(seed=5, retain_behind=0)
    world = WorldTimeline(cfg)
    world.ensure_ahead(0)
    reference = WorldTimeline(cfg)
    reference.ensure_ahead(0)

    world.trim_behind(10)
    with caplog.at_level(logging.WARNING, logger="crossy.world"):
        revisited = world.row_at(3)
    assert revisited == reference.row_at(3)
    assert "regenerating" in caplog.text
