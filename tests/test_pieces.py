from __future__ import annotations

import random

import pytest

from cup_tetris.game import CATALOG, PLAYABLE_KINDS, ActivePiece, Point, TileKind, random_kind, shape_for


def _normalised(points):
    min_x = min(p.x for p in points)
    min_y = min(p.y for p in points)
    return {(p.x - min_x, p.y - min_y) for p in points}


def test_filled_kinds():
    assert not TileKind.EMPTY.is_filled
    assert not TileKind.SHADOW.is_filled
    assert all(k.is_filled for k in PLAYABLE_KINDS)
    assert len(PLAYABLE_KINDS) == 7


def test_catalog_has_four_points_per_shape():
    assert set(CATALOG) == set(PLAYABLE_KINDS)
    for kind, shape in CATALOG.items():
        assert shape.kind == kind
        assert len(shape.points) == 4
        assert len(set(shape.points)) == 4


@pytest.mark.parametrize("kind", [TileKind.EMPTY, TileKind.SHADOW])
def test_shape_for_rejects_non_playable(kind):
    with pytest.raises(KeyError):
        shape_for(kind)


def test_random_kind_is_always_playable():
    rng = random.Random(7)
    drawn = {random_kind(rng) for _ in range(500)}
    assert drawn == set(PLAYABLE_KINDS)


def test_random_kind_is_reproducible_with_seed():
    rng_a, rng_b = random.Random(11), random.Random(11)
    assert [random_kind(rng_a) for _ in range(20)] == [random_kind(rng_b) for _ in range(20)]


@pytest.mark.parametrize("kind", PLAYABLE_KINDS)
def test_rotation_reversibility(kind):
    shape = shape_for(kind)
    assert shape.rotated_clockwise().rotated_counter_clockwise() == shape
    assert shape.rotated_counter_clockwise().rotated_clockwise() == shape


@pytest.mark.parametrize("kind", PLAYABLE_KINDS)
def test_four_quarter_turns_are_identity(kind):
    shape = shape_for(kind)
    turned = shape
    for _ in range(4):
        turned = turned.rotated_clockwise()
    assert turned == shape


def test_rotation_transforms():
    stick = shape_for(TileKind.STICK)
    assert stick.rotated_clockwise().points == (Point(0, -1), Point(0, 0), Point(0, 1), Point(0, 2))
    assert stick.rotated_counter_clockwise().points == (Point(0, 1), Point(0, 0), Point(0, -1), Point(0, -2))


def test_square_keeps_its_silhouette_when_rotated():
    square = shape_for(TileKind.SQUARE)
    rotated = square.rotated_clockwise()
    assert _normalised(rotated.points) == _normalised(square.points) == {(0, 0), (0, 1), (1, 0), (1, 1)}


def test_absolute_points_add_offset():
    piece = ActivePiece.spawn(TileKind.T, Point(5, 1))
    assert piece.kind == TileKind.T
    assert piece.absolute_points() == (Point(4, 1), Point(5, 1), Point(6, 1), Point(5, 2))
    moved = piece.translated(-2, 3)
    assert moved.offset == Point(3, 4)
    assert piece.offset == Point(5, 1)


def test_labels():
    assert TileKind.STICK.label == "Stick"
    assert TileKind.SQUARE.label == "Square"
    assert TileKind.EMPTY.label == ""
