import numpy as np
import pytest

from tris_engine.game import BASE_SHAPES, COLORS, EMPTY_RGB, Piece, TetrominoType, color_for_value


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_four_rotations_return_to_start(kind):
    piece = Piece.spawn(kind)
    turned = piece
    for _ in range(4):
        turned = turned.rotated()
    assert np.array_equal(turned.matrix, piece.matrix)


@pytest.mark.parametrize("kind", list(TetrominoType))
def test_rotation_is_clockwise(kind):
    m = BASE_SHAPES[kind]
    n = m.shape[0]
    rotated = Piece.spawn(kind).rotated().matrix
    for i in range(n):
        for j in range(n):
            assert rotated[i, j] == m[n - 1 - j, i]


def test_o_piece_rotation_is_noop():
    piece = Piece.spawn(TetrominoType.O)
    assert np.array_equal(piece.rotated().matrix, piece.matrix)


def test_t_piece_rotated_once():
    rotated = Piece.spawn(TetrominoType.T).rotated()
    expected = np.array([[0, 1, 0], [0, 1, 1], [0, 1, 0]])
    assert np.array_equal(rotated.matrix, expected)


def test_rotation_keeps_position_and_source():
    piece = Piece(TetrominoType.L, BASE_SHAPES[TetrominoType.L], x=3, y=7)
    turned = piece.rotated()
    assert (turned.x, turned.y) == (3, 7)
    assert np.array_equal(piece.matrix, BASE_SHAPES[TetrominoType.L])


@pytest.mark.parametrize(
    "kind, expected_x",
    [(TetrominoType.I, 3), (TetrominoType.O, 4), (TetrominoType.T, 4), (TetrominoType.Z, 4)],
)
def test_spawn_is_centered_at_top(kind, expected_x):
    piece = Piece.spawn(kind, width=10)
    assert piece.x == expected_x
    assert piece.y == 0


def test_matrix_sizes():
    assert BASE_SHAPES[TetrominoType.O].shape == (2, 2)
    assert BASE_SHAPES[TetrominoType.I].shape == (4, 4)
    for kind in (TetrominoType.J, TetrominoType.L, TetrominoType.S, TetrominoType.T, TetrominoType.Z):
        assert BASE_SHAPES[kind].shape == (3, 3)


def test_base_shapes_are_read_only():
    with pytest.raises(ValueError):
        BASE_SHAPES[TetrominoType.T][0, 0] = 1


def test_cells_are_absolute():
    piece = Piece.spawn(TetrominoType.I)
    assert piece.cells() == [(3, 1), (4, 1), (5, 1), (6, 1)]
    assert piece.moved(-3, 2).cells() == [(0, 3), (1, 3), (2, 3), (3, 3)]


def test_color_and_name():
    piece = Piece.spawn(TetrominoType.S)
    assert piece.color == COLORS[TetrominoType.S] == "#1048a0"
    assert piece.name == "S-BLOCK"


def test_rotated_piece_is_not_equal_to_original():
    piece = Piece.spawn(TetrominoType.T)
    turned = piece.rotated()
    assert piece != turned
    assert len({piece, turned}) == 2


def test_equal_placements_compare_and_hash_equal():
    piece = Piece.spawn(TetrominoType.L).moved(2, 3)
    again = Piece.spawn(TetrominoType.L).rotated().rotated().rotated().rotated().moved(2, 3)
    assert piece == again
    assert hash(piece) == hash(again)
    assert piece != piece.moved(1, 0)


def test_color_for_grid_values():
    assert color_for_value(0) == EMPTY_RGB
    assert color_for_value(int(TetrominoType.I)) == (0xA0, 0x48, 0x00)
    assert color_for_value(-int(TetrominoType.I)) == (0xA0, 0x48, 0x00)
