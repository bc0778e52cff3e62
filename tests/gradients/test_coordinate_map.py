import pytest
from gradientgrid.errors import InvalidArgument
from gradientgrid.gradients.gradient import Gradient
from gradientgrid.types.grid_types import GradientDirection, GridCoordinate

RED = (255, 0, 0)
MID = (127, 0, 127)
BLUE = (0, 0, 255)

EXTENTS = [(0, 0), (0, 3), (3, 0), (1, 1), (2, 2), (4, 7), (9, 2)]


def make_gradient():
    return Gradient([RED, BLUE], [4])


def test_map_has_one_entry_per_cell():
    grad = make_gradient()
    for direction in GradientDirection:
        for max_row, max_col in EXTENTS:
            mapping = grad.build_coordinate_map(max_row, max_col, direction)
            assert len(mapping) == (max_row + 1) * (max_col + 1)
            expected = {
                GridCoordinate(col, row)
                for row in range(max_row + 1)
                for col in range(max_col + 1)
            }
            assert set(mapping) == expected


def test_keys_compare_as_col_row_tuples():
    mapping = make_gradient().build_coordinate_map(1, 2, GradientDirection.HORIZONTAL)
    assert mapping[(2, 0)] == BLUE
    assert mapping[GridCoordinate(col=0, row=1)] == RED
    key = next(iter(mapping))
    assert isinstance(key, GridCoordinate)


def test_vertical_example():
    mapping = make_gradient().build_coordinate_map(2, 2, GradientDirection.VERTICAL)
    assert len(mapping) == 9
    for col in range(3):
        assert mapping[(col, 0)] == RED
        assert mapping[(col, 1)] == MID
        assert mapping[(col, 2)] == BLUE


def test_vertical_rows_share_a_color():
    grad = Gradient([(0, 0, 0), (255, 255, 255)], [10])
    mapping = grad.build_coordinate_map(6, 4, GradientDirection.VERTICAL)
    for row in range(7):
        row_colors = {mapping[(col, row)] for col in range(5)}
        assert len(row_colors) == 1
    firsts = [mapping[(0, row)].r for row in range(7)]
    assert firsts == sorted(firsts)
    assert firsts[0] == 0 and firsts[-1] == 255


def test_horizontal_columns_share_a_color():
    grad = Gradient([(0, 0, 0), (255, 255, 255)], [10])
    mapping = grad.build_coordinate_map(4, 6, GradientDirection.HORIZONTAL)
    for col in range(7):
        col_colors = {mapping[(col, row)] for row in range(5)}
        assert len(col_colors) == 1
    firsts = [mapping[(col, 0)].r for col in range(7)]
    assert firsts == sorted(firsts)
    assert firsts[0] == 0 and firsts[-1] == 255


def test_zero_extent_axis_uses_last_color():
    grad = make_gradient()
    vertical = grad.build_coordinate_map(0, 3, GradientDirection.VERTICAL)
    assert set(vertical.values()) == {grad.spectrum[-1]}
    horizontal = grad.build_coordinate_map(3, 0, GradientDirection.HORIZONTAL)
    assert set(horizontal.values()) == {grad.spectrum[-1]}


def test_single_cell_grid_uses_last_color_for_every_direction():
    grad = Gradient([RED, (0, 255, 0), BLUE], [3, 5])
    for direction in GradientDirection:
        mapping = grad.build_coordinate_map(0, 0, direction)
        assert mapping == {GridCoordinate(0, 0): grad.spectrum[-1]}


def test_radial_center_and_corners():
    grad = make_gradient()
    mapping = grad.build_coordinate_map(2, 2, GradientDirection.RADIAL)
    assert mapping[(1, 1)] == RED
    for corner in ((0, 0), (2, 0), (0, 2), (2, 2)):
        assert mapping[corner] == BLUE
    # edge midpoints sit at 1/sqrt(2) of the corner distance
    for edge in ((1, 0), (0, 1), (2, 1), (1, 2)):
        assert mapping[edge] == grad.color_at_fraction(0.5 ** 0.5)


def test_radial_is_symmetric():
    grad = Gradient([RED, BLUE], [50])
    mapping = grad.build_coordinate_map(5, 9, GradientDirection.RADIAL)
    for row in range(6):
        for col in range(10):
            assert mapping[(col, row)] == mapping[(9 - col, row)]
            assert mapping[(col, row)] == mapping[(col, 5 - row)]


def test_diagonal_corners_and_weighting():
    grad = Gradient([RED, BLUE], [12])
    mapping = grad.build_coordinate_map(3, 6, GradientDirection.DIAGONAL)
    assert mapping[(0, 0)] == RED
    assert mapping[(6, 3)] == BLUE
    # one row down weighs the same as two columns across
    assert mapping[(0, 1)] == mapping[(2, 0)]
    assert mapping[(0, 1)] == grad.color_at_fraction(2 / 12)


def test_diagonal_on_single_row_matches_horizontal():
    grad = Gradient([RED, BLUE], [8])
    diagonal = grad.build_coordinate_map(0, 8, GradientDirection.DIAGONAL)
    horizontal = grad.build_coordinate_map(0, 8, GradientDirection.HORIZONTAL)
    assert diagonal == horizontal


def test_direction_accepts_strings():
    grad = make_gradient()
    assert grad.build_coordinate_map(2, 2, "vertical") == grad.build_coordinate_map(
        2, 2, GradientDirection.VERTICAL
    )
    assert grad.build_coordinate_map(2, 2, "RADIAL") == grad.build_coordinate_map(
        2, 2, GradientDirection.RADIAL
    )


def test_invalid_direction_and_extent():
    grad = make_gradient()
    with pytest.raises(InvalidArgument):
        grad.build_coordinate_map(2, 2, "sideways")
    with pytest.raises(InvalidArgument):
        grad.build_coordinate_map(-1, 2, GradientDirection.VERTICAL)
    with pytest.raises(InvalidArgument):
        grad.build_coordinate_map(2, -1, GradientDirection.VERTICAL)
    with pytest.raises(InvalidArgument):
        grad.build_coordinate_map(2.5, 2, GradientDirection.VERTICAL)


def test_each_call_returns_a_fresh_map():
    grad = make_gradient()
    first = grad.build_coordinate_map(1, 1, GradientDirection.DIAGONAL)
    second = grad.build_coordinate_map(1, 1, GradientDirection.DIAGONAL)
    assert first == second
    assert first is not second
    first.clear()
    assert len(second) == 4
    assert len(grad.build_coordinate_map(1, 1, GradientDirection.DIAGONAL)) == 4
