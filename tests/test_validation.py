"""Tests for input validation module."""

import warnings

import numpy as np
import pytest

from force_layout import P2d, VecN
from force_layout.validation import (
    InvalidBoundsError,
    InvalidLockCountError,
    InvalidNeighborError,
    LayoutWarning,
    ShapeMismatchError,
    ValidationError,
    validate_bounds,
    validate_iterations,
    validate_locked_count,
    validate_neighbor_indices,
    validate_non_negative,
    validate_positive,
    validate_shape,
    warn_bidirectional_edges,
)


class TestShapeValidation:
    """Tests for positions/adjacency shape validation."""

    def test_valid_shape_returns_dimension(self):
        """Matching lengths return the common dimension."""
        assert validate_shape([P2d(0, 0), P2d(1, 1)], [[1], []]) == 2
        assert validate_shape([VecN([0.0, 0.0, 0.0])], [[]]) == 3

    def test_empty_is_valid(self):
        """No nodes and no adjacency."""
        assert validate_shape([], []) == 0

    def test_length_mismatch_raises(self):
        """len(neighbors) must equal len(positions)."""
        with pytest.raises(ShapeMismatchError, match="neighbors has 1 entries"):
            validate_shape([P2d(0, 0), P2d(1, 1)], [[]])

    def test_mixed_dimensions_raise(self):
        """All positions share one dimension."""
        with pytest.raises(ShapeMismatchError, match="Position 1 has dimension 3"):
            validate_shape([P2d(0, 0), VecN([0.0, 0.0, 0.0])], [[], []])

    def test_mixed_vector_classes_raise(self):
        """Equal dimensions are not enough; the class must match too."""
        with pytest.raises(ShapeMismatchError, match="Position 1 is a VecN"):
            validate_shape([P2d(0, 0), VecN([1.0, 1.0])], [[], []])

    def test_shape_error_is_value_error(self):
        """The hierarchy derives from ValueError."""
        assert issubclass(ShapeMismatchError, ValidationError)
        assert issubclass(ValidationError, ValueError)


class TestNeighborValidation:
    """Tests for adjacency index validation."""

    def test_valid_neighbors(self):
        """In-range indices give no issues."""
        assert validate_neighbor_indices([[1, 2], [2], [0]]) == []

    def test_numpy_integers_accepted(self):
        """numpy integer indices are valid."""
        assert validate_neighbor_indices([[np.int64(1)], [np.int32(0)]]) == []

    def test_out_of_bounds_raises(self):
        """Indices outside [0, n) raise."""
        with pytest.raises(InvalidNeighborError, match="out of bounds"):
            validate_neighbor_indices([[1], [2]])

    def test_negative_index_raises(self):
        """Negative indices are rejected rather than wrapping around."""
        with pytest.raises(InvalidNeighborError):
            validate_neighbor_indices([[-1], []])

    def test_non_integer_raises(self):
        """Floats are not indices."""
        with pytest.raises(InvalidNeighborError, match="not an integer index"):
            validate_neighbor_indices([[1.0], []])

    def test_non_strict_returns_issues(self):
        """strict=False collects the issues."""
        issues = validate_neighbor_indices([[5], [0, 7]], strict=False)
        assert [node for node, _ in issues] == [0, 1]


class TestBidirectionalWarning:
    """Tests for double-listed edge detection."""

    def test_warns_on_both_directions(self):
        """i -> j together with j -> i is flagged."""
        with pytest.warns(LayoutWarning, match="Found 1 edge"):
            count = warn_bidirectional_edges([[1], [0], []])
        assert count == 1

    def test_one_direction_is_silent(self):
        """A consistently one-way listing does not warn."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert warn_bidirectional_edges([[1], [2], [0]]) == 0

    def test_self_loops_ignored(self):
        """A self loop is not a bidirectional edge."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert warn_bidirectional_edges([[0], []]) == 0


class TestBoundsValidation:
    """Tests for bounding region validation."""

    def test_valid_bounds(self):
        """min <= max passes, including degenerate boxes."""
        validate_bounds(P2d(0, 0), P2d(1, 1))
        validate_bounds(P2d(0.5, 0.5), P2d(0.5, 0.5))

    def test_inverted_axis_raises(self):
        """min > max on any axis raises."""
        with pytest.raises(InvalidBoundsError, match="axis 1"):
            validate_bounds(P2d(0, 2), P2d(1, 1))

    def test_dimension_mismatch_raises(self):
        """Corners must agree with each other and with the positions."""
        with pytest.raises(ShapeMismatchError):
            validate_bounds(P2d(0, 0), VecN([1.0, 1.0, 1.0]))
        with pytest.raises(ShapeMismatchError):
            validate_bounds(P2d(0, 0), P2d(1, 1), dim=3)

    def test_class_mismatch_raises(self):
        """Corners share one class, and the positions' class when given."""
        with pytest.raises(ShapeMismatchError, match="class mismatch"):
            validate_bounds(P2d(0, 0), VecN([1.0, 1.0]))
        with pytest.raises(ShapeMismatchError, match="positions are P2d"):
            validate_bounds(VecN([0.0, 0.0]), VecN([1.0, 1.0]), dim=2, kind=P2d)
        validate_bounds(VecN([0.0, 0.0]), VecN([1.0, 1.0]), dim=2, kind=VecN)


class TestParameterValidation:
    """Tests for scalar parameter validation."""

    def test_locked_count(self):
        """K in [0, n]."""
        assert validate_locked_count(0, 3) == 0
        assert validate_locked_count(3, 3) == 3
        with pytest.raises(InvalidLockCountError):
            validate_locked_count(4, 3)
        with pytest.raises(InvalidLockCountError):
            validate_locked_count(-1, 3)

    def test_iterations(self):
        """At least one iteration."""
        assert validate_iterations(1) == 1
        with pytest.raises(ValidationError, match="iterations must be >= 1"):
            validate_iterations(0)

    def test_non_negative(self):
        """Zero is allowed, negatives and NaN are not."""
        assert validate_non_negative("epsilon", 0) == 0.0
        with pytest.raises(ValidationError, match="epsilon must be >= 0"):
            validate_non_negative("epsilon", -0.01)
        with pytest.raises(ValidationError):
            validate_non_negative("epsilon", float("nan"))

    def test_positive(self):
        """Zero is rejected."""
        assert validate_positive("ideal_length", 0.5) == 0.5
        with pytest.raises(ValidationError, match="ideal_length must be positive"):
            validate_positive("ideal_length", 0.0)
