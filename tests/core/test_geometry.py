"""
Tests for the circular block mask
"""

import numpy as np
import pytest

from circle_transcoder.core.image.geometry import block_in_circle, circle_block_mask, in_circle


class TestInCircle:
    """Test single point containment"""

    def test_center_inside(self):
        assert in_circle(100, 100, 200)

    def test_rim_is_exclusive(self):
        # Exactly one radius away from the center
        assert not in_circle(0, 100, 200)
        assert not in_circle(100, 200, 200)
        assert in_circle(1, 100, 200)

    def test_points_outside_square(self):
        assert not in_circle(-1, -1, 200)
        assert not in_circle(250, 100, 200)

    def test_large_diameter(self):
        """Squares beyond 32-bit coordinate ranges stay exact"""
        diameter = 6_000_000_000
        radius = diameter // 2
        assert in_circle(radius, radius, diameter)
        assert not in_circle(0, 0, diameter)
        assert in_circle(1, radius, diameter)

    def test_zero_diameter(self):
        assert not in_circle(0, 0, 0)


class TestBlockInCircle:
    """Test block-granular retention"""

    def test_center_retained(self):
        assert block_in_circle(100, 100, 200)

    @pytest.mark.parametrize("x, y", [(0, 0), (199, 0), (0, 199), (199, 199)])
    def test_corners_discarded(self, x, y):
        assert not block_in_circle(x, y, 200)

    def test_whole_block_shares_decision(self):
        decisions = {block_in_circle(x, y, 200) for x in range(24, 32) for y in range(40, 48)}
        assert len(decisions) == 1

    def test_probe_corners_are_outside_block(self):
        """A block whose own pixels all miss the circle is kept if a probe corner hits"""
        # Block at (8, 8) in a 100px square: (16, 16) is inside the circle
        assert in_circle(16, 16, 100)
        assert not in_circle(8, 8, 100)
        assert block_in_circle(8, 8, 100)

    def test_invalid_block_size(self):
        with pytest.raises(ValueError):
            block_in_circle(0, 0, 200, block_size=0)


class TestCircleBlockMask:
    """Test the vectorised mask"""

    def test_shape_and_dtype(self):
        mask = circle_block_mask(200)
        assert mask.shape == (200, 200)
        assert mask.dtype == bool

    def test_center_and_corners(self):
        mask = circle_block_mask(200)
        assert mask[100, 100]
        assert not mask[0, 0]
        assert not mask[0, 199]
        assert not mask[199, 0]
        assert not mask[199, 199]

    @pytest.mark.parametrize(
        "diameter, block_size",
        [(16, 8), (37, 8), (100, 8), (64, 5), (21, 1)],
    )
    def test_matches_scalar_evaluation(self, diameter, block_size):
        mask = circle_block_mask(diameter, block_size)
        expected = np.array(
            [
                [block_in_circle(x, y, diameter, block_size) for x in range(diameter)]
                for y in range(diameter)
            ]
        )
        np.testing.assert_array_equal(mask, expected)

    def test_blocks_are_uniform(self):
        mask = circle_block_mask(200, 8)
        blocks = mask.reshape(25, 8, 25, 8)
        assert np.all(blocks.all(axis=(1, 3)) == blocks.any(axis=(1, 3)))

    def test_symmetric_about_diagonal(self):
        mask = circle_block_mask(120)
        np.testing.assert_array_equal(mask, mask.T)

    def test_zero_diameter_is_empty(self):
        assert circle_block_mask(0).shape == (0, 0)

    def test_invalid_block_size(self):
        with pytest.raises(ValueError):
            circle_block_mask(100, block_size=-8)
