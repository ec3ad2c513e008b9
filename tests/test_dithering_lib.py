import numpy as np
import pytest
from PIL import Image

from ditherpack_errors import InvalidMethodParameter
from dithering_lib import (
    DitherEngine,
    DitherMethod,
    ThresholdMatrix,
    ThresholdMatrixGenerator,
)


class TestDitherMethod:
    @pytest.mark.parametrize("name,expected", [
        ("bayer", DitherMethod.BAYER),
        ("BAYER", DitherMethod.BAYER),
        ("blue_noise", DitherMethod.BLUE_NOISE),
        ("blue-noise", DitherMethod.BLUE_NOISE),
        ("white-noise", DitherMethod.WHITE_NOISE),
        (DitherMethod.WHITE_NOISE, DitherMethod.WHITE_NOISE),
    ])
    def test_parse(self, name, expected):
        assert DitherMethod.parse(name) is expected

    def test_parse_unknown(self):
        with pytest.raises(InvalidMethodParameter) as exc_info:
            DitherMethod.parse("floyd_steinberg")
        assert exc_info.value.operation == "select dither method"
        assert isinstance(exc_info.value, ValueError)


class TestThresholdMatrix:
    def test_look_up_wraps(self):
        m = ThresholdMatrix((3, 2), np.arange(6, dtype=np.uint8))
        assert m.look_up(0, 0) == 0
        assert m.look_up(2, 1) == 5
        assert m.look_up(3, 0) == 0
        assert m.look_up(4, 3) == 4
        assert m.look_up(-1, -1) == 5

    def test_tile_matches_look_up(self):
        m = ThresholdMatrix((3, 2), np.arange(6, dtype=np.uint8))
        tiled = m.tile(7, 5, y_offset=3)
        assert tiled.shape == (5, 7)
        for r in range(5):
            for c in range(7):
                assert tiled[r, c] == m.look_up(c, 3 + r)

    def test_matrix_is_read_only(self):
        m = ThresholdMatrix((2, 2), [1, 2, 3, 4])
        with pytest.raises(ValueError):
            m.matrix[0] = 9

    def test_wrong_length(self):
        with pytest.raises(InvalidMethodParameter):
            ThresholdMatrix((2, 2), [1, 2, 3])

    def test_empty_dimensions(self):
        with pytest.raises(InvalidMethodParameter):
            ThresholdMatrix((0, 4), [])


class TestBayer:
    @pytest.mark.parametrize("power", [1, 2, 3])
    def test_distinct_values(self, power):
        m = ThresholdMatrixGenerator.bayer(power)
        n = 1 << power
        assert m.dimensions == (n, n)
        assert len(m.matrix) == n * n
        assert len(np.unique(m.matrix)) == 4 ** power

    def test_power_four_merges_one_level(self):
        m = ThresholdMatrixGenerator.bayer(4)
        assert m.dimensions == (16, 16)
        assert len(np.unique(m.matrix)) == 255
        assert m.matrix.max() == 254

    @pytest.mark.parametrize("power", [1, 2, 3, 4, 5])
    def test_origin_is_zero(self, power):
        m = ThresholdMatrixGenerator.bayer(power)
        assert m.look_up(0, 0) == 0
        assert m.matrix.min() == 0

    @pytest.mark.parametrize("power", [1, 2, 3, 4])
    def test_periodic(self, power):
        m = ThresholdMatrixGenerator.bayer(power)
        n = 1 << power
        for y in range(n):
            for x in range(n):
                assert m.look_up(x, y) == m.look_up(x + n, y)
                assert m.look_up(x, y) == m.look_up(x, y + n)
                assert m.look_up(x, y) == m.look_up(x + 3 * n, y + 2 * n)

    def test_two_by_two(self):
        m = ThresholdMatrixGenerator.bayer(1)
        assert m.as_array().tolist() == [[0, 127], [191, 63]]

    def test_default_scaling(self):
        m = ThresholdMatrixGenerator.bayer()
        assert m.dimensions == (8, 8)
        assert sorted(m.matrix.tolist()) == [v * 255 // 64 for v in range(64)]
        assert m.look_up(4, 4) == 255 // 64  # v == 1

    @pytest.mark.parametrize("power", [1, 3, 8])
    def test_never_reaches_255(self, power):
        assert ThresholdMatrixGenerator.bayer(power).matrix.max() <= 254

    @pytest.mark.parametrize("power", [0, -1, 9, 16])
    def test_invalid_power(self, power):
        with pytest.raises(InvalidMethodParameter):
            ThresholdMatrixGenerator.bayer(power)


class TestBlueNoise:
    def test_tile(self):
        m = ThresholdMatrixGenerator.blue_noise()
        assert m.dimensions == (128, 128)
        assert m.matrix.max() <= 254
        # Close to a uniform spread of thresholds.
        assert len(np.unique(m.matrix)) > 200

    def test_cached(self):
        assert ThresholdMatrixGenerator.blue_noise() is ThresholdMatrixGenerator.blue_noise()


class TestWhiteNoise:
    def test_length_and_range(self):
        m = ThresholdMatrixGenerator.white_noise(31, 17, rng=np.random.default_rng(7))
        assert m.dimensions == (31, 17)
        assert len(m.matrix) == 31 * 17
        assert m.matrix.max() <= 254
        for y in range(17):
            for x in range(31):
                assert 0 <= m.look_up(x, y) <= 254

    def test_seeded_is_reproducible(self):
        a = ThresholdMatrixGenerator.white_noise(20, 20, rng=np.random.default_rng(3))
        b = ThresholdMatrixGenerator.white_noise(20, 20, rng=np.random.default_rng(3))
        assert np.array_equal(a.matrix, b.matrix)

    def test_unseeded_varies(self):
        a = ThresholdMatrixGenerator.white_noise(64, 64)
        b = ThresholdMatrixGenerator.white_noise(64, 64)
        assert not np.array_equal(a.matrix, b.matrix)

    @pytest.mark.parametrize("width,height", [(0, 4), (4, 0)])
    def test_invalid_dimensions(self, width, height):
        with pytest.raises(InvalidMethodParameter):
            ThresholdMatrixGenerator.white_noise(width, height)

    def test_build_uses_image_dimensions(self):
        m = ThresholdMatrixGenerator.build("white_noise", (9, 4))
        assert m.dimensions == (9, 4)


class TestDitherEngine:
    def test_strictly_greater_is_white(self):
        luma = np.full((2, 2), 127, dtype=np.uint8)
        bitmap = DitherEngine().run(ThresholdMatrixGenerator.bayer(1), luma)
        assert bitmap.bits.tolist() == [True, False, False, True]

    def test_row_major_order(self):
        thresholds = ThresholdMatrix((3, 2), np.zeros(6, dtype=np.uint8))
        luma = np.array([[1, 0, 1],
                         [0, 0, 1]], dtype=np.uint8)
        bitmap = DitherEngine().run(thresholds, luma)
        assert bitmap.dimensions == (3, 2)
        assert bitmap.bits.tolist() == [True, False, True, False, False, True]

    def test_mid_gray_bayer_density(self):
        luma = np.full((16, 16), 128, dtype=np.uint8)
        bitmap = DitherEngine().run(ThresholdMatrixGenerator.bayer(3), luma)
        # Thresholds below 128 are v * 255 // 64 for v in 0..32.
        assert bitmap.white_count() == 33 * 4

    def test_accepts_pil_image(self):
        image = Image.new('RGB', (5, 3), (255, 255, 255))
        bitmap = DitherEngine().run(ThresholdMatrixGenerator.bayer(2), image)
        assert bitmap.dimensions == (5, 3)
        assert bitmap.white_count() == 15

    def test_raster_untouched(self):
        luma = np.arange(64, dtype=np.uint8).reshape(8, 8)
        before = luma.copy()
        DitherEngine().run(ThresholdMatrixGenerator.bayer(2), luma)
        assert np.array_equal(luma, before)

    def test_workers_match_single_thread(self):
        rng = np.random.default_rng(11)
        luma = rng.integers(0, 256, size=(301, 97), dtype=np.uint8)
        matrix = ThresholdMatrixGenerator.blue_noise()
        single = DitherEngine().run(matrix, luma)
        banded = DitherEngine(workers=4, min_band_rows=16).run(matrix, luma)
        assert banded == single

    def test_invalid_workers(self):
        with pytest.raises(ValueError):
            DitherEngine(workers=0)
