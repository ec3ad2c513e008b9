import io

import numpy as np
import pytest
from PIL import Image

from ditherpack import (
    BLACK_PIXEL,
    WHITE_PIXEL,
    BitmapCodec,
    DecodeError,
    DitherMethod,
    InvalidBitmapError,
    InvalidMethodParameter,
    PixelBuffer,
    dither_to_frame,
    pack,
    pack_to,
    unpack,
    unpack_bitmap,
    unpack_from,
)
from compression import compress

ALL_METHODS = list(DitherMethod)


def _constant(width, height, value):
    return np.full((height, width), value, dtype=np.uint8)


class TestPackUnpack:
    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_all_black(self, method):
        buf = unpack(pack(_constant(37, 11, 0), method))
        assert buf.dimensions == (37, 11)
        assert len(buf) == 37 * 11
        assert buf.pixels.dtype == np.uint32
        assert np.all(buf.pixels == BLACK_PIXEL)

    @pytest.mark.parametrize("method", ALL_METHODS)
    def test_all_white(self, method):
        buf = unpack(pack(_constant(37, 11, 255), method))
        assert len(buf) == 37 * 11
        assert np.all(buf.pixels == WHITE_PIXEL)

    @pytest.mark.parametrize("method", ["bayer", "blue-noise", "WHITE_NOISE"])
    def test_method_names(self, method):
        buf = unpack(pack(_constant(4, 4, 255), method))
        assert np.all(buf.pixels == WHITE_PIXEL)

    def test_unknown_method(self):
        with pytest.raises(InvalidMethodParameter):
            pack(_constant(4, 4, 0), "floyd_steinberg")

    def test_invalid_bayer_power(self):
        with pytest.raises(InvalidMethodParameter):
            pack(_constant(4, 4, 0), DitherMethod.BAYER, bayer_power=0)

    def test_empty_image(self):
        with pytest.raises(InvalidBitmapError):
            pack(np.zeros((0, 5), dtype=np.uint8), DitherMethod.BAYER)

    def test_pil_image_any_mode(self):
        image = Image.new('RGB', (6, 5), (255, 255, 255))
        buf = unpack(pack(image, DitherMethod.BAYER))
        assert buf.dimensions == (6, 5)
        assert np.all(buf.pixels == WHITE_PIXEL)

    def test_bayer_gradient_is_deterministic(self):
        gradient = np.tile(np.arange(64, dtype=np.uint8) * 4, (16, 1))
        assert pack(gradient, DitherMethod.BAYER) == pack(gradient, DitherMethod.BAYER)

    def test_seeded_white_noise_is_deterministic(self):
        gray = _constant(40, 30, 100)
        a = pack(gray, DitherMethod.WHITE_NOISE, rng=np.random.default_rng(5))
        b = pack(gray, DitherMethod.WHITE_NOISE, rng=np.random.default_rng(5))
        assert a == b

    def test_workers_do_not_change_output(self):
        rng = np.random.default_rng(2)
        image = rng.integers(0, 256, size=(260, 50), dtype=np.uint8)
        assert pack(image, "blue_noise", workers=4) == pack(image, "blue_noise")

    def test_mid_gray_keeps_density(self):
        bitmap = unpack_bitmap(pack(_constant(128, 128, 128), DitherMethod.BLUE_NOISE))
        assert abs(bitmap.white_count() / len(bitmap) - 0.5) < 0.02


class TestUnpackErrors:
    def test_truncated_compressed_data(self):
        data = pack(_constant(50, 50, 128), DitherMethod.BAYER)
        with pytest.raises(DecodeError):
            unpack(data[:len(data) // 2])

    def test_frame_shorter_than_declared(self):
        frame = dither_to_frame(_constant(50, 50, 128), DitherMethod.BAYER)
        with pytest.raises(DecodeError):
            unpack(compress(frame[:-3]))

    def test_empty_input(self):
        with pytest.raises(DecodeError):
            unpack(b"")

    def test_output_ceiling(self):
        data = pack(_constant(100, 100, 128), DitherMethod.BAYER)
        frame_size = BitmapCodec.packed_size(100, 100)
        assert len(unpack(data, max_output_size=frame_size)) == 100 * 100
        with pytest.raises(DecodeError):
            unpack(data, max_output_size=frame_size - 1)


class TestStreams:
    def test_pack_to_unpack_from(self):
        sink = io.BytesIO()
        written = pack_to(_constant(9, 9, 255), DitherMethod.BLUE_NOISE, sink)
        assert written == len(sink.getvalue())
        sink.seek(0)
        buf = unpack_from(sink)
        assert buf.dimensions == (9, 9)
        assert np.all(buf.pixels == WHITE_PIXEL)

    def test_stream_matches_bytes(self):
        image = _constant(20, 10, 90)
        sink = io.BytesIO()
        pack_to(image, DitherMethod.BAYER, sink)
        assert sink.getvalue() == pack(image, DitherMethod.BAYER)


class TestPixelBuffer:
    def test_to_image(self):
        luma = np.array([[0, 255, 0]], dtype=np.uint8)
        buf = unpack(pack(luma, DitherMethod.BAYER))
        img = buf.to_image()
        assert isinstance(buf, PixelBuffer)
        assert img.mode == 'RGBA'
        assert img.size == (3, 1)
        assert img.getpixel((0, 0)) == (0, 0, 0, 255)
        assert img.getpixel((1, 0)) == (255, 255, 255, 255)
