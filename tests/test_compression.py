import io

import pytest

from compression import compress, compress_to, decompress, decompress_from
from ditherpack_errors import CompressionError, DecodeError, DecompressionError, InvalidMethodParameter


class TestCompression:
    @pytest.mark.parametrize("data", [b"", b"x", b"abc" * 1000, bytes(range(256)) * 4])
    def test_round_trip(self, data):
        assert decompress(compress(data)) == data

    @pytest.mark.parametrize("level", [1, 3, 22])
    def test_levels(self, level):
        data = b"0123456789" * 100
        assert decompress(compress(data, level=level)) == data

    @pytest.mark.parametrize("level", [0, -5, 23])
    def test_invalid_level(self, level):
        with pytest.raises(InvalidMethodParameter):
            compress(b"data", level=level)

    def test_truncated(self):
        packed = compress(bytes(range(256)) * 8)
        with pytest.raises(DecompressionError):
            decompress(packed[:len(packed) // 2])

    def test_garbage(self):
        with pytest.raises(DecompressionError):
            decompress(b"this is not a zstd frame")

    def test_trailing_bytes(self):
        with pytest.raises(DecompressionError):
            decompress(compress(b"payload") + b"junk")

    def test_decompression_error_is_decode_error(self):
        with pytest.raises(DecodeError):
            decompress(b"\x00\x01\x02")

    def test_output_ceiling(self):
        packed = compress(b"\x00" * 10000)
        assert decompress(packed, max_output_size=10000) == b"\x00" * 10000
        with pytest.raises(DecompressionError):
            decompress(packed, max_output_size=9999)


class _BrokenStream(io.RawIOBase):
    def write(self, b):
        raise OSError("disk full")

    def read(self, size=-1):
        raise OSError("device gone")


class TestStreams:
    def test_compress_to_and_back(self):
        buf = io.BytesIO()
        written = compress_to(b"hello" * 50, buf)
        assert written == len(buf.getvalue())
        buf.seek(0)
        assert decompress_from(buf) == b"hello" * 50

    def test_sink_failure(self):
        with pytest.raises(CompressionError) as exc_info:
            compress_to(b"data", _BrokenStream())
        assert isinstance(exc_info.value.cause, OSError)

    def test_source_failure(self):
        with pytest.raises(DecompressionError):
            decompress_from(_BrokenStream())
