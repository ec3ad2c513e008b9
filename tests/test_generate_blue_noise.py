import base64
import importlib.util
import io

import numpy as np
from PIL import Image

from generate_blue_noise import generate_blue_noise, void_and_cluster_ranks, write_data_module


class TestGenerator:
    def test_ranks_are_a_permutation(self):
        ranks = void_and_cluster_ranks(16, sigma=1.5, seed=0)
        assert ranks.shape == (16, 16)
        assert np.array_equal(np.sort(ranks.reshape(-1)), np.arange(256))

    def test_thresholds_never_reach_255(self):
        tile = generate_blue_noise(16, seed=1)
        assert tile.dtype == np.uint8
        assert tile.min() == 0
        assert tile.max() <= 254

    def test_seed_is_reproducible(self):
        assert np.array_equal(generate_blue_noise(8, seed=3), generate_blue_noise(8, seed=3))

    def test_write_data_module(self, tmp_path):
        tile = generate_blue_noise(16, seed=0)
        path = tmp_path / "bn_module.py"
        write_data_module(path, tile, 1.5)

        mod_spec = importlib.util.spec_from_file_location("bn_module", path)
        module = importlib.util.module_from_spec(mod_spec)
        mod_spec.loader.exec_module(module)

        assert module.BLUE_NOISE_SIZE == (16, 16)
        raw = base64.b64decode(module.BLUE_NOISE_PNG_B64, validate=True)
        with Image.open(io.BytesIO(raw)) as img:
            assert np.array_equal(np.array(img), tile)
