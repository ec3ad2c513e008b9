#!/usr/bin/env python3
"""
Regenerate blue_noise_data.py with the void-and-cluster method (Ulichney 1993).

Energies use a toroidal gaussian, updated incrementally each time a pixel is
toggled. Ranks are scaled to 0..254 so that a luma of 255 always beats the
threshold.

Usage:
  python misc/generate_blue_noise.py [--size 128] [--sigma 1.5] [--seed 0] [--output blue_noise_data.py]
"""

import argparse
import base64
import io
from pathlib import Path

import numpy as np
from PIL import Image

MODULE_TEMPLATE = '''"""
Bundled blue-noise threshold tile.

A {size}x{size} 8-bit grayscale PNG produced by the void-and-cluster method
(gaussian sigma {sigma}, toroidal). Ranks are scaled to 0..254 so a fully white
pixel always stays white. Regenerate with misc/generate_blue_noise.py.
"""

__all__ = [
    'BLUE_NOISE_SIZE',
    'BLUE_NOISE_PNG_B64',
]

BLUE_NOISE_SIZE = ({size}, {size})

BLUE_NOISE_PNG_B64 = (
{lines}
)
'''


def _gaussian_kernel(size: int, sigma: float) -> np.ndarray:
    coords = np.arange(size)
    d = np.minimum(coords, size - coords).astype(np.float64)
    g = np.exp(-(d ** 2) / (2.0 * sigma ** 2))
    return np.outer(g, g)


def _toggle(energy: np.ndarray, kernel: np.ndarray, index: int, sign: float):
    y, x = divmod(index, energy.shape[1])
    energy += sign * np.roll(kernel, (y, x), axis=(0, 1))


def _tightest_cluster(pattern: np.ndarray, energy: np.ndarray) -> int:
    return int(np.argmax(np.where(pattern, energy, -np.inf)))


def _largest_void(pattern: np.ndarray, energy: np.ndarray) -> int:
    return int(np.argmin(np.where(pattern, np.inf, energy)))


def void_and_cluster_ranks(size: int = 128, sigma: float = 1.5,
                           initial_fraction: float = 0.1, seed: int = 0) -> np.ndarray:
    """
    Return a (size, size) int array holding each pixel's rank, a permutation
    of 0..size*size-1.
    """
    total = size * size
    kernel = _gaussian_kernel(size, sigma)
    rng = np.random.default_rng(seed)

    pattern = np.zeros((size, size), dtype=bool)
    energy = np.zeros((size, size), dtype=np.float64)
    ones = max(1, int(total * initial_fraction))
    for index in rng.choice(total, size=ones, replace=False):
        pattern.flat[index] = True
        _toggle(energy, kernel, int(index), 1.0)

    # Relax the initial pattern until the tightest cluster is the largest void.
    for _ in range(total):
        cluster = _tightest_cluster(pattern, energy)
        pattern.flat[cluster] = False
        _toggle(energy, kernel, cluster, -1.0)
        void = _largest_void(pattern, energy)
        pattern.flat[void] = True
        _toggle(energy, kernel, void, 1.0)
        if void == cluster:
            break

    ranks = np.full(total, -1, dtype=np.int64)
    proto_pattern = pattern.copy()
    proto_energy = energy.copy()

    # Phase 1: peel clusters off the initial pattern.
    for rank in range(ones - 1, -1, -1):
        cluster = _tightest_cluster(pattern, energy)
        pattern.flat[cluster] = False
        _toggle(energy, kernel, cluster, -1.0)
        ranks[cluster] = rank

    # Phase 2: fill voids until every pixel is ranked.
    pattern, energy = proto_pattern, proto_energy
    for rank in range(ones, total):
        void = _largest_void(pattern, energy)
        pattern.flat[void] = True
        _toggle(energy, kernel, void, 1.0)
        ranks[void] = rank

    return ranks.reshape(size, size)


def ranks_to_thresholds(ranks: np.ndarray) -> np.ndarray:
    """Scale ranks to uint8 thresholds in 0..254."""
    return (ranks * 255 // ranks.size).astype(np.uint8)


def generate_blue_noise(size: int = 128, sigma: float = 1.5, seed: int = 0,
                        initial_fraction: float = 0.1) -> np.ndarray:
    """(size, size) uint8 blue-noise threshold tile."""
    ranks = void_and_cluster_ranks(size, sigma, initial_fraction=initial_fraction, seed=seed)
    return ranks_to_thresholds(ranks)


def encode_png(thresholds: np.ndarray) -> bytes:
    buf = io.BytesIO()
    Image.fromarray(thresholds, mode='L').save(buf, format='PNG', optimize=True)
    return buf.getvalue()


def render_data_module(png_bytes: bytes, size: int, sigma: float) -> str:
    encoded = base64.b64encode(png_bytes).decode('ascii')
    lines = "\n".join(f'    "{encoded[i:i + 76]}"' for i in range(0, len(encoded), 76))
    return MODULE_TEMPLATE.format(size=size, sigma=sigma, lines=lines)


def write_data_module(path: Path, thresholds: np.ndarray, sigma: float):
    """Write `thresholds` as a blue_noise_data-style module to `path`."""
    size = thresholds.shape[0]
    Path(path).write_text(render_data_module(encode_png(thresholds), size, sigma),
                          encoding='utf-8')


def main():
    parser = argparse.ArgumentParser(description="Generate the bundled blue-noise tile")
    parser.add_argument('--size', type=int, default=128, help='Tile edge length')
    parser.add_argument('--sigma', type=float, default=1.5, help='Gaussian energy sigma')
    parser.add_argument('--seed', type=int, default=0, help='Seed for the initial pattern')
    parser.add_argument('--output', type=Path,
                        default=Path(__file__).resolve().parent.parent / 'blue_noise_data.py',
                        help='Module file to write')
    args = parser.parse_args()

    print(f"Generating {args.size}x{args.size} blue noise (sigma={args.sigma}, seed={args.seed})...")
    thresholds = generate_blue_noise(args.size, args.sigma, seed=args.seed)
    write_data_module(args.output, thresholds, args.sigma)
    print(f"Wrote {args.output}")


if __name__ == "__main__":
    main()
