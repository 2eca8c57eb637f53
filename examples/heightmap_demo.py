#!/usr/bin/env python3
"""
Simple demo script showing diamond-square heightmap generation.
"""

import numpy as np
from py_heightmap.core import HeightMapGenerator
from py_heightmap.config import settings
from py_heightmap.utils import Benchmark, configure_logging


def main():
    """Demonstrate heightmap generation."""
    configure_logging(fmt="plain")

    print("Py-Heightmap Diamond-Square Demo")
    print("=" * 40)

    # Both runs share one seed so the roughness modes are comparable
    seed = settings.default_seed
    for decay in (False, True):
        generator = HeightMapGenerator.from_settings(roughness_decay=decay, seed=seed)
        seed = generator.seed
        label = "decaying" if decay else "flat"

        with Benchmark(f"Build {generator.side}x{generator.side} ({label})"):
            heights = generator.build()

        print(f"\n{label.upper()} roughness:")
        print("-" * 30)
        print(f"  Side: {generator.side} (factor {generator.factor})")
        print(f"  Seed: {generator.seed}, offset: {generator.offset}")
        print(f"  Height range: {heights.min():.4f}-{heights.max():.4f}")
        print(f"  Average height: {heights.mean():.4f}")

        # Show height distribution
        hist, edges = np.histogram(heights, bins=8)
        print("  Height distribution:")
        for i in range(len(hist)):
            bar = '#' * int(hist[i] / max(hist) * 20)
            print(f"    {edges[i]:.3f}-{edges[i+1]:.3f}: {bar} ({hist[i]})")

    print(f"\nBenchmark records appended to {settings.benchmark_log_path}")


if __name__ == "__main__":
    main()
