"""
Downsample a noisy training curve and print the points that were kept.

Usage:
    uv run python examples/noisy_training_curve.py
    uv run python examples/noisy_training_curve.py --steps 50000 --threshold 40
"""

import argparse
import math
import random

from tribucket import DataPoint, downsample


def generate_loss_curve(steps: int, seed: int) -> list[DataPoint]:
    """
    Generate a decaying loss curve with periodic and random noise.

    Args:
        steps: Number of samples
        seed: Random seed

    Returns:
        One DataPoint per step
    """
    random.seed(seed)
    points = []
    for step in range(steps):
        noise = 0.02 * math.sin(step * 0.05) + random.gauss(0, 0.01)
        loss = max(0.01, 1.5 / math.sqrt(step + 1) + noise)
        points.append(DataPoint(float(step), loss))
    return points


def main():
    parser = argparse.ArgumentParser(description="Downsample a synthetic loss curve")
    parser.add_argument("--steps", type=int, default=10_000, help="Number of samples")
    parser.add_argument("--threshold", type=int, default=25, help="Number of points to keep")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    raw = generate_loss_curve(args.steps, args.seed)
    sampled = downsample(raw, args.threshold)

    print(f"{len(raw)} points -> {len(sampled)} points\n")
    for point in sampled:
        print(f"step={point.x:8.0f} loss={point.y:.4f}")


if __name__ == "__main__":
    main()
