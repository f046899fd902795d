#!/usr/bin/env python3
"""
Random Transform Demo

This script composes a chain of seeded random 4x4 matrices and applies the
result to a list of cartesian points, logging the transformed homogeneous
coordinates before and after normalization.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np
import yaml
from tqdm import tqdm

# Add parent directory to path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from geom import Mat4, Vec4, identity_mat, new_vec4, rand_mat


# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
    handlers=[
        logging.StreamHandler(),
    ],
)
logger = logging.getLogger("transform")


def load_config(config_path: Optional[str] = None) -> Dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary
    """
    # Default config path
    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"

    with open(config_path, "r") as f:
        config = yaml.safe_load(f)

    return config


def compose_transforms(rng: np.random.Generator, n_transforms: int) -> Mat4:
    """Multiply together n seeded random matrices.

    Args:
        rng: Seeded random generator
        n_transforms: Number of matrices in the chain

    Returns:
        Product of the chain, starting from the identity
    """
    if n_transforms < 0:
        raise ValueError(f"n_transforms must be non-negative, got {n_transforms}")

    m = identity_mat()
    for i in range(n_transforms):
        m.mul(rand_mat(rng))
        logger.debug(f"Composed transform {i + 1}/{n_transforms}")

    return m


def run(config: Dict) -> List[Tuple[Vec4, Vec4]]:
    """Apply the composed transform to every configured point.

    Args:
        config: Configuration dictionary with seed, n_transforms and points

    Returns:
        List of (transformed, normalized) vector pairs, one per point
    """
    rng = np.random.default_rng(config.get("seed"))
    m = compose_transforms(rng, int(config.get("n_transforms", 1)))
    logger.info(f"Composed transform: {m!r}")

    results = []
    for point in tqdm(config.get("points", []), desc="Transforming points"):
        if len(point) != 3:
            raise ValueError(f"Expected cartesian triple, got {point}")
        p = m.transf(new_vec4(*point))
        q = p.copy()
        q.norm()
        logger.info(f"{tuple(point)} -> {p!r} -> {q!r}")
        results.append((p, q))

    return results


def main():
    """Main function to parse arguments and run the demo."""
    parser = argparse.ArgumentParser(description="Random Transform Demo")
    parser.add_argument(
        "--config", "-c", dest="config_path", default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--seed", "-s", dest="seed", type=int, default=None,
        help="Random seed, overrides the configuration"
    )
    parser.add_argument(
        "--verbose", "-v", dest="verbose", action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    try:
        config = load_config(args.config_path)
    except FileNotFoundError as e:
        logger.error(f"Configuration file not found: {e.filename}")
        sys.exit(1)

    if args.seed is not None:
        config["seed"] = args.seed

    level = "DEBUG" if args.verbose else config.get("log_level", "INFO")

    try:
        logging.getLogger().setLevel(level)
        run(config)
    except Exception as e:
        logger.exception(f"Error running transform demo: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
