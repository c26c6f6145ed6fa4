# Файл: run_sampler.py
from __future__ import annotations
import sys
import pathlib
import logging

ROOT = pathlib.Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from poisson_sampler.preset import load_preset
from poisson_sampler.sampler import sample_from_preset
from poisson_sampler.setup_logging import setup_logging
from poisson_sampler.utils.metrics import compute_metrics

logger = logging.getLogger("poisson_sampler.run")


def get_seed_from_console(default: int) -> int:
    while True:
        try:
            seed_str = input(f">>> Enter seed (default {default}) and press Enter: ")
            return int(seed_str) if seed_str else default
        except ValueError:
            print("Invalid input. Please enter a number.")


def main():
    setup_logging()
    preset_id = sys.argv[1] if len(sys.argv) > 1 else "default"
    preset = load_preset(preset_id)
    logger.info("Loaded preset '%s': %s", preset.id, preset.to_dict())

    seed = get_seed_from_console(preset.seed if preset.seed is not None else 123)
    points = sample_from_preset(preset, seed=seed)

    metrics = compute_metrics(points, preset.radius, preset.extent)
    for key, value in metrics.items():
        logger.info("  %-18s %s", key, value)
    if points.shape[0]:
        logger.info("First point: (%.4f, %.4f)", points[0, 0], points[0, 1])


if __name__ == "__main__":
    main()
