#!/usr/bin/env python3
"""
Headless update benchmark for the diorama particle systems.

Usage:
    python3 tools/benchmark.py [frames] [rate_multiplier]

Runs the fire and tree-lights systems (seeded, so runs are comparable) for
``frames`` fixed 0.016 s steps (no window, no drawing) and prints
per-frame update timings and peak population.
``rate_multiplier`` scales both emission rates to stress the population code.
"""

import os
import statistics
import sys
import time

# Ensure we can import diorama from root
current_dir = os.path.dirname(os.path.abspath(__file__))
root_dir = os.path.dirname(current_dir)
sys.path.insert(0, root_dir)

from diorama import constants as C  # noqa: E402
from diorama.particle_system import ParticleSystem  # noqa: E402
from diorama.presets import (  # noqa: E402
    FIRE_EMITTER_POSITION,
    TREE_LIGHTS_LOCAL_POSITION,
    fire_config,
    tree_lights_config,
)
from diorama.rng_service import RNGService  # noqa: E402
from diorama.services import PointHandle  # noqa: E402


def run(frames: int, multiplier: float):
    eye = PointHandle.at((35.0, 8.0, 36.0))
    systems = [
        ParticleSystem(
            fire_config(rate=C.FIRE_RATE * multiplier),
            PointHandle.at(FIRE_EMITTER_POSITION),
            eye,
            rng=RNGService(1),
        ),
        ParticleSystem(
            tree_lights_config(rate=C.TREE_LIGHTS_RATE * multiplier),
            PointHandle.at(TREE_LIGHTS_LOCAL_POSITION),
            eye,
            rng=RNGService(2),
        ),
    ]
    work_ms = []
    population = []
    for _ in range(frames):
        start = time.perf_counter()
        for system in systems:
            system.update(C.FRAME_STEP)
        work_ms.append((time.perf_counter() - start) * 1000.0)
        population.append(sum(len(s) for s in systems))
    return work_ms, population


def report(work_ms, population):
    if not work_ms:
        print("No frames simulated.")
        return
    ordered = sorted(work_ms)
    p99 = ordered[min(len(ordered) - 1, int(len(ordered) * 0.99))]

    print("\n" + "=" * 40)
    print(" PARTICLE UPDATE REPORT")
    print("=" * 40)
    print(f"Total Frames: {len(work_ms)}")
    print("-" * 20)
    print("Update Times (ms, both systems):")
    print(f"  Avg:  {statistics.mean(work_ms):.3f}")
    print(f"  Max:  {max(work_ms):.3f}")
    print(f"  P99:  {p99:.3f}")
    spikes = [w for w in work_ms if w > 16.0]
    print("-" * 20)
    if spikes:
        print(f"WARNING: {len(spikes)} frames over a 16ms budget.")
    else:
        print("Status: Clean. No frame over 16ms.")
    print("-" * 20)
    print("Population:")
    print(f"  Peak:   {max(population)}")
    print(f"  Final:  {population[-1]}")
    print("=" * 40 + "\n")


def main():
    frames = int(sys.argv[1]) if len(sys.argv) > 1 else 1000
    multiplier = float(sys.argv[2]) if len(sys.argv) > 2 else 1.0
    print(f"Simulating {frames} frames at {multiplier:g}x emission...")
    report(*run(frames, multiplier))


if __name__ == "__main__":
    main()
