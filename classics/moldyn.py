"""Lennard-Jones molecular dynamics in a periodic cubic box."""

from __future__ import annotations

import math
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass

NUM_PARTICLES = 10
BOX_SIZE = 10.0
DT = 0.001
NUM_STEPS = 1000
MIN_DISTANCE = 0.0001
EPSILON = 1.0
SIGMA = 1.0
CUTOFF = 2.5


@dataclass
class Particle:
    """Position, velocity, accumulated force and mass of one particle."""

    x: float
    y: float
    z: float
    vx: float = 0.0
    vy: float = 0.0
    vz: float = 0.0
    fx: float = 0.0
    fy: float = 0.0
    fz: float = 0.0
    mass: float = 1.0


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


def init_particles(
    n: int, box_size: float = BOX_SIZE, rng: random.Random | None = None
) -> list[Particle]:
    """Place ``n`` particles at random in the box with velocities in ``[-1, 1)``."""
    rng = rng if rng is not None else random.Random()
    particles = []
    for _ in range(n):
        x = rng.random() * box_size
        y = rng.random() * box_size
        z = rng.random() * box_size
        vx = (rng.random() - 0.5) * 2.0
        vy = (rng.random() - 0.5) * 2.0
        vz = (rng.random() - 0.5) * 2.0
        particles.append(Particle(x, y, z, vx, vy, vz))
    return particles


def compute_forces(particles: Sequence[Particle], box_size: float = BOX_SIZE) -> None:
    """Set each particle's force from pairwise Lennard-Jones interactions.

    Distances use the minimum image; pairs beyond the cutoff or closer
    than the minimum distance contribute nothing.
    """
    for p in particles:
        p.fx = p.fy = p.fz = 0.0
    for i, a in enumerate(particles):
        for b in particles[i + 1:]:
            dx = a.x - b.x
            dy = a.y - b.y
            dz = a.z - b.z
            dx -= box_size * _round_half_away(dx / box_size)
            dy -= box_size * _round_half_away(dy / box_size)
            dz -= box_size * _round_half_away(dz / box_size)
            r2 = dx * dx + dy * dy + dz * dz
            if not (MIN_DISTANCE < r2 < CUTOFF * CUTOFF):
                continue
            r2inv = SIGMA * SIGMA / r2
            r6inv = r2inv ** 3
            force = 24.0 * EPSILON * r6inv * (2.0 * r6inv - 1.0) / r2
            a.fx += force * dx
            a.fy += force * dy
            a.fz += force * dz
            b.fx -= force * dx
            b.fy -= force * dy
            b.fz -= force * dz


def _wrap(value: float, box_size: float) -> float:
    value = math.fmod(value + box_size, box_size)
    return value + box_size if value < 0 else value


def velocity_verlet(
    particles: Sequence[Particle], dt: float = DT, box_size: float = BOX_SIZE
) -> None:
    """Advance the system one step, using the forces already stored."""
    for p in particles:
        p.vx += 0.5 * (p.fx / p.mass) * dt
        p.vy += 0.5 * (p.fy / p.mass) * dt
        p.vz += 0.5 * (p.fz / p.mass) * dt
        p.x = _wrap(p.x + p.vx * dt, box_size)
        p.y = _wrap(p.y + p.vy * dt, box_size)
        p.z = _wrap(p.z + p.vz * dt, box_size)
    compute_forces(particles, box_size)
    for p in particles:
        p.vx += 0.5 * (p.fx / p.mass) * dt
        p.vy += 0.5 * (p.fy / p.mass) * dt
        p.vz += 0.5 * (p.fz / p.mass) * dt


def kinetic_energy(particles: Sequence[Particle]) -> float:
    """Return the total kinetic energy."""
    return sum(0.5 * p.mass * (p.vx ** 2 + p.vy ** 2 + p.vz ** 2) for p in particles)


def temperature(particles: Sequence[Particle]) -> float:
    """Return the reduced temperature ``2 KE / (3 N)``."""
    if not particles:
        raise ValueError("temperature of an empty system")
    return 2.0 * kinetic_energy(particles) / (3.0 * len(particles))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration simulation and print its progress."""
    del argv
    out = sys.stdout
    out.write("=== Simple Molecular Dynamics Simulation ===\n\n")
    out.write(f"Particles: {NUM_PARTICLES}\n")
    out.write(f"Box size: {BOX_SIZE:.2f}\n")
    out.write(f"Time step: {DT:.4f}\n")
    out.write(f"Steps: {NUM_STEPS}\n\n")

    particles = init_particles(NUM_PARTICLES)
    compute_forces(particles)
    out.write("Running simulation...\n")
    for step in range(NUM_STEPS):
        velocity_verlet(particles)
        if step % 100 == 0:
            out.write(
                f"Step {step:4d}: KE = {kinetic_energy(particles):.4f}, "
                f"T = {temperature(particles):.4f}\n"
            )

    out.write("\nSimulation complete!\n")
    out.write("Final particle positions:\n")
    for index, p in enumerate(particles[:5]):
        out.write(f"Particle {index}: ({p.x:.2f}, {p.y:.2f}, {p.z:.2f})\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())