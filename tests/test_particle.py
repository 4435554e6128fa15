"""
Tests for termrain/particle.py - rain particle simulation

Tests cover:
- Field creation bounds and counts
- Glyph identity across ticks
- Respawn on the rising edge of alive
- Falling and wrapping
- Alive probabilities (statistical)
"""

import numpy as np
import pytest

from termrain.config import RainConfig
from termrain.particle import ParticleField, RainParticle


def snapshot(field):
    return [(p.x, p.y, p.glyph_index, p.alive) for p in field]


class TestRainParticle:
    """Tests for the single particle entity."""

    def test_cell_truncates(self):
        particle = RainParticle(3.99, 7.5, 0, True)
        assert particle.cell() == (3, 7)
        assert particle.position == (3.99, 7.5)

    def test_fall_wraps(self):
        particle = RainParticle(1.0, 23.5, 2, True)
        particle.fall(1.0, 24)
        assert particle.y == pytest.approx(0.5)
        assert particle.x == 1.0


class TestFieldCreate:
    """Tests for ParticleField.create."""

    @pytest.mark.parametrize("width,height", [(1, 1), (80, 24), (3, 200), (211, 57)])
    def test_positions_within_grid(self, rng, width, height):
        config = RainConfig(particle_count=300)
        field = ParticleField.create(config, width, height, rng)
        for particle in field:
            assert 0 <= particle.x < width
            assert 0 <= particle.y < height
            assert 0 <= particle.glyph_index < config.glyph_count

    def test_count_from_density(self, rng):
        field = ParticleField.create(RainConfig(), 80, 24, rng)
        assert len(field) == 96

    def test_fixed_count(self, rng):
        field = ParticleField.create(RainConfig(particle_count=100), 80, 24, rng)
        assert len(field) == 100
        assert field.width == 80
        assert field.height == 24

    def test_empty_for_tiny_density(self, rng):
        field = ParticleField.create(RainConfig(density=0.01), 5, 5, rng)
        assert len(field) == 0

    def test_mostly_dead_at_start(self, rng):
        field = ParticleField.create(RainConfig(particle_count=10000), 80, 24, rng)
        alive = len(field.alive_particles())
        # Binomial(10000, 0.05): mean 500, sd ~22
        assert 400 < alive < 600

    def test_matches(self, rng):
        field = ParticleField.create(RainConfig(particle_count=1), 80, 24, rng)
        assert field.matches(80, 24)
        assert not field.matches(81, 24)
        assert not field.matches(80, 23)


class TestFieldTick:
    """Tests for ParticleField.tick."""

    def test_glyph_index_never_changes(self, rng):
        field = ParticleField.create(RainConfig(particle_count=200), 40, 10, rng)
        before = [p.glyph_index for p in field]
        for _ in range(50):
            field.tick()
        assert [p.glyph_index for p in field] == before

    def test_respawn_jumps_to_fresh_position(self, rng):
        config = RainConfig(particle_count=200, spawn_probability=0.0, alive_probability=1.0)
        field = ParticleField.create(config, 30, 12, rng)
        before = snapshot(field)

        field.tick()

        for (x, y, glyph, alive), particle in zip(before, field):
            assert not alive
            assert particle.alive
            # Column only ever changes on respawn
            assert particle.x != x
            assert 0 <= particle.x < 30
            assert 0 <= particle.y < 12

    def test_surviving_particles_fall_by_glyph_speed(self, rng):
        config = RainConfig(particle_count=200, spawn_probability=1.0, alive_probability=1.0)
        field = ParticleField.create(config, 30, 12, rng)
        before = snapshot(field)

        field.tick()

        n = config.glyph_count
        for (x, y, glyph, _), particle in zip(before, field):
            assert particle.alive
            assert particle.x == x
            assert particle.y == pytest.approx((y + (glyph + 1) / n) % 12)

    def test_dead_particles_keep_falling(self, rng):
        config = RainConfig(particle_count=50, spawn_probability=0.0, alive_probability=0.0)
        field = ParticleField.create(config, 30, 12, rng)
        before = snapshot(field)

        field.tick()

        for (x, y, glyph, _), particle in zip(before, field):
            assert not particle.alive
            assert particle.x == x
            assert particle.y == pytest.approx((y + (glyph + 1) / 3) % 12)

    def test_rows_stay_within_grid(self, rng):
        field = ParticleField.create(RainConfig(particle_count=100), 20, 4, rng)
        for _ in range(200):
            field.tick()
            for particle in field:
                assert 0 <= particle.y < 4

    def test_near_glyphs_fall_faster(self):
        config = RainConfig(alive_probability=1.0)
        far = RainParticle(0.0, 0.0, 0, True)
        near = RainParticle(0.0, 0.0, 2, True)
        field = ParticleField(config, 10, 100, np.random.default_rng(0), [far, near])

        field.tick()

        assert near.y > far.y

    def test_mostly_alive_after_tick(self, rng):
        field = ParticleField.create(RainConfig(particle_count=10000), 80, 24, rng)
        field.tick()
        alive = len(field.alive_particles())
        # Binomial(10000, 0.95): mean 9500, sd ~22
        assert 9400 < alive < 9600
