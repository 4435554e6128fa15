import logging

logger = logging.getLogger(__name__)


class RainParticle:
    """Represents a single falling rain glyph."""

    def __init__(self, x, y, glyph_index, alive):
        self.x = x
        self.y = y
        # Fixed for the lifetime of the particle
        self.glyph_index = glyph_index
        self.alive = alive

    @property
    def position(self):
        return (self.x, self.y)

    def cell(self):
        """Grid cell the particle occupies, truncated towards zero."""
        return int(self.x), int(self.y)

    def respawn(self, x, y):
        """Jump to a fresh position."""
        self.x = x
        self.y = y

    def fall(self, step, height):
        """Advance down one step, wrapping at the bottom of the grid."""
        self.y = (self.y + step) % height


class ParticleField:
    """
    Owns every rain particle on a grid of fixed size.

    Particles are never added or removed after creation; they blink in and
    out through the alive flag and only jump to a new position on the tick
    they come back to life. A new grid size needs a brand new field.
    """

    def __init__(self, config, width, height, rng, particles):
        self.config = config
        self.width = width
        self.height = height
        self.rng = rng
        self.particles = particles

        glyph_count = config.glyph_count
        self.steps = [(n + 1) / glyph_count for n in range(glyph_count)]

    @classmethod
    def create(cls, config, width, height, rng):
        """Populate a grid with randomly placed, mostly dead particles."""
        particles = []
        for _ in range(config.count_for(width, height)):
            particles.append(
                RainParticle(
                    rng.uniform(0.0, width),
                    rng.uniform(0.0, height),
                    int(rng.integers(0, config.glyph_count)),
                    bool(rng.random() < config.spawn_probability),
                )
            )
        logger.debug(f"[i] Created {len(particles)} particles for a {width}x{height} grid")
        return cls(config, width, height, rng, particles)

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    def matches(self, width, height):
        """True if the field was built for a grid of this size."""
        return self.width == width and self.height == height

    def tick(self):
        """Advance every particle by one simulation step."""
        for particle in self.particles:
            was_alive = particle.alive
            particle.alive = bool(self.rng.random() < self.config.alive_probability)

            # Rising edge of alive: spawn anew instead of falling
            if particle.alive and not was_alive:
                particle.respawn(
                    self.rng.uniform(0.0, self.width),
                    self.rng.uniform(0.0, self.height),
                )
            else:
                particle.fall(self.steps[particle.glyph_index], self.height)

    def alive_particles(self):
        return [particle for particle in self.particles if particle.alive]
