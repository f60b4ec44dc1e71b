"""
Deterministic in-memory engine for tests.

Behaves like the real evolution engine from the outside: builds from a
config, rejects out-of-range values, ends a generation every
`sim_generation_length` ticks, and exposes a predictable world.
"""

from evolution_sim.config import Config
from evolution_sim.engine_base import SimulationEngine, World, Animal, Food


DEFAULTS = {
    "brain_neurons": 9,
    "eye_fov_range": 0.25,
    "eye_fov_angle": 3.5,
    "eye_cells": 9,
    "food_size": 0.01,
    "ga_reverse": 0,
    "ga_mut_chance": 0.01,
    "ga_mut_coeff": 0.3,
    "sim_speed_min": 0.001,
    "sim_speed_max": 0.005,
    "sim_generation_length": 3,
    "world_animals": 4,
    "world_foods": 6,
}


class FakeSimulation(SimulationEngine):
    instances = 0

    def __init__(self, config):
        config = Config.from_mapping(config)
        if config["eye_cells"] < 1:
            raise ValueError("eye_cells must be at least 1")
        if config["world_animals"] < 0 or config["world_foods"] < 0:
            raise ValueError("world size cannot be negative")
        if config["food_size"] <= 0:
            raise ValueError("food_size must be positive")

        self._config = config
        self.generation = 0
        self.age = 0
        self.steps = 0
        self.trains = 0
        FakeSimulation.instances += 1

    @classmethod
    def default_config(cls):
        return Config(DEFAULTS)

    def config(self):
        return self._config

    def world(self):
        cfg = self._config
        n = cfg["world_animals"]
        cells = cfg["eye_cells"]
        animals = [
            Animal(
                x=(i + 1) / (n + 1),
                y=0.5,
                rotation=0.1 * i,
                vision=[(c + 1) / cells for c in range(cells)],
            )
            for i in range(n)
        ]
        m = cfg["world_foods"]
        foods = [Food(x=(j + 1) / (m + 1), y=0.25) for j in range(m)]
        return World(animals=animals, foods=foods)

    def _summary(self):
        return f"generation {self.generation}: min=0.00, max=1.00, avg=0.50"

    def step(self):
        self.steps += 1
        self.age += 1
        if self.age >= self._config["sim_generation_length"]:
            self.age = 0
            self.generation += 1
            return self._summary()
        return None

    def train(self):
        self.trains += 1
        self.age = 0
        self.generation += 1
        return self._summary()
