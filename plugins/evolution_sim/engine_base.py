"""
Abstract Base Class for Simulation Engines

The evolution engine (agents, eyes, brains, genetic algorithm) lives
outside this package. Anything implementing this interface can be
driven by the command interpreter and drawn by the renderer.
"""

import importlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .errors import EngineLoadError


DEFAULT_ENGINE = "lib_simulation:Simulation"


@dataclass
class Food:
    x: float
    y: float


@dataclass
class Animal:
    x: float
    y: float
    rotation: float
    vision: list = field(default_factory=list)


@dataclass
class World:
    animals: list = field(default_factory=list)
    foods: list = field(default_factory=list)


class SimulationEngine(ABC):
    """Base class for evolution simulation engines.

    Constructed from a config; raises ValueError when a value is out of
    the engine's valid range.
    """

    @classmethod
    @abstractmethod
    def default_config(cls):
        """Return a Config with every field at its built-in default."""

    @abstractmethod
    def config(self):
        """Return the config this simulation was built with."""

    @abstractmethod
    def world(self):
        """Return the current World snapshot."""

    @abstractmethod
    def step(self):
        """Advance one tick.

        Returns a generation summary line when the tick ended a
        generation, otherwise None.
        """

    @abstractmethod
    def train(self):
        """Fast-forward to the end of the current generation. Returns its summary line."""


def load_engine(path=DEFAULT_ENGINE):
    """Import an engine class from a "module:Class" path."""
    module_name, _, attr = path.partition(":")
    if not module_name or not attr:
        raise EngineLoadError(f"engine must look like module:Class, got {path!r}")

    try:
        module = importlib.import_module(module_name)
    except ImportError as err:
        raise EngineLoadError(f"cannot import engine module {module_name!r}: {err}") from err

    try:
        return getattr(module, attr)
    except AttributeError as err:
        raise EngineLoadError(f"module {module_name!r} has no engine {attr!r}") from err
