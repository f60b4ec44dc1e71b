"""
Simulation Session

The single piece of mutable state shared by the command interpreter
and the renderer: the current simulation and whether it is running.
Both sides hold a reference to the same Session; there is no global.
"""

from .config import Config
from .errors import EngineConstructionError


class Session:
    """Current simulation instance plus the active/paused flag."""

    def __init__(self, engine_cls, config=None, active=True):
        self.engine_cls = engine_cls
        if config is None:
            config = self.default_config()
        self.simulation = self._construct(config)
        self.active = active

    def default_config(self):
        return Config.from_mapping(self.engine_cls.default_config())

    def _construct(self, config):
        try:
            return self.engine_cls(config)
        except Exception as err:
            raise EngineConstructionError(str(err)) from err

    def reset(self, config):
        """Build a new simulation from config and swap it in.

        The previous simulation stays installed if construction fails.
        `active` is left as it was.
        """
        self.simulation = self._construct(config)

    def toggle_pause(self):
        self.active = not self.active
        return self.active

    def config(self):
        return self.simulation.config()

    def world(self):
        return self.simulation.world()
