"""
Simulation Config Model

A Config is a flat, ordered mapping of engine field name -> number,
seeded from the engine's defaults. The field names and their numeric
kinds are fixed once the Config is built, so an override can only touch
fields the engine actually declares.

Overrides come from `reset` arguments in `name=value` form:

    i:<field>=<int>      any integer field, by its engine name
    f:<field>=<float>    any float field, by its engine name
    a / animals          world_animals   (int)
    f / foods            world_foods     (int)
    n / neurons          brain_neurons   (int)
    p / photoreceptors   eye_cells       (int)
"""

from collections.abc import Mapping

from .errors import UnknownParameterError, InvalidValueError


INT_PREFIX = "i:"
FLOAT_PREFIX = "f:"

# Shorthand name -> engine field. All aliased fields are integers.
ALIASES = {
    "a": "world_animals",
    "animals": "world_animals",
    "f": "world_foods",
    "foods": "world_foods",
    "n": "brain_neurons",
    "neurons": "brain_neurons",
    "p": "eye_cells",
    "photoreceptors": "eye_cells",
}


class Config(Mapping):
    """Flat name -> number mapping with a fixed set of fields."""

    def __init__(self, values):
        self._values = dict(values)

    @classmethod
    def from_mapping(cls, values):
        if isinstance(values, Config):
            return values.copy()
        return cls(values)

    def __getitem__(self, name):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __eq__(self, other):
        if isinstance(other, Mapping):
            return dict(self._values) == dict(other)
        return NotImplemented

    def __repr__(self):
        fields = ", ".join(f"{k}={v!r}" for k, v in self._values.items())
        return f"Config({fields})"

    def kind(self, name):
        """Numeric kind of a field's default: int or float."""
        return float if isinstance(self._values[name], float) else int

    def set(self, name, value):
        if name not in self._values:
            raise UnknownParameterError(f"unknown parameter: {name}")
        self._values[name] = value

    def copy(self):
        return Config(self._values)

    def diff(self, other):
        """Names whose values differ between self and other."""
        return [k for k in self._values if other.get(k) != self._values[k]]


def resolve_name(config, name):
    """Map an argument name to (field, parser) or raise UnknownParameterError."""
    if name.startswith(INT_PREFIX):
        field, parse = name[len(INT_PREFIX):], int
    elif name.startswith(FLOAT_PREFIX):
        field, parse = name[len(FLOAT_PREFIX):], float
    elif name in ALIASES:
        field, parse = ALIASES[name], int
    else:
        raise UnknownParameterError(f"unknown parameter: {name}")

    if field not in config:
        raise UnknownParameterError(f"unknown parameter: {name}")
    return field, parse


def apply_override(config, arg):
    """Apply one `name=value` argument to config in place."""
    name, sep, raw = arg.partition("=")
    field, parse = resolve_name(config, name)

    if not sep:
        raise InvalidValueError(f"missing value for parameter: {name}")
    try:
        value = parse(raw)
    except ValueError:
        kind = "an integer" if parse is int else "a number"
        raise InvalidValueError(
            f"parameter {name} expects {kind}, got: {raw!r}") from None

    config.set(field, value)


def build_config(defaults, args):
    """Return a new Config: defaults with each argument applied left to right.

    Stops at the first bad argument; defaults is never modified.
    """
    working = Config.from_mapping(defaults)
    for arg in args:
        apply_override(working, arg)
    return working
