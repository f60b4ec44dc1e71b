"""
Evolution Simulation - interactive control surface

Text command interpreter plus a pygame renderer for a generation-based
evolutionary simulation engine.
"""

__version__ = "0.1.0"
