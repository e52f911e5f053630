"""Robot Battle engine.

Turn-based combat between two equipped robots, driven by abstract input and
time events from a host presentation layer.
"""

__version__ = "0.1.0"
