"""Building blocks for classic MMORPG servers: packets, cipher, constants, configuration, connections and game data."""

__version__ = "0.1.0"