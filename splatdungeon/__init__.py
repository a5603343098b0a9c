"""Two-player arcade game about painting a generated dungeon with bombs."""

__version__ = "0.1.0"