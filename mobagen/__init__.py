"""Headless simulation models: Game of Life, maze generation, flocking boids and hide-and-seek."""

__version__ = "0.0.1"