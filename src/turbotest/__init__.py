"""turbotest - test explorer core for Turborepo monorepos."""

__version__ = "0.1.0"
