"""secretsweep — hunt committed secrets across a file tree."""

__version__ = "1.0.0"
