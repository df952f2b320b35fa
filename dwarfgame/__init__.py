"""A tile-based arcade game built on an entity-component-system core."""

__version__ = "0.1.0"