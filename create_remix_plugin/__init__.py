"""create-remix-plugin -- scaffold plugin projects for bolt.diy."""

__version__ = "1.0.0"
