"""StoryWorld: a guided wizard for building illustrated children's stories."""

__version__ = "0.1.0"
