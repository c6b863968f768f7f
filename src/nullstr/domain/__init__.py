"""Domain layer: the NullString value type and its wire shapes.

This layer depends on stdlib, pydantic, ``nullstr.errors`` and the
settings in ``nullstr.config.settings``.
It must never import from infrastructure.
"""
