"""Infrastructure layer: adapters for third-party storage libraries.

This layer depends on the domain layer and SQLAlchemy.
The domain layer must never import from here.
"""
