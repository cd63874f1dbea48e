"""SQLAlchemy-backed repository implementations.

Import the concrete modules directly; the domain services build them via
``Service.with_session``.
"""
