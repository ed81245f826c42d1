# dictionaries/adapters/__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the ports defined in `dictionaries.core.ports`.
Dependencies point inward: adapters import from `dictionaries.core`, never
the other way round.
"""
