# dictionaries/core/domain/__init__.py
"""
Domain Entities and Value Objects.

The asset manifest, the immutable `Dictionaries` namespace, the error
taxonomy and structural validation helpers. No infrastructure logic.
"""
