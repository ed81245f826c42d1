# dictionaries/core/use_cases/__init__.py
"""
Core Use Cases.

`LoadDictionaries` resolves every asset named in the manifest through an
asset source and binds the results into one immutable `Dictionaries`
namespace.
"""

from .load_dictionaries import LoadDictionaries

__all__ = [
    "LoadDictionaries",
]
