"""Bundled dictionary assets.

JSON files in this package are read through importlib.resources. Keeping
this as a real package makes them discoverable both from a source checkout
and from an installed wheel.
"""
