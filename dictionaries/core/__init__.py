# dictionaries/core/__init__.py
"""
Core Domain Layer.

Pure data model and the aggregation use case. Nothing in here touches the
filesystem, package resources or logging configuration directly; those
concerns arrive through the ports defined in `dictionaries.core.ports`.
"""
