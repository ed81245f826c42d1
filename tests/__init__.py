# tests/__init__.py
"""
Test Suite for strength-dictionaries.

Organization:
- `core`: Aggregation use case, domain models and schema checks.
- `adapters`: Package and directory asset sources.
- top level: container wiring, configuration/logging and the CLI.
"""
