"""Bundled modules and endpoints, discovered like application code.

- system: root endpoints (/, /health, /config)
- meta: MetaModule with the catalog listing
"""
