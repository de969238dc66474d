"""Importable packages scanned by discovery tests.

- catalog: a well-formed application (plus one endpoint whose module is
  abstract and therefore never discovered)
- ambiguous: a class matching more than one role
- broken: a submodule that fails to import
- generic: endpoints sharing a concrete generic base class
"""
