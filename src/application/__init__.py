"""Use cases, split into commands (writes) and queries (reads).

Handlers return ``Result`` values. A ``Failure`` carries a catalog
``DomainError`` and is passed up as-is; database exceptions are not
caught here.
"""
