"""HTTP layer.

Routers turn requests into commands and queries, call the handler, and
map its ``Result`` to a response body or a Problem Details error. Trace
ids and framework exceptions are handled under ``routers.api``.
"""
