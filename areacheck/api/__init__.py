"""AreaCheck API adapter package.

Architectural role:
- Defines the external interaction boundary for HTTP and CLI interfaces.
- Owns session identity and maps validation errors to transport responses.
- Delegates validation, region checks and history bookkeeping to `areacheck.core`.
"""
