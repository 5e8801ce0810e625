"""AreaCheck point-in-region service.

Architectural role:
    Validates a candidate point and scale factor, normalizes the point into the
    scale-independent coordinate space, asks a region predicate for membership and
    records every result in a per-session, append-only history.

Subpackages:
    - `validation`: parameter extraction, numeric parsing, scale quantization.
    - `geometry`: region predicate contract and the default region shapes.
    - `memory`: per-session check history storage.
    - `core`: data model, errors, pipeline orchestration and response composition.
    - `api`: HTTP and CLI adapters.
"""
