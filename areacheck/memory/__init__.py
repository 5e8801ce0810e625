"""Memory subsystem package.

Architectural role:
    Holds per-session check histories for the lifetime of each session:
    - `session_history`: session-keyed, append-only record logs guarded by
      per-session locks.
"""
