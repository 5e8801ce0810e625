"""Request validation package.

Module split:
    - `params`: first-value lookup in the raw parameter bag.
    - `numeric`: bounded string-to-float parsing and inclusive range checks.
    - `scale`: tolerance-based snapping onto the legal scale set, and normalization.

Every function here is pure and raises `areacheck.core.errors` exceptions on failure.
"""
