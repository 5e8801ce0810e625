"""Region geometry package.

Module split:
    - `shapes`: immutable primitive shapes with inclusive point queries.
    - `region`: the predicate contract consumed by the pipeline and the default
      region built from `shapes`.
"""
