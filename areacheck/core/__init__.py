"""Core orchestration package.

Architectural role:
    Holds the data model, the error taxonomy and the request pipeline that sits
    between the API/CLI adapters and the validation, geometry and memory subsystems.

Composition:
    - `types`: immutable point and check-record values.
    - `errors`: typed validation failures.
    - `engine`: the validate -> normalize -> predicate -> record pipeline.
    - `response`: composition of the outbound session payload.
"""
