"""Route Modules — one file per resource.

Invariants:
    - Each module defines its own APIRouter with an /api prefix and tags
    - Routes never contain business logic (delegate to services/)
    - Path ids are received as strings; handlers coerce them so bad ids get the contract's 400
"""
