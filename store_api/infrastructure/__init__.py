"""Infrastructure Layer — database pool, credentials, and logging.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Nothing here opens connections or reads the environment at import time
"""
