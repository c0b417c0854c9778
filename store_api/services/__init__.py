"""Services Layer — one handler class per resource.

Invariants:
    - Handlers raise StoreError subclasses; they never build HTTP responses
    - Each handler method is one check-then-mutate sequence in one session

Design Decisions:
    - One handler file per resource for locality
"""
