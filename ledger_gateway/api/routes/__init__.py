"""Route Modules: one file per resource family.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Routes never talk to the ledger: they pick a call builder and a renderer
      and hand both to the gateway

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
