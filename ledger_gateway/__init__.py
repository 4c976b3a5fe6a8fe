"""Ledger Gateway Package: HTTP to ledger translation layer.

Invariants:
    - Package root has no import side-effects (version string only)

Design Decisions:
    - Explicit imports only, no star exports
"""

__version__ = "1.0.0"
