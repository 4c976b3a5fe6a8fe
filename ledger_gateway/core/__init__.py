"""Core Layer: pure translation logic, no IO, no async, no framework imports.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - Call builders are pure and deterministic (same envelope + caller -> same LedgerCall)

Design Decisions:
    - Functional core separated from imperative shell: the gateway service
      does the awaiting, core only decides what to send
"""
