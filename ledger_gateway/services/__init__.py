"""Services Layer: the ledger gateway (identity -> call -> dispatch -> response).

Invariants:
    - One ledger call per request, no retries, no shared state between requests
"""
