"""Infrastructure Layer: concrete collaborators and cross-cutting concerns.

Invariants:
    - Adapters implement the protocols in core/collaborator_protocols.py
    - All external failures mapped to GatewayError subclasses before leaving this layer

Design Decisions:
    - Thin wrappers over raw clients: wire format lives here, not in the gateway
"""
