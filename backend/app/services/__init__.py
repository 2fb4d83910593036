"""Services Layer — token issuance and text rewriting.

Invariants:
    - Services receive their collaborators through the constructor
"""
