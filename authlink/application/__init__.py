"""Application layer: verification lifecycle and the auth service.

Only imports from core and domain. Infrastructure adapters are injected
through the domain protocols.
"""
