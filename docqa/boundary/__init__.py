"""
Boundary layer for external system integrations.

Handles all interactions with external systems (vector stores).
Provides adapters and clients for infrastructure dependencies.
"""
