"""
Persistence adapters.

Services depend on these repositories rather than issuing SQL themselves; the
repository is the only layer that interprets a Projection.
"""
