"""fleet/ -- Vehicle domain: entities, persistence and use cases.

Layer rule: fleet/ imports only stdlib, third-party libraries and core/.
It does NOT import from api/ or auth/.
"""
