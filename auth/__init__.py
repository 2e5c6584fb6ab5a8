"""auth/ -- Administrators, access tokens and role checks for the Vehicle Registry API.

Layer rule: auth/ imports only stdlib, third-party libraries and core/.
It does NOT import from api/ or fleet/.
api/ imports from auth/, not the other way around.
"""
