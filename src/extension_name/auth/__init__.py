"""
extension_name.auth

Authentication/authorization package.

Responsibilities:
- JWT helpers and validation.
- The "Secured" route guard (FastAPI dependencies producing a Principal).
"""

# Package marker.
