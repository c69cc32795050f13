"""
extension_name.api

API package for the extension-name service.

Responsibilities:
- FastAPI app factory, controller registry and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer stays thin: guard + delegation to the greeting/privileged collaborators.
