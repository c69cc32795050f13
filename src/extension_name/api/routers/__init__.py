"""
extension_name.api.routers

Router modules for the extension controllers.
"""

# Package marker.
