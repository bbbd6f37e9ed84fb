"""
API package containing versioned routes.

Versioned endpoints live in subpackages such as ``v1``; routes that are
not versioned (the health check) live directly in this package.
"""
