"""
HTTP layer: auth gate dependencies and routers.
"""
