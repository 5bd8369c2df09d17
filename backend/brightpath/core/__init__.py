# brightpath/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- bootstrap: Application initialization and default admin creation
- db: Database configuration and connection management
- errors: Error taxonomy rendered by the app's exception handlers
- security: Password hashing and signed session cookies
"""
