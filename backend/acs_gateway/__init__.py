# backend/acs_gateway/__init__.py
"""
ACS Gateway backend application package.

This package contains:
- main: FastAPI application entrypoint
- communication: Azure Communication Services integration (email / SMS / WhatsApp)
- api: HTTP error mapping shared by all routers
- utils: environment and logging helpers
"""
