# backend/acs_gateway/api/__init__.py
