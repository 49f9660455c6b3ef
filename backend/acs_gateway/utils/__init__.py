# backend/acs_gateway/utils/__init__.py
