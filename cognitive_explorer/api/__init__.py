"""
FastAPI REST API for Cognitive Services Explorer.

Provides programmatic access to:
- Request previews
- Text Analytics operations
- Service profiles
"""
