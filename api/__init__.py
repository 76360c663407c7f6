"""
FastAPI RESTful API for the Book Catalog Service.

This module provides the HTTP surface of the catalog:
- Book listing, lookup and criteria search
- Book creation, replacement and deletion
- OAuth2 bearer token authentication
- OpenAPI documentation with the provider's sign-in flow
"""
