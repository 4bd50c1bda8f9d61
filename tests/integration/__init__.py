"""
API test package for the task service.

This package contains tests for the /tasks endpoints.
Tests use the Flask test client and demonstrate:
- CRUD operation testing
- Malformed payload testing
- Error response testing
"""
