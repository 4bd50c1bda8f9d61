"""
Routes package for the task service.

This package contains route blueprints:
- api: the JSON task endpoints
"""
