"""
Bloglist - Interfaces Package
=============================

Contains all user-facing interfaces (presentation layer).

Structure:
- api/: FastAPI HTTP interface (JSON REST API under /api)
"""
