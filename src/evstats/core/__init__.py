"""Core domain definitions shared by every layer.

- columns: header names of the registration dataset
- errors: exception hierarchy
"""
