"""
Contacts API: paginated CRUD over a single Contact resource.
"""

__version__ = "0.1.0"
