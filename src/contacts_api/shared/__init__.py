"""
Shared infrastructure: configuration-backed database access, logging, errors.
"""
