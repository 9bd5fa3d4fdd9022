"""Domain layer — type and field descriptors, lookup results.

This layer depends only on stdlib and the error/validation helpers.
It must never import from services, commands, or config.
"""
