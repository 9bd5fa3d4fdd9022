"""Service layer — CLI-facing operations returning ServiceResult.

Services may import from domain, binding, utils and introspection.
They must never import from commands or output.
"""
