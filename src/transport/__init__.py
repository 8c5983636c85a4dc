"""
Core business logic package for the vehicle rental and taxi booking backend.

Validation, pricing, persistence and response building live here.
Lambda handlers in src/handlers/ are thin wrappers that call into transport/.
"""

__all__: list[str] = []
