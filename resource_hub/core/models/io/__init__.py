"""
API I/O models.

Pydantic request and response schemas, one module per resource.
"""
