"""
Auth package for the FastAPI application.

Wires the Basic-Auth gate into FastAPI: loads the expected credential,
turns gate outcomes into HTTP responses and exposes a route dependency.
"""
