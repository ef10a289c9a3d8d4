"""Core game rules (parsing, comparison, secret sources).

Kept free of FastAPI and Redis concerns so it can be reused by the terminal
loop, API routes, and tests.
"""
