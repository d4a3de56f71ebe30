"""Product catalog HTTP API.

A FastAPI service exposing a single Product resource backed by either an
in-memory store or a relational table accessed through SQLModel.
"""

__version__ = "0.1.0"
