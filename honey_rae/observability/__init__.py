"""Lightweight observability helpers.

Request IDs + structlog contextvars, plus an in-memory metrics snapshot endpoint.
"""
