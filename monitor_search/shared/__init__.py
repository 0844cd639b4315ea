"""Shared cross-cutting helpers: logging and telemetry.

Used by application and infrastructure. No business logic.
"""
