"""Domain layer — pure formatting and validation rules.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
