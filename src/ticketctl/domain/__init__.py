"""Domain layer — line items, discount rules, and input parsing.

This layer depends only on stdlib and pydantic.
It must never import from services, output, commands, or config.
"""
