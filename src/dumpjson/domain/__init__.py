"""Domain layer — dump shapes, host values, numeric policy, errors.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
