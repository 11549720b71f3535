"""Domain layer — ID arithmetic and classification enums.

This layer depends only on stdlib.
It must never import from services, commands, output, or config.
"""
