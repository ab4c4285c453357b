"""Domain layer: pure text, sequence, and integer functions.

This layer depends only on the stdlib.
It must never import from services, config, output, or commands.
"""
