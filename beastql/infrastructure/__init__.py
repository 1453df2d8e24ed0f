"""
Infrastructure package for BeastQL.

Centralizes I/O concerns (reading the bootstrap document). Keep this layer
decoupled from store and resolver logic.
"""

from beastql.infrastructure.seed import load_seed_file, parse_seed_document

__all__ = [
    "load_seed_file",
    "parse_seed_document",
]
