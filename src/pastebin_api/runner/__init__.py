"""
CLI runner module.

Provides commands:
- create: Create a paste from a file or stdin
- list: List the user's pastes
- delete: Delete a paste
- raw: Print raw paste content
- login: Print a user key
- init-config: Write a default config file
"""

from .main import create_cli, main

__all__ = [
    "create_cli",
    "main",
]
