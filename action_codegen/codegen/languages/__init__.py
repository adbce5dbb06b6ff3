"""
Target-specific action generators.
"""

from .typescript import TypeScriptActionGenerator

__all__ = ["TypeScriptActionGenerator"]
