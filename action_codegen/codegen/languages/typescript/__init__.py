"""
TypeScript code generator module.

Generates redux action enums, metadata, types and creators.
"""

from .generator import TypeScriptActionGenerator

__all__ = ["TypeScriptActionGenerator"]
