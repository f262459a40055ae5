"""Core business logic layer.

Subpackages:
- units: mass / volume conversion and price scaling
- inventory: named ingredient storages and the add-ingredient wizard
- recipes: recipe book, suggestions and the add-recipe wizard
"""
__all__ = ["units", "inventory", "recipes"]
