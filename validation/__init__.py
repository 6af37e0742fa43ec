"""
Validation utilities for FactoryPlayground.
"""
from .schema import Schema, PlaygroundSchema

__all__ = [
    'Schema',
    'PlaygroundSchema',
]
