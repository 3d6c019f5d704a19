# This file makes the models directory a Python package 
from .base import Base
from .kjv import KjvVerse, Verse

__all__ = [
    'Base',
    'KjvVerse',
    'Verse',
]
