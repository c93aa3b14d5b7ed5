"""
Application Layer - Use Cases

Contains:
- sub_breeds: Sub-breed counting
"""

from .sub_breeds import count_sub_breeds

__all__ = [
    "count_sub_breeds",
]
