"""
Source code for the AI Film Studio.
This package contains request building, generation and form handling.
"""

# Module exports
__all__ = [
    'generation',
    'forms',
]
