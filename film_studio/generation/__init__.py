"""
Generation Module

This module turns validated storyboard and 3D model requests into
schema-checked responses by delegating to a generative-AI backend.
"""

from film_studio.generation.coordinator import GenerationCoordinator

# Expose key classes at the module level
__all__ = ['GenerationCoordinator']
