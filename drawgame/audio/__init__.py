"""
Audio cues for drawing squeaks and shaking.
"""

from .random_sound import RandomSound, SilentSound

__all__ = ['RandomSound', 'SilentSound']
