"""
Random sound cues: plays random clips from a pool until told to stop.
"""

import logging
import os
import random
from typing import List, Optional, Sequence

import pygame

logger = logging.getLogger(__name__)

SOUND_EXTENSIONS = ('.ogg', '.wav')


class RandomSound:
    """Chains random clips from a pool while playing.

    `play()` and `pause()` are idempotent. Pausing lets the current clip
    finish but stops the chain; call `update()` every tick to start the next
    clip when the current one ends.
    """

    def __init__(self, sounds: Sequence, rng: Optional[random.Random] = None):
        self.sounds = list(sounds)
        self.rng = rng or random.Random()
        self.playing = False
        self.channel = None

    @classmethod
    def from_files(cls, paths: Sequence[str], rng: Optional[random.Random] = None) -> 'RandomSound':
        sounds = []
        for path in paths:
            try:
                sounds.append(pygame.mixer.Sound(path))
            except (pygame.error, FileNotFoundError) as e:
                logger.warning(f"Skipping sound {path}: {e}")
        return cls(sounds, rng)

    @classmethod
    def from_directory(cls, directory: str, rng: Optional[random.Random] = None) -> 'RandomSound':
        if not os.path.isdir(directory):
            logger.info(f"No sound directory {directory}")
            return cls([], rng)
        paths = sorted(
            os.path.join(directory, name) for name in os.listdir(directory)
            if name.lower().endswith(SOUND_EXTENSIONS)
        )
        return cls.from_files(paths, rng)

    def play(self):
        if not self.playing:
            self.playing = True
            self._choose_next_sound()

    def pause(self):
        self.playing = False

    def update(self):
        """Start another clip if the last one finished and we are still playing."""
        if self.playing and (self.channel is None or not self.channel.get_busy()):
            self._choose_next_sound()

    def _choose_next_sound(self):
        if not self.sounds:
            return
        self.channel = self.sounds[self.rng.randrange(len(self.sounds))].play()


class SilentSound:
    """Audio cue used when there is no mixer or no clips."""

    playing = False

    def play(self):
        self.playing = True

    def pause(self):
        self.playing = False

    def update(self):
        pass
