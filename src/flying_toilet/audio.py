"""
audio.py: Procedural sound effects and background loop through pygame.mixer.
"""

import logging
import math
from array import array
from typing import Dict, Optional

import pygame

from .data_models import GameMode, GameState
from .events import GameEvent

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050
MUSIC_VOLUME = 0.3

# name: (waveform, frequency Hz, seconds, start gain)
EFFECTS = {
    "flap": ("sine", 400, 0.10, 0.3),
    "score": ("square", 800, 0.15, 0.2),
    "hit": ("sawtooth", 100, 0.30, 0.3),
}

# A short bouncy arpeggio (Hz) looped under play
MUSIC_NOTES = (262, 330, 392, 523, 392, 330)
MUSIC_NOTE_SECONDS = 0.18


def _wave(kind: str, phase: float) -> float:
    if kind == "square":
        return 1.0 if phase < 0.5 else -1.0
    if kind == "sawtooth":
        return 2.0 * phase - 1.0
    return math.sin(2 * math.pi * phase)


def synthesize(kind: str, frequency: float, seconds: float, gain: float,
               sample_rate: int = SAMPLE_RATE, decay: bool = True) -> array:
    """
    Renders a mono 16-bit tone. With decay the gain ramps exponentially
    down to 1% over the duration.
    """
    count = max(1, int(seconds * sample_rate))
    samples = array("h")
    for i in range(count):
        t = i / sample_rate
        phase = (frequency * t) % 1.0
        level = gain * (0.01 / gain) ** (i / count) if decay and gain > 0.01 else gain
        samples.append(int(_wave(kind, phase) * level * 32767))
    return samples


class AudioPlayer:
    """
    Reacts to simulation events. Purely an observer: it never touches state.
    If the mixer cannot start, every call becomes a no-op.
    """

    def __init__(self):
        self.enabled = False
        self.sounds: Dict[str, "pygame.mixer.Sound"] = {}
        self.music: Optional["pygame.mixer.Sound"] = None
        self.music_channel: Optional["pygame.mixer.Channel"] = None

        try:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
            self.sounds = {
                name: pygame.mixer.Sound(buffer=synthesize(*params).tobytes())
                for name, params in EFFECTS.items()
            }
            self.music = self._build_music()
            self.enabled = True
        except pygame.error as e:
            logger.warning("Audio disabled, mixer failed to start: %s", e)

    def _build_music(self) -> "pygame.mixer.Sound":
        loop = array("h")
        for note in MUSIC_NOTES:
            loop.extend(synthesize("sine", note, MUSIC_NOTE_SECONDS, 0.5))
        sound = pygame.mixer.Sound(buffer=loop.tobytes())
        sound.set_volume(MUSIC_VOLUME)
        return sound

    def play(self, name: str, muted: bool):
        if not self.enabled or muted:
            return
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()

    def start_music(self, muted: bool):
        if not self.enabled or muted or self.music is None:
            return
        if self.music_channel is not None:
            self.music_channel.unpause()
            return
        self.music_channel = self.music.play(loops=-1)

    def pause_music(self):
        if self.music_channel is not None:
            self.music_channel.pause()

    def stop_music(self):
        if self.music_channel is not None:
            self.music_channel.stop()
            self.music_channel = None

    def on_event(self, event: GameEvent, state: GameState):
        muted = state.muted
        if event is GameEvent.FLAP:
            self.play("flap", muted)
        elif event is GameEvent.SCORE:
            self.play("score", muted)
        elif event is GameEvent.HIT:
            self.play("hit", muted)
        elif event is GameEvent.ROUND_START:
            self.stop_music()
            self.start_music(muted)
        elif event is GameEvent.ROUND_END:
            self.stop_music()
        elif event is GameEvent.PAUSE:
            self.pause_music()
        elif event is GameEvent.RESUME:
            self.start_music(muted)
        elif event is GameEvent.MUTE:
            if muted:
                self.pause_music()
            elif state.mode is GameMode.PLAYING:
                self.start_music(muted)

    def close(self):
        if self.enabled:
            self.stop_music()
            pygame.mixer.quit()
            self.enabled = False
