import pygame

from flying_toilet import audio
from flying_toilet.audio import AudioPlayer, synthesize
from flying_toilet.data_models import GameState
from flying_toilet.events import GameEvent


def test_synthesize_length_and_range():
    samples = synthesize("square", 800, 0.15, 0.2)
    assert len(samples) == int(0.15 * audio.SAMPLE_RATE)
    assert all(-32768 <= s <= 32767 for s in samples)
    assert samples[0] == int(0.2 * 32767)


def test_synthesize_decays():
    samples = synthesize("sawtooth", 100, 0.3, 0.3)
    head = max(abs(s) for s in samples[:500])
    tail = max(abs(s) for s in samples[-500:])
    assert tail < head / 5


def test_mixer_failure_disables_audio(monkeypatch, caplog):
    def no_device(*args, **kwargs):
        raise pygame.error("no audio device")

    monkeypatch.setattr(pygame.mixer, "init", no_device)
    player = AudioPlayer()

    assert player.enabled is False
    assert "Audio disabled" in caplog.text
    for event in GameEvent:
        player.on_event(event, GameState())
    player.close()
