from config.game_config import GameConfig
from voice import feedback
from voice.feedback import VoiceFeedback


class FakeEngine:
    def __init__(self):
        self.spoken = []

    def say(self, text):
        self.spoken.append(text)

    def runAndWait(self):
        pass


class DeferredThread:
    """Registra los hilos creados sin arrancarlos."""

    started = []

    def __init__(self, target, daemon):
        self.target = target

    def start(self):
        DeferredThread.started.append(self)


def make_voice(enabled):
    config = GameConfig()
    config.voice_enabled = False
    voice = VoiceFeedback(config)
    if enabled:
        config.voice_enabled = True
        voice.engine = FakeEngine()
    return voice


def test_announce_only_on_change(monkeypatch):
    DeferredThread.started = []
    monkeypatch.setattr(feedback.threading, "Thread", DeferredThread)
    voice = make_voice(enabled=True)

    assert not voice.announce("", 0)
    assert voice.announce("Incorrect!", 0)
    assert not voice.announce("Incorrect!", 0)
    assert voice.announce("Correct!", 1)
    assert voice.announce("Correct!", 2)
    assert list(voice.message_queue) == ["Incorrect!", "Correct!", "Correct!"]


def test_disabled_voice_reports_nothing_queued():
    voice = make_voice(enabled=False)
    assert voice.engine is None
    assert not voice.speak("Correct!")
    assert not voice.announce("Correct!", 1)
    assert len(voice.message_queue) == 0


def test_back_to_back_messages_start_one_worker(monkeypatch):
    DeferredThread.started = []
    monkeypatch.setattr(feedback.threading, "Thread", DeferredThread)
    voice = make_voice(enabled=True)

    voice.speak("Incorrect!")
    voice.speak("Correct!")
    assert len(DeferredThread.started) == 1
    assert voice.is_speaking

    DeferredThread.started[0].target()
    assert voice.engine.spoken == ["Incorrect!", "Correct!"]
    assert not voice.is_speaking
