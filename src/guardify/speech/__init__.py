from .announcer import Announcer, init_tts

__all__ = ["Announcer", "init_tts"]
