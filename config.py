# ========================= config.py =========================
from dataclasses import dataclass, field

@dataclass
class SynthConfig:
    sample_rate: int = 48000
    bpm: int = 113
    volume: float = 0.4  # master volume, every note uses it

    def validate(self):
        if self.sample_rate <= 0:
            raise ValueError(f"sample_rate must be positive, got {self.sample_rate}")
        if self.bpm <= 0:
            raise ValueError(f"bpm must be positive, got {self.bpm}")

@dataclass
class OutputConfig:
    path: str = "test.pcm"

@dataclass
class AppConfig:
    synth: SynthConfig = field(default_factory=SynthConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
