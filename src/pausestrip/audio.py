"""Audio operations via Praat (parselmouth).

Sounds stay as parselmouth.Sound objects end to end; all timing is in
seconds. WAV writing uses scipy.io.wavfile.
"""

from pathlib import Path

import numpy as np
import parselmouth
import scipy.io.wavfile as wavfile
from parselmouth.praat import call


def load_sound(path: str | Path) -> parselmouth.Sound:
    """Read an audio file into a Praat Sound.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return parselmouth.Sound(str(path))


def extract_part(sound: parselmouth.Sound, start: float, end: float) -> parselmouth.Sound:
    """Cut [start, end) out of sound with a rectangular window.

    The result starts at time 0.
    """
    return sound.extract_part(
        from_time=start,
        to_time=end,
        window_shape=parselmouth.WindowShape.RECTANGULAR,
        relative_width=1.0,
        preserve_times=False,
    )


def concatenate(sounds: list[parselmouth.Sound]) -> parselmouth.Sound:
    """Join sounds end to end, in order."""
    if not sounds:
        raise ValueError("No sounds to concatenate")
    return parselmouth.Sound.concatenate(sounds)


def get_duration(sound: parselmouth.Sound) -> float:
    """Total duration in seconds."""
    return float(sound.get_total_duration())


def get_intensity(sound: parselmouth.Sound) -> float:
    """Mean intensity of the whole sound in dB."""
    return float(call(sound, "Get intensity (dB)"))


def get_max_intensity(sound: parselmouth.Sound, pitch_floor: float = 100.0) -> float:
    """Peak of the smoothed intensity contour in dB.

    The contour uses pitch_floor as minimum pitch with the mean subtracted;
    the peak is picked over the whole contour with parabolic interpolation.
    """
    intensity = sound.to_intensity(minimum_pitch=pitch_floor, subtract_mean=True)
    return float(call(intensity, "Get maximum", 0, 0, "Parabolic"))


def save_wav(path: str | Path, sound: parselmouth.Sound) -> Path:
    """Write a sound as a mono 16-bit PCM WAV.

    - Mixes down to mono if needed
    - Clips values to [-1, 1] before conversion
    - Creates parent directories if needed
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if sound.n_channels > 1:
        sound = sound.convert_to_mono()
    clipped = np.clip(sound.values[0], -1.0, 1.0)
    int16 = (clipped * 32767).astype(np.int16)
    wavfile.write(str(path), int(sound.sampling_frequency), int16)
    return path
