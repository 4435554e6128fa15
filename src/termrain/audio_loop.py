import io
import logging
import threading
from pathlib import Path

import librosa
import numpy as np

logger = logging.getLogger(__name__)

ASSET_DIR = Path(__file__).parent / "assets"


class AudioLoopError(RuntimeError):
    """Raised when the rain clip cannot be loaded or played."""


def load_embedded_clip(name):
    """Read the raw bytes of a clip shipped with the package."""
    try:
        return (ASSET_DIR / name).read_bytes()
    except OSError as e:
        raise AudioLoopError(f"Missing embedded audio clip {name}: {e}") from e


def decode_clip(data):
    """
    Decode compressed audio held in memory.

    Returns a float32 array shaped (frames, channels) at the clip's own
    sample rate, together with that rate.
    """
    try:
        # Keep original rate and channel layout
        y, sr = librosa.load(io.BytesIO(data), sr=None, mono=False)
    except Exception as e:
        raise AudioLoopError(f"Failed to decode embedded audio: {e}") from e

    if y.ndim == 1:
        samples = y[:, np.newaxis]
    else:
        samples = y.T
    if samples.shape[0] == 0:
        raise AudioLoopError("Embedded audio clip is empty")

    return np.ascontiguousarray(samples, dtype=np.float32), int(sr)


class LoopingSource:
    """Endless stream of frames cycling through a decoded clip."""

    def __init__(self, samples):
        self.samples = samples
        self.position = 0

    @property
    def channels(self):
        return self.samples.shape[1]

    def fill(self, outdata):
        """Copy the next len(outdata) frames into outdata, wrapping around."""
        frames = len(outdata)
        total = len(self.samples)
        written = 0
        while written < frames:
            chunk = min(frames - written, total - self.position)
            outdata[written : written + chunk] = self.samples[self.position : self.position + chunk]
            written += chunk
            self.position = (self.position + chunk) % total


class AudioLoop:
    """
    Plays the embedded rain clip on repeat until the run controller stops.

    Decoding and opening the output stream happen in start(), on the calling
    thread, so setup failures surface before anything else runs. Playback is
    driven by the stream callback; a background thread holds the stream open
    and closes it once a stop is requested.
    """

    def __init__(self, config, controller, stream_factory=None):
        self.config = config
        self.controller = controller
        self.stream_factory = stream_factory
        self.source = None
        self.stream = None
        self.thread = None

    def start(self):
        logger.debug(f"[+] Loading audio: {self.config.audio_asset}...")
        samples, sr = decode_clip(load_embedded_clip(self.config.audio_asset))
        self.source = LoopingSource(samples)
        logger.debug(f"[+] Looping {len(samples) / sr:.2f}s clip at {sr}Hz")

        self.stream = self._open_stream(sr, self.source.channels)
        self.thread = threading.Thread(target=self._hold, name="termrain-audio", daemon=True)
        self.thread.start()

    def stop(self):
        """Ask the holder thread to close the stream."""
        self.controller.stop()

    def join(self, timeout=None):
        if self.thread is not None:
            self.thread.join(timeout)

    def _open_stream(self, samplerate, channels):
        try:
            factory = self.stream_factory
            if factory is None:
                # PortAudio is only loaded when playback is actually requested
                import sounddevice as sd

                factory = sd.OutputStream
            stream = factory(
                samplerate=samplerate,
                channels=channels,
                dtype="float32",
                blocksize=self.config.audio_blocksize,
                callback=self._callback,
            )
            stream.start()
        except Exception as e:
            raise AudioLoopError(f"Failed to open audio output: {e}") from e
        return stream

    def _callback(self, outdata, frames, time, status):
        if status:
            logger.debug(f"[i] Audio status: {status}")
        self.source.fill(outdata)

    def _hold(self):
        while not self.controller.wait(self.config.audio_poll_interval):
            pass
        logger.debug("[+] Stopping audio playback")
        self.stream.stop()
        self.stream.close()
