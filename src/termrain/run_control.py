import logging
import signal
import threading

logger = logging.getLogger(__name__)


class RunController:
    """
    Shared stop flag for the render loop and the audio thread.

    Starts out running. Any thread, or a signal handler, may request a stop;
    consumers poll is_running() or block in wait() for at most a timeout.
    """

    def __init__(self):
        self._stopped = threading.Event()

    def is_running(self):
        return not self._stopped.is_set()

    def stop(self):
        self._stopped.set()

    def wait(self, timeout):
        """Block up to timeout seconds; True once a stop was requested."""
        return self._stopped.wait(timeout)

    def install_signal_handlers(self, signums=(signal.SIGINT, signal.SIGTERM)):
        """Turn interrupt and termination signals into a graceful stop."""
        for signum in signums:
            signal.signal(signum, self._handle_signal)

    def _handle_signal(self, signum, frame):
        logger.debug(f"[i] Received signal {signum}, stopping")
        self.stop()
