import logging
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.observers import Observer
from watchdog.events import FileSystemEventHandler

from .lang import is_supported

logger = logging.getLogger(__name__)


class SourceUpdateHandler(FileSystemEventHandler):
    """
    Listens for changes to any V file in a directory and triggers a callback.
    A directory is one compile unit, so a sibling save invalidates the document too.
    """
    def __init__(self, target_dir: str, callback: Callable[[str], None], debounce_seconds: float = 0.5):
        self.target_dir = str(Path(target_dir).resolve())
        self.callback = callback
        self.last_triggered = 0.0
        self.debounce_seconds = debounce_seconds  # Prevent double-triggers from some editors

    def on_modified(self, event):
        if event.is_directory:
            return

        path = Path(event.src_path).resolve()
        if str(path.parent) != self.target_dir or not is_supported(str(path)):
            return

        now = time.time()
        if now - self.last_triggered > self.debounce_seconds:
            self.last_triggered = now
            logger.debug("Source changed: %s", path)
            self.callback(str(path))


class FileWatcher:
    """
    Manages the watchdog observer thread.
    """
    def __init__(self, debounce_seconds: float = 0.5):
        self.observer = Observer()
        self.watch = None
        self.debounce_seconds = debounce_seconds

    def start_watching(self, file_path: str, callback: Callable[[str], None]):
        """
        Starts a background thread watching the directory of the file_path.
        """
        path = Path(file_path).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Cannot watch non-existent file: {file_path}")

        handler = SourceUpdateHandler(str(path.parent), callback, self.debounce_seconds)
        self.watch = self.observer.schedule(handler, str(path.parent), recursive=False)
        self.observer.start()

    def stop_watching(self):
        if self.observer.is_alive():
            self.observer.stop()
            self.observer.join()
