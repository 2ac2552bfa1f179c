"""File watching."""

import logging
import os.path
from pathlib import Path
from typing import Callable, Union

from watchdog.events import (
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer


class Watcher:

    """Watch a single file and run a callback whenever it changes."""

    def __init__(self, path: Union[str, Path], callback: Callable[[], None]):
        self.path = Path(path)
        self.handler = Handler(self.path, callback)
        self.observer = Observer()

    def run(self):
        # Watch the parent directory, so that editors replacing the file
        # (rather than writing it in place) are still noticed.
        self.observer.schedule(self.handler, str(self.path.parent), recursive=False)

        logging.info("running initial pass")
        self.handler.callback()
        logging.info("watching %s", self.path)
        self.observer.start()
        try:
            while self.observer.is_alive():
                self.observer.join(1)
        except KeyboardInterrupt:
            logging.info("quitting")
        finally:
            self.observer.stop()
            self.observer.join()


class Handler(FileSystemEventHandler):

    """Handler for file system events on the watched file."""

    EVENTS = (FileCreatedEvent, FileModifiedEvent, FileMovedEvent)

    def __init__(self, path: Path, callback: Callable[[], None]):
        super().__init__()
        self.target = os.path.realpath(path)
        self.callback = callback

    def matches(self, event: FileSystemEvent) -> bool:
        if not isinstance(event, self.EVENTS):
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and os.path.realpath(p) == self.target for p in paths)

    def on_any_event(self, event: FileSystemEvent):
        if not self.matches(event):
            return
        logging.info("%s %s: reload", event.src_path, event.event_type)
        self.callback()
