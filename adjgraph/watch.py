"""File watching."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from adjgraph.graph import Graph
from adjgraph.loader import load_graph

RELOAD_EVENTS = ("created", "modified", "moved")


class Watcher:

    """Watch a graph file and call a function with the graph on each change."""

    def __init__(self, path: Path, on_load: Callable[[Graph[Any]], None]):
        self.path = path
        self.handler = Handler(path, on_load)
        self.observer = Observer()

    def run(self):
        # Watch the directory, since editors often replace the file on save.
        self.observer.schedule(self.handler, str(self.path.parent), recursive=False)
        self.handler.reload()
        logging.info("watching %s", self.path)
        self.observer.start()
        try:
            self.observer.join()
        except KeyboardInterrupt:
            logging.info("quitting")
        finally:
            self.observer.stop()
            self.observer.join()


class Handler(FileSystemEventHandler):

    """Handler for file system events on a graph file."""

    def __init__(self, path: Path, on_load: Callable[[Graph[Any]], None]):
        super().__init__()
        self.path = path.resolve()
        self.on_load = on_load

    def matches(self, event: FileSystemEvent) -> bool:
        # Reading the file produces opened/closed events; reacting to those
        # would reload forever.
        if event.is_directory or event.event_type not in RELOAD_EVENTS:
            return False
        paths = [event.src_path, getattr(event, "dest_path", "")]
        return any(p and Path(p).resolve() == self.path for p in paths)

    def on_any_event(self, event: FileSystemEvent):
        if not self.matches(event):
            return
        if not self.path.exists():
            logging.warning("%s %s: file is gone", event.src_path, event.event_type)
            return
        logging.info("%s %s: reload", event.src_path, event.event_type)
        self.reload()

    def reload(self):
        self.on_load(load_graph(self.path))
