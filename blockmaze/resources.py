"""Cached loading of images, models and sounds."""

from __future__ import annotations

import copy
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pygame

Loader = Callable[[str], Any]


class ResourceKind(Enum):
    IMAGE = "image"
    MODEL = "model"
    SOUND = "sound"


IMAGE_SUFFIXES = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tga"})
MODEL_SUFFIXES = frozenset({".mv1", ".x", ".pmd", ".pmx", ".mqo", ".obj"})
SOUND_SUFFIXES = frozenset({".wav", ".ogg", ".mp3"})


def _load_image(filename: str) -> Any:
    return pygame.image.load(filename)


def _load_sound(filename: str) -> Any:
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    return pygame.mixer.Sound(filename)


def _load_model(filename: str) -> bytes:
    return Path(filename).read_bytes()


@dataclass
class _Entry:
    kind: ResourceKind
    value: Any


class ResourceLoader:
    """Loads each file once and hands out the cached result.

    Models are copied on every request so each caller owns its instance.
    With ``async_loading`` set, loads run in the background and the
    load methods return ``concurrent.futures.Future`` objects.
    """

    def __init__(
        self,
        image_loader: Optional[Loader] = None,
        model_loader: Optional[Loader] = None,
        sound_loader: Optional[Loader] = None,
        *,
        async_loading: bool = False,
    ) -> None:
        self._loaders: Dict[ResourceKind, Loader] = {
            ResourceKind.IMAGE: image_loader or _load_image,
            ResourceKind.MODEL: model_loader or _load_model,
            ResourceKind.SOUND: sound_loader or _load_sound,
        }
        self._entries: Dict[str, _Entry] = {}
        self._executor: Optional[ThreadPoolExecutor] = None
        self.async_loading = async_loading

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, filename: object) -> bool:
        return filename in self._entries

    def _pool(self) -> ThreadPoolExecutor:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1)
        return self._executor

    def _load(self, kind: ResourceKind, filename: str) -> Any:
        entry = self._entries.get(filename)
        if entry is None:
            loader = self._loaders[kind]
            if self.async_loading:
                value: Any = self._pool().submit(loader, filename)
            else:
                value = loader(filename)
            entry = _Entry(kind, value)
            self._entries[filename] = entry
        return entry.value

    def load_graph(self, filename: str) -> Any:
        """Load an image, or return the cached one."""
        return self._load(ResourceKind.IMAGE, filename)

    def load_model(self, filename: str) -> Any:
        """Load a model once and return a fresh copy of it."""
        value = self._load(ResourceKind.MODEL, filename)
        if isinstance(value, Future):
            return self._pool().submit(lambda: copy.copy(value.result()))
        return copy.copy(value)

    def load_sound(self, filename: str) -> Any:
        """Load a sound, or return the cached one."""
        return self._load(ResourceKind.SOUND, filename)

    def load_folder(self, folder: Union[str, Path], recursive: bool = False) -> List[str]:
        """Load every recognised file in ``folder`` and return their names.

        Raises FileNotFoundError when ``folder`` is not a directory.
        """
        root = Path(folder)
        if not root.is_dir():
            raise FileNotFoundError(f"no such folder: {root}")
        candidates = root.rglob("*") if recursive else root.iterdir()
        loaded = []
        for path in sorted(p for p in candidates if p.is_file()):
            suffix = path.suffix.lower()
            name = str(path)
            if suffix in IMAGE_SUFFIXES:
                self.load_graph(name)
            elif suffix in MODEL_SUFFIXES:
                self._load(ResourceKind.MODEL, name)
            elif suffix in SOUND_SUFFIXES:
                self.load_sound(name)
            else:
                continue
            loaded.append(name)
        return loaded

    def is_loading(self) -> bool:
        """Return True while any background load is unfinished."""
        return any(
            isinstance(entry.value, Future) and not entry.value.done()
            for entry in self._entries.values()
        )

    def release_all(self) -> None:
        """Forget every loaded file, cancelling loads not yet begun."""
        for entry in self._entries.values():
            if isinstance(entry.value, Future):
                entry.value.cancel()
        self._entries.clear()