"""
Iterator
========

A standard way to walk the items of a collection without knowing how the
collection stores them.

Usage:
    spotify = Spotify(songs=[Song("Foo"), Song("Bar")])
    for song in spotify:
        print(f"I've read: {song}")
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class Song:
    title: str


class MusicLibraryIterator:
    """Walks a fixed list of songs once, front to back."""

    def __init__(self, songs: Sequence[Song]):
        self._songs = list(songs)
        self._current = 0

    def __iter__(self) -> "MusicLibraryIterator":
        return self

    def __next__(self) -> Song:
        if self._current >= len(self._songs):
            raise StopIteration
        song = self._songs[self._current]
        self._current += 1
        return song


class PandoraIterator(MusicLibraryIterator):
    pass


class SpotifyIterator(MusicLibraryIterator):
    pass


class MusicLibrary(ABC):
    """A collection of songs that hands out its own iterator."""

    def __init__(self, songs: Sequence[Song]):
        self.songs: List[Song] = list(songs)

    def __len__(self) -> int:
        return len(self.songs)

    def __iter__(self) -> MusicLibraryIterator:
        return self.make_iterator()

    @abstractmethod
    def make_iterator(self) -> MusicLibraryIterator:
        ...


class Pandora(MusicLibrary):
    def make_iterator(self) -> PandoraIterator:
        return PandoraIterator(self.songs)


class Spotify(MusicLibrary):
    def make_iterator(self) -> SpotifyIterator:
        return SpotifyIterator(self.songs)
