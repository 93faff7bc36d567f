"""
Patterns Package
================

Standalone behavioral pattern examples. The modules do not depend on each
other or on the calculator command log.

Modules:
    - immutable: ImmutablePerson
    - iterator: Song, MusicLibrary, Pandora, Spotify and their iterators
    - observer: Observable Product notifying User observers
    - strategy: SaveFileDialog with doc/text save strategies
    - template: BoardGameController running delegate phases
"""

from .immutable import ImmutablePerson
from .iterator import (
    MusicLibrary,
    MusicLibraryIterator,
    Pandora,
    PandoraIterator,
    Song,
    Spotify,
    SpotifyIterator,
)
from .observer import Observable, Observer, Product, User
from .strategy import DocFileStrategy, SaveFileDialog, Strategy, TextFileStrategy
from .template import Battleship, BoardGameController, BoardGamePhases, Monopoly

__all__ = [
    # Immutable
    "ImmutablePerson",
    # Iterator
    "MusicLibrary",
    "MusicLibraryIterator",
    "Pandora",
    "PandoraIterator",
    "Song",
    "Spotify",
    "SpotifyIterator",
    # Observer
    "Observable",
    "Observer",
    "Product",
    "User",
    # Strategy
    "DocFileStrategy",
    "SaveFileDialog",
    "Strategy",
    "TextFileStrategy",
    # Template
    "Battleship",
    "BoardGameController",
    "BoardGamePhases",
    "Monopoly",
]
