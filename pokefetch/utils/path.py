"""
Utilities for handling output file paths.
"""

from pathlib import Path

from pathvalidate import sanitize_filename

SPRITE_EXTENSION = "png"


def create_dir(directory_path: Path) -> None:
    """Creates a directory if it does not already exist."""
    directory_path.mkdir(parents=True, exist_ok=True)


def sprite_filename(name: str, side: str) -> str:
    """
    Builds the file name for a sprite, e.g. 'bulbasaur_front.png'.

    The Pokémon name comes from the remote API, so it is sanitized to be safe
    as a single path component.
    """
    return sanitize_filename(f"{name}_{side}.{SPRITE_EXTENSION}", platform="auto")


def sprite_path(output_dir: Path | str, name: str, side: str) -> Path:
    """Returns the destination path of a sprite inside `output_dir`."""
    return Path(output_dir) / sprite_filename(name, side)
