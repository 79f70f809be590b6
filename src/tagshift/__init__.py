"""tagshift.

A format-agnostic layer over audio file metadata. Each supported tag format
(ID3v2, MP4, APEv2, Vorbis comments in Opus/Ogg/FLAC, RIFF INFO and AIFF text
chunks) gets an adapter exposing the same canonical fields, and any two
adapters can be converted into each other through the AnyTag pivot.

Main modules:
    cli: Command-line interface (tagshift command)
    formats: Per-format adapters and file-extension dispatch
    tag: Canonical metadata model (keys, items, Tag, AnyTag)

Core modules:
    config: Configuration management
    constants: Constants and defaults
"""

try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("tagshift")
except PackageNotFoundError:
    # Package not installed, read directly from pyproject.toml
    try:
        from pathlib import Path
        import tomllib

        pyproject_path = Path(__file__).parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            __version__ = tomllib.load(f)["project"]["version"]
    except (OSError, KeyError):
        __version__ = "unknown"

__all__ = [
    # Sub-packages
    "cli",
    "formats",
    "tag",
    # Core modules
    "config",
    "constants",
]
