"""Exceptions raised by repofetch."""


class RepofetchError(Exception):
    """Base class for errors that abort a repofetch run."""


class ConfigError(RepofetchError):
    """The configuration file could not be read or validated."""


class RemoteError(RepofetchError):
    """A local repository or its remote could not be resolved to GitHub."""


class RepoMetadataError(RepofetchError):
    """The repository metadata fetch failed; no stats can be shown."""


class AsciiOverflowError(RuntimeError):
    """More stat lines than ASCII art lines.

    This is a bug in the art asset, not a runtime condition, so it is not a
    ``RepofetchError`` and is not turned into a friendly CLI message.
    """
