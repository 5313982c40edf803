"""Exceptions that end a playback run."""


class PlaybackError(Exception):
    """Base class for unrecoverable playback configuration errors."""


class InterfaceNotFoundError(PlaybackError, LookupError):
    """The requested network interface has no usable IPv4 address."""


class TransportError(PlaybackError):
    """The broadcast socket could not be created or configured."""
