"""Custom exceptions for the YouTrack integration."""


class YouTrackError(Exception):
    """Base exception for YouTrack integration errors."""


class InvalidInputError(YouTrackError):
    """Board URL or sync parameters are malformed or missing."""


class UpstreamError(YouTrackError):
    """YouTrack could not be reached or answered with a non-success status."""


class DecodeError(YouTrackError):
    """YouTrack response body does not have the expected shape."""
