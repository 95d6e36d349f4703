"""Errors raised by the HTTP service clients."""


class ServiceError(Exception):
    """Base class for remote service failures."""


class FeedError(ServiceError):
    """The people-location feed could not be fetched or decoded."""


class TranscriptionUploadError(ServiceError):
    """The detection endpoint rejected or never received a transcription."""


class ChatServiceError(ServiceError):
    """The chat endpoint could not be reached or returned an unusable body."""
