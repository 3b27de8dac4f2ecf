# journeykit/exceptions/base.py


class JourneyKitError(Exception):
    """Base class for every error raised by journeykit."""
