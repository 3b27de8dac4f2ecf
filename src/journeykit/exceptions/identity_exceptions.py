# journeykit/exceptions/identity_exceptions.py


from journeykit.exceptions.base import JourneyKitError


class IdentityError(JourneyKitError): ...


class IdentityResolutionError(IdentityError):
    """Raised when a reference cannot be mapped to a canonical key. Is the input reference-like?"""
