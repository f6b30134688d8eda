"""Exceptions raised by geocentric"""

__all__ = ['InvalidParameter']


class InvalidParameter(ValueError):
    """Raised when an ellipsoid or point is constructed from out-of-domain values"""
