# gst_billing/domain/errors.py
"""Exceptions raised by the tax engine."""


class TaxEngineError(ValueError):
    """Base class for tax engine precondition violations."""
    pass


class PlaceOfSupplyError(TaxEngineError):
    """Raised when no place of supply can be resolved (seller state unknown)."""
    pass


class InvalidAmountError(TaxEngineError):
    """Raised for amounts outside the domain of an operation (e.g. negative totals)."""
    pass
