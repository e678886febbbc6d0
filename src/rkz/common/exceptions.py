"""Common exception types for the rkz Z-factor engine."""


class ZFactorError(RuntimeError):
    """Base class for every error raised by rkz."""


class InputError(ZFactorError):
    """Raised for caller input that cannot be turned into a valid request."""


class EvaluationError(ZFactorError):
    """Raised when a single (P, T) condition cannot produce a Z-factor."""


class GasNotFound(InputError):
    """Raised when a gas identifier is not present in the gas table."""


class DuplicateComponent(InputError):
    """Raised when the same gas appears twice in one mixture or table."""


class MixtureFractionMismatch(InputError):
    """Raised when explicit mixture fractions do not add up to 100 %."""


class MixtureOverflow(InputError):
    """Raised when explicit mixture fractions exceed 100 %."""


class MixtureSyntaxError(InputError):
    """Raised for a malformed mixture term (empty term, bad percentage)."""


class InvalidRange(InputError):
    """Raised for a scalar/range specification that cannot be expanded."""


class InvalidReference(InputError):
    """Raised for a relative-pressure reference that is neither hPa nor 'stdatm'."""


class UnknownEosModel(InputError):
    """Raised when an equation-of-state selector names no known model."""


class InvalidTemperature(EvaluationError):
    """Raised for a temperature at or below 0 K."""


class InvalidPressure(EvaluationError):
    """Raised for a negative absolute pressure."""


class NumericalFailure(EvaluationError):
    """Raised when the cubic in Z has no positive real root."""
