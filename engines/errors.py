"""Exceptions raised by the encoder engines."""


class InvalidInputError(ValueError):
    """Input image, plane, block or sequence has an unusable shape."""


class ArithmeticFaultError(ArithmeticError):
    """A quantization divisor would divide by zero."""
