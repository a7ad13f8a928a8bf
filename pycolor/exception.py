__all__ = ['ColorFormatError', 'InvalidFormat', 'UnsupportedFormat']


class ColorFormatError(ValueError):
    """Base class of the colour encoding errors"""

    def __repr__(self) -> str:
        return '%s(%s)' % (self.__class__.__name__, ', '.join(map(repr, self.args)))


class InvalidFormat(ColorFormatError):
    """Input can't be interpreted as any supported colour encoding"""


class UnsupportedFormat(ColorFormatError):
    """Requested output format is not part of the supported set"""
