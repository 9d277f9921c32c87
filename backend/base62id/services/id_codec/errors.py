class MissingValueError(TypeError):
  """Raised when a required argument was not supplied at all (i.e. it's None)."""


class InvalidArgumentError(ValueError):
  """Raised when an argument was supplied but can't be encoded or decoded.

  Examples are negative numbers, blank strings and strings that contain
  characters outside of the base62 character set.
  """
