def has_text(string) -> bool:
  """Returns True if the string has at least one non-whitespace character.

  None, non-string values and the empty string all count as having no text.
  """
  if not isinstance(string, str) or not string:
    return False
  return any(not char.isspace() for char in string)
