from uuid import UUID
from base62id.utils.string_utils import has_text
from .errors import InvalidArgumentError, MissingValueError

# NOTE: The order of this character set is a storage format. Tokens that were
# already persisted can only be decoded with this exact ordering, so never change it.
BASE = 62
CHARACTER_SET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
character_to_value = {}
for index in range(len(CHARACTER_SET)):
  char = CHARACTER_SET[index]
  character_to_value[char] = index

# NOTE: The dictionary allows O(1) look-ups on decode_base_62

# A uuid is 16 bytes. We prepend one zero byte so that the big-endian signed
# integer we build from it can never be negative.
UUID_BYTES = 16
PADDED_UUID_BYTES = UUID_BYTES + 1
HALF_BYTES = 8


def encode_base_62(num: int) -> str:
  """Converts a non-negative number into a base62 string

  Raises:
      MissingValueError: num is None
      InvalidArgumentError: num is negative or isn't an integer
  """
  if num is None:
    raise MissingValueError("number cannot be None.")
  if isinstance(num, bool) or not isinstance(num, int):
    raise InvalidArgumentError(f"number must be an integer, got {type(num).__name__}")
  if num < 0:
    raise InvalidArgumentError("number must not be negative")

  if num == 0:
    return CHARACTER_SET[0]

  encoded_str = ""
  while num > 0:
    num, remainder = divmod(num, BASE)
    encoded_str = CHARACTER_SET[remainder] + encoded_str
  return encoded_str


def _validate_base_62_string(string: str) -> None:
  """Ensures the string is a non-blank string made only of base62 characters

  Raises:
      InvalidArgumentError: string is None, blank, or not a valid base62 string
  """
  if not has_text(string):
    raise InvalidArgumentError("string must not be None or empty")
  for char in string:
    if char not in character_to_value:
      raise InvalidArgumentError(f"string must be a valid base62 string, found {char!r}")


def decode_base_62(string: str) -> int:
  """Convert a base62 encoded string into a base 10 number

  Leading '0' digits are accepted, so '007' and '7' both decode to 7.
  """
  _validate_base_62_string(string)
  total = 0
  for index, char in enumerate(reversed(string)):
    value = character_to_value[char]
    total += value * (BASE ** index)
  return total


def encode_uuid(uuid: UUID) -> str:
  """Converts a uuid into a base62 string of at most 22 characters

  Raises:
      MissingValueError: uuid is None
      InvalidArgumentError: uuid isn't a UUID
  """
  if uuid is None:
    raise MissingValueError("uuid must not be None")
  if not isinstance(uuid, UUID):
    raise InvalidArgumentError(f"uuid must be a UUID, got {type(uuid).__name__}")

  msb = uuid.int >> 64
  lsb = uuid.int & ((1 << 64) - 1)
  buffer = msb.to_bytes(HALF_BYTES, "big") + lsb.to_bytes(HALF_BYTES, "big")

  # Pad with a leading zero byte so a set top bit isn't read as a sign bit
  padded = b"\x00" + buffer
  return encode_base_62(int.from_bytes(padded, "big", signed=True))


def decode_uuid(string: str) -> UUID:
  """Convert a base62 string produced by encode_uuid back into the uuid

  Raises:
      InvalidArgumentError: string is None, blank, or not a valid base62 string
  """
  # Validation of the string happens in decode_base_62
  number = decode_base_62(string)

  # Minimal two's complement form, i.e. always room for a sign bit
  padded_bytes = number.to_bytes(number.bit_length() // 8 + 1, "big", signed=True)

  # Undo the padding from encode_uuid. Short values had their leading zero bytes
  # dropped, so put those back. Otherwise the first byte is the pad.
  if len(padded_bytes) < PADDED_UUID_BYTES:
    actual_bytes = padded_bytes.rjust(UUID_BYTES, b"\x00")
  else:
    actual_bytes = padded_bytes[1:PADDED_UUID_BYTES]

  msb = int.from_bytes(actual_bytes[:HALF_BYTES], "big")
  lsb = int.from_bytes(actual_bytes[HALF_BYTES:], "big")
  return UUID(int=(msb << 64) | lsb)
