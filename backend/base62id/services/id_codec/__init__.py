from .base62 import (
  CHARACTER_SET,
  decode_base_62,
  decode_uuid,
  encode_base_62,
  encode_uuid,
)
from .errors import InvalidArgumentError, MissingValueError
from .id_generator import (
  Base62IdGenerator,
  IdGenerator,
  create_time_uuid,
  get_id,
  get_id_generator,
)

# Now we get: from base62id.services.id_codec import encode_uuid
# Instead of: from base62id.services.id_codec.base62 import encode_uuid
__all__ = [
  "CHARACTER_SET",
  "encode_base_62",
  "decode_base_62",
  "encode_uuid",
  "decode_uuid",
  "InvalidArgumentError",
  "MissingValueError",
  "IdGenerator",
  "Base62IdGenerator",
  "create_time_uuid",
  "get_id",
  "get_id_generator",
]
