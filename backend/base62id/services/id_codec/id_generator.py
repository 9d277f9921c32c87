import uuid
from abc import ABC, abstractmethod
from typing import Callable
from base62id.config import settings
from base62id.services.logger import app_logger
from .base62 import encode_uuid


def create_time_uuid() -> uuid.UUID:
  """Gets a new time based (version 1) uuid

  Node and clock sequence come from settings when they're configured, otherwise
  uuid1 falls back to the hardware address and a random clock sequence.
  """
  return uuid.uuid1(
    node=settings.ID_GENERATOR_NODE, clock_seq=settings.ID_GENERATOR_CLOCK_SEQ
  )


class IdGenerator(ABC):
  """Anything that can hand out string ids for new entities"""

  @abstractmethod
  def generate_id(self) -> str:
    ...


class Base62IdGenerator(IdGenerator):
  def __init__(self, time_uuid_factory: Callable[[], uuid.UUID] = create_time_uuid):
    """
    Generates base62 unique ids that are based on time uuids

    Compared to the usual hex encoded uuids, these ids are:
    - Shorter, at most 22 characters instead of 36, so they take less storage.
    - Case sensitive. If you store them in a database, lookups on the id column
      must compare case sensitively, otherwise 'a' and 'A' ids collide.

    There's no mutable state in here, so one instance can be shared between
    threads without a lock. Uniqueness is owned entirely by the time uuid factory:
    uuid1 combines a 100ns timestamp, a clock sequence and the node. Collisions
    across machines are very unlikely but not impossible, so if you need a hard
    guarantee, back the id column with a unique constraint.
    """
    self.time_uuid_factory = time_uuid_factory
    app_logger.debug(
      f"Base62IdGenerator created with {getattr(time_uuid_factory, '__name__', time_uuid_factory)}"
    )

  def generate_id(self) -> str:
    return encode_uuid(self.time_uuid_factory())


def get_id() -> str:
  """Creates a new base62 encoded time based uuid without needing a generator instance"""
  return encode_uuid(create_time_uuid())


_id_generator = Base62IdGenerator()


def get_id_generator() -> Base62IdGenerator:
  """Returns the shared instance of the id generator

  Note: Use this with dependency injection!
  """
  return _id_generator
