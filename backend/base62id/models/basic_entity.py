from abc import ABC, abstractmethod
from typing import Any, List, Optional
from pydantic import BaseModel
from base62id.services.id_codec import get_id
from base62id.services.logger import app_logger


class BasicEntity(BaseModel, ABC):
  """Root parent class for all persistent entities.

  NOTE: Subclasses must implement on_equals and __hash__ using the entity's business keys
  (aka natural keys), and never the id. Two entities that haven't been persisted yet
  don't have ids, so the business keys are the only thing we can compare them by.

  The persistence layer is expected to call ensure_id() right before the first
  insert. Nothing else in here talks to a database.
  """

  # Base62 encoded primary key. None means the entity hasn't been persisted yet.
  id: Optional[str] = None

  # Used for optimistic locking. It's not called 'version' so subclasses can still
  # have a business field with that name.
  entity_version: int = 0

  def ensure_id(self) -> "BasicEntity":
    """Assigns a new base62 id before the entity is first persisted. Does nothing if it already has one."""
    if self.id is None:
      self.id = get_id()
      app_logger.debug(f"Assigned id '{self.id}' to new {type(self).__name__}")
    return self

  def set_id(self, id: Optional[str]) -> "BasicEntity":
    """Should only be called by the persistence layer. Returns self for chaining."""
    self.id = id
    return self

  def set_entity_version(self, entity_version: int) -> "BasicEntity":
    """Should only be called by the persistence layer. Returns self for chaining."""
    self.entity_version = entity_version
    return self

  def __eq__(self, other: Any) -> bool:
    """
    Only falls back to the (possibly expensive) business key comparison in on_equals when
    we have to:
    1. Same object, so it's equal.
    2. Not an entity at all, so it's not equal.
    3. Both ids are populated. Both rows were already inserted and the unique constraints on the
       business keys hold, so the ids alone decide equality. One class must still be a subclass
       of the other, since a proxy class won't be the exact same class as the one it wraps.
    """
    if other is self:
      return True

    if not isinstance(other, BasicEntity):
      return False

    if self.id is not None and other.id is not None:
      return self.id == other.id and (
        isinstance(other, type(self)) or isinstance(self, type(other))
      )
    return self.on_equals(other)

  @abstractmethod
  def on_equals(self, other: "BasicEntity") -> bool:
    """Compare business keys here. Do NOT use the id."""

  @abstractmethod
  def __hash__(self) -> int:
    """Must be computed from the same business keys used in on_equals."""

  @staticmethod
  def null_safe_equals(first: Any, second: Any) -> bool:
    if first is None or second is None:
      return first is second
    return first == second

  @staticmethod
  def null_safe_hash(value: Any) -> int:
    return 0 if value is None else hash(value)

  def clone(self) -> "BasicEntity":
    """Returns a shallow copy that looks like it was never persisted (no id, version -1)"""
    return self.model_copy(update={"id": None, "entity_version": -1})

  def to_string_builder(self) -> List[str]:
    """Collects the pieces of __str__: class name and id first, then whatever on_string_builder adds"""
    cls = type(self)
    parts = [f"class name = {cls.__module__}.{cls.__qualname__}, id = {self.id}"]
    return self.on_string_builder(parts)

  @abstractmethod
  def on_string_builder(self, parts: List[str]) -> List[str]:
    """Append this entity's fields to parts and return it"""

  def __str__(self) -> str:
    return "[" + "".join(self.to_string_builder()) + "]"
