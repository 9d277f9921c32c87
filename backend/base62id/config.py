# Environment variables for logging and time-based id generation
import logging
import os
from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from base62id.services.logger import app_logger

load_dotenv()

MAX_NODE = (1 << 48) - 1
MAX_CLOCK_SEQ = (1 << 14) - 1


def get_env_with_logging(key: str, default: str = None) -> str:
  """Get environment variable with logging"""
  value = os.getenv(key, default)
  if not value:
    app_logger.warning(f"Environment variable '{key}' not found, using default: {default}")
    value = default
  return value


class Settings(BaseSettings):
  LOG_LEVEL: str = get_env_with_logging("LOG_LEVEL", "INFO")

  # Node and clock sequence handed to uuid1. Leave them unset to let the
  # standard library use the hardware address and a random clock sequence.
  # If several processes share a host, give each one its own node.
  ID_GENERATOR_NODE: Optional[int] = None
  ID_GENERATOR_CLOCK_SEQ: Optional[int] = None

  @field_validator("LOG_LEVEL", mode="before")
  @classmethod
  def normalize_log_level(cls, level: str) -> str:
    level = str(level).strip().upper()
    # getLevelName only maps registered names back to their numeric level
    if not isinstance(logging.getLevelName(level), int):
      raise ValueError(f"LOG_LEVEL must be a logging level name, got '{level}'")
    return level

  @field_validator("ID_GENERATOR_NODE", mode="after")
  @classmethod
  def validate_node(cls, node: Optional[int]) -> Optional[int]:
    if node is None:
      return node
    if not (0 <= node <= MAX_NODE):
      raise ValueError(f"ID_GENERATOR_NODE must be 0..{MAX_NODE}")
    return node

  @field_validator("ID_GENERATOR_CLOCK_SEQ", mode="after")
  @classmethod
  def validate_clock_seq(cls, clock_seq: Optional[int]) -> Optional[int]:
    if clock_seq is None:
      return clock_seq
    if not (0 <= clock_seq <= MAX_CLOCK_SEQ):
      raise ValueError(f"ID_GENERATOR_CLOCK_SEQ must be 0..{MAX_CLOCK_SEQ}")
    return clock_seq


settings = Settings()
app_logger.setLevel(settings.LOG_LEVEL)
