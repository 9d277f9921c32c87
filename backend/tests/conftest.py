"""
pytest configuration file

Shared fixtures for the codec, generator and entity tests.
"""

import random
from uuid import UUID

import pytest

MAX_UUID_INT = (1 << 128) - 1


@pytest.fixture(scope="session")
def edge_uuids() -> list:
  """Uuids around the padding corner cases of the codec"""
  values = [0, 1, 61, 62, MAX_UUID_INT, 1 << 127, (1 << 127) - 1, (1 << 64) - 1, 1 << 64]
  # A single bit set at every position: covers every byte length of the decoded
  # integer, with and without the top bit set
  values += [1 << bit for bit in range(128)]
  # Every bit set below each position
  values += [(1 << bit) - 1 for bit in range(1, 129)]
  return [UUID(int=value) for value in values]


@pytest.fixture(scope="session")
def random_uuids() -> list:
  """Seeded random samples over the whole 128-bit space"""
  rng = random.Random(62)
  samples = [UUID(int=rng.getrandbits(128)) for _ in range(5000)]
  # Force half of another batch to have the top bit set
  samples += [UUID(int=rng.getrandbits(127) | (1 << 127)) for _ in range(1000)]
  return samples


@pytest.fixture(scope="session")
def random_numbers() -> list:
  """Seeded random non-negative integers, from tiny to far beyond 128 bits"""
  rng = random.Random(1962)
  return [rng.getrandbits(rng.randint(1, 1024)) for _ in range(2000)]
