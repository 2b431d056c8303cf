"""Factory Boy setup for test data generation."""

from __future__ import annotations

from faker import Faker

from cubechrono.infra.security.argon2_password_hasher import Argon2PasswordHasher

faker = Faker()
Faker.seed(1234)

# Cheap parameters; verification reads them back from the encoded hash
HASHER = Argon2PasswordHasher(time_cost=1, memory_cost=8, parallelism=1)

DEFAULT_PASSWORD = "Passw0rd!"
