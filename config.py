"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). The listen address, port and seed
data are fixed; only the profile itself is selected from the environment.
"""

import os


class Config:
    """Base configuration with default settings."""

    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # One thread per request; the task store serialises access itself.
    THREADED: bool = True

    # Start with the two demo tasks ("1" and "2") in the store
    SEED_TASKS: bool = True

    # Seed data is Cyrillic, emit it as UTF-8 rather than \u escapes
    JSON_ENSURE_ASCII: bool = False


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
