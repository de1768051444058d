"""Version information for FlavorSheet."""

VERSION = "1.0.0"
