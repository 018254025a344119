"""
Configuration for the type resolver.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_REF_PREFIX = "#/components/schemas/"


@dataclass
class ResolverConfig:
    """Configuration options for type resolution."""

    # Prefix stripped from definition names when emitting a $ref (e.g. the app id)
    schema_name_prefix: str = ""

    # Location of the named schemas in the target document
    ref_prefix: str = DEFAULT_REF_PREFIX

    # Whether recoverable diagnostics abort the resolution like fatal ones
    errors_are_fatal: bool = False

    @staticmethod
    def from_dict(d: dict) -> ResolverConfig:
        """Create a config from a dictionary."""
        config = ResolverConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "schema_name_prefix": self.schema_name_prefix,
            "ref_prefix": self.ref_prefix,
            "errors_are_fatal": self.errors_are_fatal,
        }
