"""Security module -- input validation."""

from convkit.security.guardrails import is_valid_ip, validate_input

__all__ = ["is_valid_ip", "validate_input"]
