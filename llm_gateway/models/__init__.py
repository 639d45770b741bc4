"""Canonical chat records and provider configuration schema."""
