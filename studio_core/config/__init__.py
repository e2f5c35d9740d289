"""
Configuration module.

Frozen dataclass defaults, a YAML-backed loader with 3-tier precedence and
parameter validation.
"""
