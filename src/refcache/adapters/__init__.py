"""Adapters – infrastructure implementations of the cache store and region source ports."""
