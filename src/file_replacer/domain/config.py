from __future__ import annotations

"""
Session Configuration Domain.

Defines the default runtime configuration driving a replacement run and
projects the flat session dictionary into the typed configuration objects
consumed by the traversal and matching services.
"""

import logging
from typing import Any, Dict

from file_replacer.domain.models import DEFAULT_MAX_DEPTH, MatchConfig, TraversalConfig
from file_replacer.infra.fs import normalize_paths

logger = logging.getLogger(__name__)

# Keys accepted from external override sources (CLI)
CONFIG_KEYS = (
    "source_path",
    "destination_path",
    "max_depth",
    "case_sensitive",
    "include_hidden",
    "exclude_paths",
    "continue_on_error",
)

# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "source_path": "",
        "destination_path": "",

        # Traversal
        "max_depth": DEFAULT_MAX_DEPTH,
        "include_hidden": False,
        "exclude_paths": [],

        # Matching
        "case_sensitive": False,

        # Failure policy
        "continue_on_error": False,
    }


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Perform a shallow merge of override values into the base configuration.

    Only known keys are merged, and a None override means "not supplied".

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k in CONFIG_KEYS:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# Projections
# -----------------------------------------------------------------------------

def to_traversal_config(cfg: Dict[str, Any]) -> TraversalConfig:
    """Build the walker parameters from a validated session configuration."""
    excluded = frozenset(normalize_paths(cfg.get("exclude_paths") or []))
    if excluded:
        logger.debug(f"Excluded paths: {sorted(excluded)}")
    return TraversalConfig(
        max_depth=int(cfg.get("max_depth", DEFAULT_MAX_DEPTH)),
        include_hidden=bool(cfg.get("include_hidden", False)),
        excluded_paths=excluded,
    )


def to_match_config(cfg: Dict[str, Any]) -> MatchConfig:
    """Build the matcher parameters from a validated session configuration."""
    return MatchConfig(case_sensitive=bool(cfg.get("case_sensitive", False)))
