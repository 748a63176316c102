"""
stepwise: capability-tiered positions and the generic algorithms over them.

This module provides the public API for stepwise. Position types declare what
they can do (step forward, step backward, jump in O(1)), and ``distance`` and
``advance`` pick the cheapest correct algorithm for each type automatically.
"""

import logging

__version__ = "0.1.0"

# Set up basic logging configuration if none exists
def _ensure_basic_logging():
    """Ensure basic logging is configured if no configuration exists."""
    root_logger = logging.getLogger()

    # Only configure if no handlers exist and level is too high
    if not root_logger.handlers and root_logger.level > logging.INFO:
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

# Configure basic logging on import
_ensure_basic_logging()

# Re-export public API
from stepwise.api import advance, capability_tier, distance
from stepwise.constants.constants import CapabilityTier, Operation
from stepwise.core.capabilities import Bidirectional, RandomAccess, Steppable
from stepwise.core.config import (StepwiseConfig, get_current_config,
                                  load_config_from_file, set_current_config)
from stepwise.core.cursor import (Cursor, step_backward,
                                  step_backward_returning_previous,
                                  step_forward,
                                  step_forward_returning_previous)
from stepwise.core.exceptions import (AlgorithmRegistrationError,
                                      AxiomViolationError, CapabilityError,
                                      DistanceTypeError,
                                      PositionTypeMismatchError,
                                      PreconditionViolation, StepwiseError,
                                      precondition)
from stepwise.dispatch.resolver import (clear_dispatch_cache, resolve_dispatch,
                                        resolve_tier)
from stepwise.positions.index import BufferIndex, Index

__all__ = [
    # Core functions
    "distance",
    "advance",
    "capability_tier",
    "step_forward",
    "step_forward_returning_previous",
    "step_backward",
    "step_backward_returning_previous",

    # Capability tiers
    "Steppable",
    "Bidirectional",
    "RandomAccess",
    "CapabilityTier",
    "Operation",

    # Key types
    "Cursor",
    "Index",
    "BufferIndex",

    # Dispatch
    "resolve_tier",
    "resolve_dispatch",
    "clear_dispatch_cache",

    # Configuration
    "StepwiseConfig",
    "get_current_config",
    "set_current_config",
    "load_config_from_file",

    # Errors
    "StepwiseError",
    "PreconditionViolation",
    "CapabilityError",
    "PositionTypeMismatchError",
    "DistanceTypeError",
    "AlgorithmRegistrationError",
    "AxiomViolationError",
    "precondition",
]
