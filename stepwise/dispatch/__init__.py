"""
Static selection of algorithm variants by capability tier.
"""

from stepwise.dispatch.registry_base import (ALGORITHM_REGISTRY, algorithm,
                                             get_algorithm, get_algorithm_info,
                                             get_algorithms_by_tier,
                                             register_algorithm,
                                             unregister_algorithm)
from stepwise.dispatch.resolver import (DispatchTable, clear_dispatch_cache,
                                        resolve_dispatch, resolve_tier)

__all__ = [
    'ALGORITHM_REGISTRY',
    'algorithm',
    'register_algorithm',
    'unregister_algorithm',
    'get_algorithm',
    'get_algorithms_by_tier',
    'get_algorithm_info',
    'DispatchTable',
    'resolve_dispatch',
    'resolve_tier',
    'clear_dispatch_cache',
]
