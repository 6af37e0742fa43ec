"""
Console walkthrough of the factory demonstrations.
"""
from .runner import (
    PlaygroundRunner,
    load_playground_config,
    configure_logging,
    run_playground,
    NO_PRODUCT
)

__all__ = [
    'PlaygroundRunner',
    'load_playground_config',
    'configure_logging',
    'run_playground',
    'NO_PRODUCT',
]
