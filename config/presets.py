"""
Predefined configuration presets for the playground.
"""
from typing import Dict, Any


class ConfigPresets:
    """Collection of predefined configuration presets."""

    @staticmethod
    def default() -> Dict[str, Any]:
        """Quiet run reproducing the classic walkthrough."""
        return {
            'logging': {
                'log_level': 'WARNING',
                'log_dir': 'logs',
                'enable_file': False
            },
            'playground': {
                'style': 'mac',
                'country': 'united_states',
                'numbers': ['1', '2'],
                'fruit': 'apple',
                'bank': 'cmbc'
            }
        }

    @staticmethod
    def verbose() -> Dict[str, Any]:
        """Debug logging to console and rotating files."""
        return {
            'logging': {
                'log_level': 'DEBUG',
                'log_dir': 'logs/playground',
                'enable_file': True,
                'enable_structured': True
            }
        }
