from .logger import setup_logging
from .validator import Validator

__all__ = [
    'setup_logging',
    'Validator'
]
