"""
Helper utilities for Image Transformation Studio pages.

- class_names: Tailwind-aware class name merging
- debounce: delayed, coalesced function calls
- images: display sizing, placeholders and downloads
- transformations: transformation parameter sets
- errors: central error handler
"""

from .class_names import clsx, cn
from .debounce import Debounced, debounce
from .errors import handle_error
from .images import DATA_URL, download, get_image_size, placeholder_data_url, shimmer_svg
from .transformations import TRANSFORMATION_TYPES, build_transformation_config, default_config

__all__ = [
    'cn',
    'clsx',
    'Debounced',
    'debounce',
    'handle_error',
    'DATA_URL',
    'download',
    'get_image_size',
    'placeholder_data_url',
    'shimmer_svg',
    'TRANSFORMATION_TYPES',
    'build_transformation_config',
    'default_config',
]
