"""
Web Shop - Source Package

This package contains the serverless shop and product API: the ``web_shop``
service package and the per-function Lambda entry points in ``shops`` and
``products``.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
