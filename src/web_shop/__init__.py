"""
Web Shop Service Module.

Serverless CRUD handlers for shops and their products, organised in the
three-layer architecture pattern:

- handlers: Lambda entry points, request validation, error responses
- logic: Store call sequencing per entity
- dal: Data access layer over DynamoDB tables
- models: Data models and schemas
"""

__version__ = "1.0.0"
__description__ = "Shop and product CRUD handlers for AWS Lambda and DynamoDB"

__all__ = [
    "__version__",
    "__description__",
]
