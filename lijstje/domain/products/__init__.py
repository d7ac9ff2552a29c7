from lijstje.domain.products.product_creation import (
    ProductCreationFailureReason,
    ProductCreationResult,
    ProductCreationService,
    product_creation_service,
)

__all__ = [
    'ProductCreationFailureReason',
    'ProductCreationResult',
    'ProductCreationService',
    'product_creation_service',
]
