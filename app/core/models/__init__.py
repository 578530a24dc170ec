from .base import (  # noqa: F401
    ActivatableModel,
    ActiveQuerySet,
    TimestampedModel,
)
