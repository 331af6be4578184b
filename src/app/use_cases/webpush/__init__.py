"""Use cases do relay WebPush."""

from .relay_push import RelayPushUseCase

__all__ = ["RelayPushUseCase"]
