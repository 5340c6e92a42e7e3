"""Abstract interfaces for infrastructure dependencies."""

from .object_gateway import ObjectGateway
from .transcoder import Transcoder

__all__ = ["ObjectGateway", "Transcoder"]
