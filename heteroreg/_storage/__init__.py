from .protocol import InnerMapProtocol

__all__ = ["InnerMapProtocol"]
