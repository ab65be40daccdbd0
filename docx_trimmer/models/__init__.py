from .document import TrimDocument

__all__ = ["TrimDocument"]
