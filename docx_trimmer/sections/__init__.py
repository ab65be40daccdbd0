from .slicer import slice_sections

__all__ = ["slice_sections"]
