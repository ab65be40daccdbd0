from .renderer import build_docx, export_text, render_docx, select_body

__all__ = ["build_docx", "export_text", "render_docx", "select_body"]
