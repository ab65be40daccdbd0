"""
Trim DOCX files by heading-delimited sections and export the result as a
compact DOCX or as plain text.
"""

__version__ = "0.1.0"
