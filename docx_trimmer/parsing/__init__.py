"""
DOCX -> (plain text, heading-aware HTML) extraction and heading discovery.

- loader:   DOCX bytes -> TrimDocument, ExtractionError
- headings: heading texts from the HTML rendering
"""
