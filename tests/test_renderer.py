# tests/test_renderer.py

import io

import pytest
from docx import Document
from docx.oxml.ns import qn
from pydantic import ValidationError

from conftest import make_document
from docx_trimmer.api.models import ExportOptions
from docx_trimmer.export.renderer import build_docx, export_text, render_docx, select_body


def _only_run(data: bytes):
    doc = Document(io.BytesIO(data))
    assert len(doc.sections) == 1
    assert len(doc.paragraphs) == 1
    runs = doc.paragraphs[0].runs
    assert len(runs) == 1
    return runs[0]


def test_default_export_is_full_text_at_28_half_points():
    doc = make_document("Lead. A1 x. B2 y.", ["A1", "B2"])

    run = _only_run(render_docx(doc, ExportOptions(font_size=14)))

    assert run.text == "Lead. A1 x. B2 y."
    assert run.font.size.pt == 14
    sz = run._r.rPr.find(qn("w:sz"))
    assert sz.get(qn("w:val")) == "28"


def test_missing_font_size_uses_default():
    options = ExportOptions()
    assert options.effective_font_size == 14
    assert options.half_points == 28

    run = _only_run(render_docx(make_document("Body.", []), options))
    assert run.font.size.pt == 14


def test_export_without_sections():
    doc = make_document("Lead. A1 x. B2 y.", ["A1", "B2"])

    run = _only_run(render_docx(doc, ExportOptions(font_size=9, without_sections=["A1"])))

    assert run.text == "Lead. B2 y."
    assert run.font.size.pt == 9


def test_empty_selection_still_goes_through_slicer(monkeypatch):
    import docx_trimmer.export.renderer as renderer_module

    calls = []

    def fake_slice(document, sections):
        calls.append(list(sections))
        return "sliced"

    monkeypatch.setattr(renderer_module, "slice_sections", fake_slice)
    doc = make_document("full", [])

    assert select_body(doc, []) == "sliced"
    assert select_body(doc, None) == "full"
    assert calls == [[]]


def test_export_text_returns_plain_string():
    doc = make_document("Lead. A1 x. B2 y.", ["A1", "B2"])
    assert export_text(doc, ["B2"]) == "Lead. A1 x. "
    assert export_text(doc) == "Lead. A1 x. B2 y."


def test_build_docx_has_no_paragraph_breaks():
    doc = build_docx("one two three", font_size=20)
    assert [p.text for p in doc.paragraphs] == ["one two three"]


@pytest.mark.parametrize("size", [0, 73, -5])
def test_font_size_out_of_range_is_rejected(size):
    with pytest.raises(ValidationError):
        ExportOptions(font_size=size)
