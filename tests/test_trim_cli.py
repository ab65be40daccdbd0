# tests/test_trim_cli.py

import io

import pyperclip
from docx import Document
from typer.testing import CliRunner

import docx_trimmer.clipboard as clipboard_module
from conftest import SAMPLE_TEXT
from docx_trimmer.cli.main import app as cli_app

runner = CliRunner()


def test_cli_headings(sample_docx_path):
    result = runner.invoke(cli_app, ["doc", "headings", str(sample_docx_path)])

    assert result.exit_code == 0
    out = result.stdout
    for heading in ("Introduction", "Methods", "Data", "Results"):
        assert heading in out
    assert "Heads up!" in out


def test_cli_text(sample_docx_path):
    result = runner.invoke(
        cli_app,
        ["doc", "text", str(sample_docx_path), "--remove", "Methods"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == (
        "Introduction Intro body text. Data Data came from somewhere. Results It worked."
    )


def test_cli_text_without_removals_prints_full_text(sample_docx_path):
    result = runner.invoke(cli_app, ["doc", "text", str(sample_docx_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == SAMPLE_TEXT


def test_cli_trim_writes_docx(sample_docx_path, tmp_path):
    out_path = tmp_path / "out.docx"

    result = runner.invoke(
        cli_app,
        [
            "doc", "trim", str(sample_docx_path),
            "-r", "Results", "-r", "Introduction",
            "--font-size", "10",
            "--output", str(out_path),
        ],
    )

    assert result.exit_code == 0
    assert out_path.exists()

    doc = Document(io.BytesIO(out_path.read_bytes()))
    assert [p.text for p in doc.paragraphs] == [
        "Methods We did things. Data Data came from somewhere. "
    ]
    assert doc.paragraphs[0].runs[0].font.size.pt == 10


def test_cli_trim_rejects_font_size_out_of_range(sample_docx_path, tmp_path):
    result = runner.invoke(
        cli_app,
        ["doc", "trim", str(sample_docx_path), "--font-size", "0", "-o", str(tmp_path / "x.docx")],
    )
    assert result.exit_code != 0
    assert not (tmp_path / "x.docx").exists()


def test_cli_rejects_non_docx(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Methods. Results.", encoding="utf-8")

    result = runner.invoke(cli_app, ["doc", "headings", str(path)])

    assert result.exit_code == 1
    assert "Please upload a valid DOCX file." in result.stdout


def test_cli_reports_unreadable_docx(tmp_path):
    path = tmp_path / "broken.docx"
    path.write_bytes(b"not a zip")

    result = runner.invoke(cli_app, ["doc", "text", str(path)])

    assert result.exit_code == 1
    assert "Could not read" in result.stdout


def test_cli_copy(monkeypatch, sample_docx_path):
    copied = []
    monkeypatch.setattr(clipboard_module.pyperclip, "copy", copied.append)

    result = runner.invoke(cli_app, ["doc", "copy", str(sample_docx_path), "-r", "Data"])

    assert result.exit_code == 0
    assert "Copied!" in result.stdout
    assert copied == ["Introduction Intro body text. Methods We did things. Results It worked."]


def test_cli_copy_failure(monkeypatch, sample_docx_path):
    def broken_copy(text):
        raise pyperclip.PyperclipException("no clipboard mechanism")

    monkeypatch.setattr(clipboard_module.pyperclip, "copy", broken_copy)

    result = runner.invoke(cli_app, ["doc", "copy", str(sample_docx_path)])

    assert result.exit_code == 1
    assert "Error!" in result.stdout
    assert "no clipboard mechanism" in result.stdout
