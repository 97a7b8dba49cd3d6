"""Tests for the document root and file helpers."""

from __future__ import annotations

import io

import pytest

import svgparse
from svgparse import Data, Document, Tag, TagKind, Tokenizer, create
from svgparse.parser import Comment, Declaration, Instruction


def _sample() -> Document:
    document = Document()
    document.add(create("path").set("d", Data().move_to((10, 10)).line_by((0, 50)).close()))
    return document


def test_empty_document():
    assert str(Document()) == '<svg xmlns="http://www.w3.org/2000/svg"/>'


def test_document_display():
    assert str(_sample()).splitlines() == [
        '<svg xmlns="http://www.w3.org/2000/svg">',
        '<path d="M10,10 l0,50 z"/>',
        "</svg>",
    ]


def test_read():
    events = svgparse.read("<svg><g/></svg>")
    assert isinstance(events, Tokenizer)
    assert list(events) == [Tag("svg", TagKind.START), Tag("g", TagKind.EMPTY), Tag("svg", TagKind.END)]


def test_save_and_open(tmp_path):
    path = tmp_path / "image.svg"
    svgparse.save(path, _sample())
    assert list(svgparse.open(path)) == [
        Tag("svg", TagKind.START, {"xmlns": "http://www.w3.org/2000/svg"}),
        Tag("path", TagKind.EMPTY, {"d": "M10,10 l0,50 z"}),
        Tag("svg", TagKind.END),
    ]


def test_open_exported(svg_file):
    events = list(svgparse.open(str(svg_file)))
    assert [type(event) for event in events[:3]] == [Instruction, Comment, Declaration]
    paths = [event for event in events if isinstance(event, Tag) and event.name == "path"]
    assert len(paths) == 4
    assert all(len(Data.parse(path.attributes["d"])) > 0 for path in paths)


def test_write():
    buffer = io.StringIO()
    svgparse.write(buffer, _sample())
    assert buffer.getvalue() == str(_sample())


def test_open_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        svgparse.open(tmp_path / "missing.svg")


def test_open_undecodable(tmp_path):
    path = tmp_path / "broken.svg"
    path.write_bytes(b"\xff\xfe<svg/>")
    with pytest.raises(UnicodeDecodeError):
        svgparse.open(path, encoding="utf-8")


def test_save_encoding(tmp_path):
    path = tmp_path / "title.svg"
    document = Document().add(create("title", "Café"))
    svgparse.save(path, document, encoding="latin-1")
    assert "Café" in path.read_text(encoding="latin-1")


def test_events_match_top_level_names():
    content = '<?xml version="1.0"?><!DOCTYPE svg><!-- note --><t>hi</t><a b>'
    events = list(svgparse.read(content))
    assert [type(event) for event in events] == [
        svgparse.Instruction,
        svgparse.Declaration,
        svgparse.Comment,
        svgparse.Tag,
        svgparse.Text,
        svgparse.Tag,
        svgparse.Error,
    ]
    assert isinstance(events[4], svgparse.Text)
    assert events[4] == svgparse.Text("hi")
