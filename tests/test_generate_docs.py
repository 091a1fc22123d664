"""End-to-end tests for the generate_docs entry point."""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from refdoc.annotations import NO_DESCRIPTION
from refdoc.generate_docs import main

MANIFEST = """### SymbolManifest
assembly: Geo
types:
  - name: Vector
    namespace: Geo
    kind: struct
    constructors:
      - parameters:
          - {name: x, type: {name: Double, namespace: System}}
          - {name: y, type: {name: Double, namespace: System}}
    methods:
      - name: Scale
        returns: {name: Vector, namespace: Geo}
        parameters:
          - {name: factor, type: {name: Double, namespace: System}}
      - name: op_Addition
        static: true
        returns: {name: Vector, namespace: Geo}
        parameters:
          - {name: a, type: {name: Vector, namespace: Geo}}
          - {name: b, type: {name: Vector, namespace: Geo}}
      - name: "Bad`"
    fields:
      - name: Zero
        type: {name: Vector, namespace: Geo}
        static: true
        readonly: true
    properties:
      - {name: Length, type: {name: Double, namespace: System}, getter: true}
  - name: _Internal
    namespace: Geo
  - name: Helper
    namespace: Geo.Internal
    static: true
"""

XML = """<?xml version="1.0"?>
<doc>
    <members>
        <member name="T:Geo.Vector"><summary>A 2D vector.</summary></member>
        <member name="M:Geo.Vector.Scale(System.Double)">
            <summary>Scales it.</summary>
            <param name="factor">Multiplier.</param>
        </member>
    </members>
</doc>
"""


@pytest.fixture
def manifest(tmp_path: Path) -> Path:
    path = tmp_path / "Geo.yml"
    path.write_text(MANIFEST, encoding="utf-8")
    path.with_suffix(".xml").write_text(XML, encoding="utf-8")
    return path


def test_main_writes_page_files(
    tmp_path: Path, manifest: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Test the main function with mocked arguments."""
    out = tmp_path / "out"
    test_args = ["refdoc", str(manifest), "--out", str(out), "--workers", "2"]

    with patch.object(sys, "argv", test_args):
        ret = main()
    assert ret == 0

    docs = out / "docs" / "Geo"
    written = sorted(p.relative_to(out).as_posix() for p in out.rglob("*.md"))
    assert written == [
        "docs/Geo/Internal/Helper.md",
        "docs/Geo/Vector.md",
        "docs/Geo/Vector/Length.md",
        "docs/Geo/Vector/Scale.md",
        "docs/Geo/Vector/Zero.md",
        "docs/Geo/Vector/ctors.md",
        "docs/Geo/Vector/op_Addition.md",
    ]

    vector = (docs / "Vector.md").read_text(encoding="utf-8")
    assert vector.startswith("# Vector Struct\n")
    assert "A 2D vector." in vector
    assert "- [Scale](Vector/Scale.md)" in vector

    scale = (docs / "Vector" / "Scale.md").read_text(encoding="utf-8")
    assert "Scales it." in scale
    assert "- `factor`: Multiplier." in scale
    assert "public Vector Scale(double factor)" in scale

    ctors = (docs / "Vector" / "ctors.md").read_text(encoding="utf-8")
    assert NO_DESCRIPTION in ctors

    helper = (docs / "Internal" / "Helper.md").read_text(encoding="utf-8")
    assert "public static class Helper" in helper

    captured = capsys.readouterr().out
    assert "Writing 7 pages..." in captured
    assert "Skipped 1 malformed symbols" in captured
    assert f"Generated 7 Markdown pages into: {out.resolve()}" in captured


def test_main_without_xml(tmp_path: Path, manifest: Path) -> None:
    """Verify that --noxml renders placeholders everywhere."""
    out = tmp_path / "out"
    assert main([str(manifest), "--out", str(out), "--noxml", "--workers", "1"]) == 0
    vector = (out / "docs" / "Geo" / "Vector.md").read_text(encoding="utf-8")
    assert "A 2D vector." not in vector
    assert NO_DESCRIPTION in vector


def test_main_explicit_xml(tmp_path: Path, manifest: Path) -> None:
    """Verify that --xml overrides the file beside the manifest."""
    other = tmp_path / "other.xml"
    other.write_text(XML.replace("A 2D vector.", "Other docs."), encoding="utf-8")
    out = tmp_path / "out"
    assert main([str(manifest), "--out", str(out), "--xml", str(other)]) == 0
    vector = (out / "docs" / "Geo" / "Vector.md").read_text(encoding="utf-8")
    assert "Other docs." in vector


def test_main_slim(tmp_path: Path, manifest: Path) -> None:
    """Verify that --slim writes one document ordered by page path."""
    out = tmp_path / "out"
    assert main([str(manifest), "--out", str(out), "--slim", "--mgspace"]) == 0

    assert [p.name for p in out.rglob("*.md")] == ["docs.md"]
    text = (out / "docs.md").read_text(encoding="utf-8")
    assert text.index("# Helper Class") < text.index("# Vector Struct")
    assert text.index("# Vector Struct") < text.index("# Vector.Scale method")


def test_main_with_config(tmp_path: Path, manifest: Path) -> None:
    """Verify that config selects the root name and excluded namespaces."""
    config = tmp_path / "refdoc.yml"
    config.write_text(
        yaml.dump(
            {"output": {"root_name": "api"}, "exclude_namespaces": ["Geo.Internal"]}
        ),
        encoding="utf-8",
    )
    out = tmp_path / "out"
    assert main([str(manifest), "--out", str(out), "--config", str(config)]) == 0
    assert (out / "api" / "Geo" / "Vector.md").exists()
    assert not (out / "api" / "Geo" / "Internal").exists()


def test_main_missing_manifest(tmp_path: Path) -> None:
    """Verify that a missing manifest exits with a message."""
    with pytest.raises(SystemExit, match="Symbol manifest not found"):
        main([str(tmp_path / "missing.yml"), "--out", str(tmp_path / "out")])


def test_main_empty_manifest(tmp_path: Path) -> None:
    """Verify that a manifest without types exits with a message."""
    empty = tmp_path / "empty.yml"
    empty.write_text("### SymbolManifest\nassembly: Empty\ntypes: []\n")
    with pytest.raises(SystemExit, match="No types found"):
        main([str(empty), "--out", str(tmp_path / "out")])
