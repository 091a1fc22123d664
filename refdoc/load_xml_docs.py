"""Logic for loading compiler-generated XML documentation files."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from refdoc.annotations import AnnotationRecord, AnnotationStore

logger = logging.getLogger(__name__)

REFERENCE_TAGS = {"see", "seealso", "paramref", "typeparamref"}


def load_xml_docs(path: Path | None) -> AnnotationStore:
    """Parse ``doc/members/member`` entries into an annotation store.

    A missing file is not an error: every lookup then misses and pages show
    the no-description placeholder.
    """
    if path is None or not path.exists():
        logger.info("No XML docs found, using only the symbol manifest")
        return AnnotationStore()

    root = ET.parse(path).getroot()
    records: dict[str, AnnotationRecord] = {}
    for member in root.iterfind("./members/member"):
        member_id = member.get("name")
        if not member_id:
            continue
        records[member_id] = AnnotationRecord(
            summary=_inner_text(member.find("summary")),
            returns=_inner_text(member.find("returns")),
            remarks=_inner_text(member.find("remarks")),
            parameter_descriptions=_named_texts(member, "param"),
            type_parameter_descriptions=_named_texts(member, "typeparam"),
        )
    logger.info("Loaded %d documented members from %s", len(records), path)
    return AnnotationStore(records)


def _named_texts(member: ET.Element, tag: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for el in member.iterfind(tag):
        name = el.get("name")
        text = _inner_text(el)
        if name and text:
            out[name] = text
    return out


def _inner_text(el: ET.Element | None) -> str | None:
    """Flatten an element's text, trimming the indentation of each line."""
    if el is None:
        return None
    parts = [_text_or_empty(el.text)]
    for child in el:
        inner = "".join(child.itertext())
        ref = child.get("cref") or child.get("name") or child.get("langword")
        if not inner and ref and child.tag in REFERENCE_TAGS:
            # <see cref="T:N.Foo"/> -> `N.Foo`
            inner = f"`{ref.split(':', 1)[-1]}`"
        parts.append(inner)
        parts.append(_text_or_empty(child.tail))
    lines = [ln.strip() for ln in "".join(parts).splitlines()]
    text = "\n".join(lines).strip()
    return text or None


def _text_or_empty(text: str | None) -> str:
    return text or ""
