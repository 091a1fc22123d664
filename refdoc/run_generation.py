"""Orchestration logic for generating Markdown pages from a symbol manifest."""

import argparse
import logging
from pathlib import Path
from typing import Any

from refdoc.annotations import AnnotationStore
from refdoc.build_page_tree import build_page_tree
from refdoc.iter_raw_types import iter_raw_types
from refdoc.load_config import load_config
from refdoc.load_symbol_manifest import load_symbol_manifest
from refdoc.load_xml_docs import load_xml_docs
from refdoc.page import PageSettings
from refdoc.write_pages import write_pages
from refdoc.write_slim import write_slim

logger = logging.getLogger(__name__)


def run_generation(args: argparse.Namespace) -> int:
    """Execute the full generation pipeline."""
    if not args.manifest.exists():
        msg = f"Symbol manifest not found: {args.manifest}"
        raise SystemExit(msg)

    config = _init_config(args)
    skip_prefixes = config["pages"]["skip_type_prefixes"]

    doc = load_symbol_manifest(args.manifest)
    raw_types = list(
        iter_raw_types(doc, skip_prefixes, config["exclude_namespaces"])
    )
    if not raw_types:
        msg = f"No types found in: {args.manifest}"
        raise SystemExit(msg)
    if doc.get("assembly"):
        logger.info("Documenting assembly %s", doc["assembly"])

    store = _load_annotations(args)
    settings = PageSettings(
        code_language=config["output"]["code_language"],
        method_group_spacing=config["pages"]["method_group_spacing"],
    )
    root_name = config["output"]["root_name"]
    tree, report = build_page_tree(
        raw_types,
        store,
        settings,
        root_name=root_name,
        skip_prefixes=skip_prefixes,
    )
    if report.failures:
        print(f"Skipped {len(report.failures)} malformed symbols")

    out_root = args.out_dir.resolve()
    out_root.mkdir(parents=True, exist_ok=True)

    if args.slim:
        written = write_slim(tree, out_root / f"{root_name}.md")
    else:
        written = write_pages(tree, out_root, config["workers"])

    print(f"Generated {written} Markdown pages into: {out_root}")
    return 0


def _init_config(args: argparse.Namespace) -> dict[str, Any]:
    """Load the config file and apply command-line overrides."""
    config = load_config(args.config)
    if args.mgspace:
        config["pages"]["method_group_spacing"] = True
    if args.workers is not None:
        config["workers"] = max(1, args.workers)
    return config


def _load_annotations(args: argparse.Namespace) -> AnnotationStore:
    """Load XML docs from --xml, or from the file beside the manifest."""
    if args.noxml:
        return AnnotationStore()
    xml_path: Path = args.xml or args.manifest.with_suffix(".xml")
    return load_xml_docs(xml_path)
