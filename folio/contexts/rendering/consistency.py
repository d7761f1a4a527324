"""
Cross-renderer Consistency

Reads the fact tags back out of a preview tree and an assembled block
sequence and compares them. For any resume and variant the two outputs must
show the same name, contact text, section titles (in order) and per-entry
facts; every variant's preview must show the same facts as every other.

Layout and styling are not compared: a stacked and a columned entry with the
same title, dates and items fingerprint identically.
"""

from dataclasses import dataclass, fields
from typing import Iterable, List, Optional, Sequence, Tuple

from folio.contexts.document.schema import ResumeSchema
from folio.contexts.rendering.assembler import Block, assemble
from folio.contexts.rendering.dispatcher import DEFAULT_DISPATCHER, RenderingDispatcher
from folio.contexts.rendering.logger import _log_debug, _log_warning
from folio.contexts.templating.formatters import CONTACT_SEPARATOR
from folio.contexts.templating.visual_tree import Fact, VisualNode

# (fact, section, entry, text, items)
_TaggedFact = Tuple[str, Optional[str], Optional[int], str, Tuple[str, ...]]


@dataclass(frozen=True)
class EntryFingerprint:
    """Facts shown for one entity, independent of layout."""

    section: str
    title: str = ""
    subtitle: str = ""
    date_range: str = ""
    description: str = ""
    bullets: Tuple[str, ...] = ()
    details: Tuple[str, ...] = ()
    items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DocumentFingerprint:
    """All facts shown by one rendering, in display order."""

    name: str
    contact: str
    summary: str
    section_titles: Tuple[str, ...]
    entries: Tuple[EntryFingerprint, ...]


@dataclass
class ConsistencyReport:
    """Result of check_consistency()."""

    variant_ids: Tuple[str, ...]
    mismatches: List[str]

    @property
    def is_consistent(self) -> bool:
        return not self.mismatches


def _fingerprint(tagged: Iterable[_TaggedFact]) -> DocumentFingerprint:
    name = ""
    summary = ""
    contact: List[str] = []
    titles: List[str] = []
    entries = {}

    for fact, section, entry, text, items in tagged:
        if fact == Fact.NAME:
            name = text
        elif fact == Fact.CONTACT:
            contact.append(text)
        elif fact == Fact.SECTION_TITLE:
            if text:
                titles.append(text)
        elif fact == Fact.SUMMARY:
            summary = text
        elif entry is not None:
            record = entries.setdefault(
                (section, entry), {"section": section, "bullets": [], "details": [], "items": []}
            )
            if fact == Fact.ENTRY_TITLE:
                record["title"] = text
            elif fact in (Fact.SUBTITLE, Fact.DATE_RANGE, Fact.DESCRIPTION):
                record[fact] = text
            elif fact == Fact.BULLET:
                record["bullets"].append(text)
            elif fact == Fact.DETAIL:
                record["details"].append(text)
            elif fact == Fact.ITEM:
                record["items"].append(text)
            elif fact == Fact.ITEMS:
                record["items"].extend(items)

    fingerprints = []
    for record in entries.values():
        for key in ("bullets", "details", "items"):
            record[key] = tuple(record[key])
        fingerprints.append(EntryFingerprint(**record))

    return DocumentFingerprint(
        name=name,
        contact=CONTACT_SEPARATOR.join(contact),
        summary=summary,
        section_titles=tuple(titles),
        entries=tuple(fingerprints),
    )


def facts_from_tree(tree: VisualNode) -> DocumentFingerprint:
    """Fingerprint of a preview tree."""
    return _fingerprint(
        (node.fact, node.section, node.entry, node.text, ())
        for node in tree.walk()
        if node.fact is not None
    )


def facts_from_blocks(blocks: Sequence[Block]) -> DocumentFingerprint:
    """Fingerprint of an assembled block sequence (row cells included)."""
    return _fingerprint(
        (cell.fact, cell.section, cell.entry, cell.text, cell.items)
        for block in blocks
        for cell in block.flatten()
        if cell.fact is not None
    )


def diff_fingerprints(left: DocumentFingerprint, right: DocumentFingerprint) -> List[str]:
    """Human-readable differences, empty when the fingerprints match."""
    differences = []
    for name in ("name", "contact", "summary", "section_titles"):
        a, b = getattr(left, name), getattr(right, name)
        if a != b:
            differences.append(f"{name}: {a!r} != {b!r}")

    if len(left.entries) != len(right.entries):
        differences.append(f"entry count: {len(left.entries)} != {len(right.entries)}")

    for index, (a, b) in enumerate(zip(left.entries, right.entries)):
        for f in fields(EntryFingerprint):
            va, vb = getattr(a, f.name), getattr(b, f.name)
            if va != vb:
                differences.append(f"{a.section}[{index}].{f.name}: {va!r} != {vb!r}")
    return differences


def check_consistency(
    schema: ResumeSchema,
    variant_ids: Optional[Sequence[str]] = None,
    dispatcher: Optional[RenderingDispatcher] = None,
) -> ConsistencyReport:
    """
    Compare preview and paginated output for each variant.

    Args:
        schema: Resume to render
        variant_ids: Variants to check (defaults to every registered variant)
        dispatcher: Dispatcher to use (defaults to the built-in variants)

    Returns:
        ConsistencyReport listing every mismatch found
    """
    dispatcher = dispatcher or DEFAULT_DISPATCHER
    variant_ids = tuple(variant_ids or dispatcher.variant_ids)
    snapshot = schema.snapshot()

    mismatches = []
    reference = None
    for variant_id in variant_ids:
        choice = dispatcher.dispatch(variant_id)
        preview = facts_from_tree(choice.template.render(snapshot))
        document = facts_from_blocks(assemble(snapshot, variant_id, dispatcher).blocks)

        for difference in diff_fingerprints(preview, document):
            mismatches.append(f"{variant_id} preview vs document: {difference}")

        if reference is None:
            reference = (variant_id, preview)
        else:
            for difference in diff_fingerprints(reference[1], preview):
                mismatches.append(f"{reference[0]} vs {variant_id} preview: {difference}")

    if mismatches:
        _log_warning(f"{len(mismatches)} consistency mismatch(es) across {len(variant_ids)} variant(s)")
    else:
        _log_debug(f"Preview and document agree for {', '.join(variant_ids)}")

    return ConsistencyReport(variant_ids=variant_ids, mismatches=mismatches)
