"""
Document Assembler

Turns a resume into a flat, ordered sequence of styled blocks for the
paginated document. The block sequence is what the LaTeX and Markdown writers
consume; page breaking is left to them.

Blocks are built from the same formatters.document_facts() the preview
variants use, and carry the same fact/section/entry tags, so the two outputs
can be compared fact by fact.

Emission order:
    header name, contact lines
    per section: section title, then
        per entry: title, subtitle/date row, description, bullets, details, items
        per skill category: category, comma-joined skill names
"""

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import List, Optional, Tuple

from folio.contexts.document.schema import PersonalInfo, ResumeSchema, SectionKey
from folio.contexts.rendering.dispatcher import (
    DEFAULT_DISPATCHER,
    DEFAULT_VARIANT,
    RenderingDispatcher,
)
from folio.contexts.rendering.style_presets import RoleStyle, StylePreset
from folio.contexts.templating.formatters import (
    DocumentFacts,
    EntryFacts,
    HeaderFacts,
    SectionFacts,
    document_facts,
)
from folio.contexts.templating.visual_tree import Fact

# Relative widths of the subtitle/date row
SUBTITLE_WIDTH = 70
DATE_WIDTH = 30

FILENAME_SUFFIX = "Resume"


class BlockRole(str, Enum):
    """Style roles a block can take; each maps to a RoleStyle in the preset."""

    HEADER = "header"
    SUBHEADER = "subheader"
    SECTION_TITLE = "section_title"
    BODY = "body"
    BULLET = "bullet"


@dataclass(frozen=True)
class Block:
    """
    One unit of the paginated document.

    A row block has empty text and holds its cells in `columns`.

    Attributes:
        role: Style role
        text: Text as written; casing is a style concern
        fact: Presentation fact carried by this block, if any
        section: Section key value the block belongs to
        entry: Index of the entity within its section
        items: Discrete values behind a comma-joined text
        width: Relative width inside a row (percent)
        alignment: Overrides the role alignment when set
        bold: Forces bold regardless of role
        columns: Cells of a row block
    """

    role: BlockRole
    text: str = ""
    fact: Optional[str] = None
    section: Optional[str] = None
    entry: Optional[int] = None
    items: Tuple[str, ...] = ()
    width: Optional[int] = None
    alignment: Optional[str] = None
    bold: bool = False
    columns: Tuple["Block", ...] = ()

    @property
    def is_row(self) -> bool:
        return bool(self.columns)

    def flatten(self) -> Tuple["Block", ...]:
        """This block, or its cells when it is a row."""
        return self.columns if self.columns else (self,)


@dataclass(frozen=True)
class AssembledDocument:
    """
    Result of assemble().

    Attributes:
        variant_id: Resolved variant id
        preset: Style preset for the blocks
        blocks: Blocks in emission order
        filename: Suggested file stem, e.g. "John_Doe_Resume"
    """

    variant_id: str
    preset: StylePreset
    blocks: Tuple[Block, ...]
    filename: str

    def style_for(self, block: Block) -> RoleStyle:
        """Role style with the block's own alignment and bold applied."""
        style = self.preset.role(block.role.value)
        if block.alignment:
            style = replace(style, alignment=block.alignment)
        if block.bold:
            style = replace(style, bold=True)
        return style

    def iter_cells(self):
        """All non-row blocks in order, with row cells inlined."""
        for block in self.blocks:
            yield from block.flatten()

    def section_titles(self) -> List[str]:
        return [block.text for block in self.blocks if block.role is BlockRole.SECTION_TITLE]


def export_filename(personal_info: PersonalInfo, ext: Optional[str] = None) -> str:
    """
    "<First>_<Last>_Resume[.ext]".

    Whitespace inside names becomes "_"; path separators are dropped. Missing
    name parts are skipped.

    Examples:
        >>> export_filename(PersonalInfo(first_name="John", last_name="Doe"), "pdf")
        'John_Doe_Resume.pdf'
    """
    parts = []
    for part in (personal_info.first_name, personal_info.last_name):
        cleaned = re.sub(r"\s+", "_", re.sub(r"[\\/]", "", part or "").strip())
        if cleaned:
            parts.append(cleaned)
    stem = "_".join(parts + [FILENAME_SUFFIX])
    return f"{stem}.{ext.lstrip('.')}" if ext else stem


# Block builders


def header_blocks(header: HeaderFacts, preset: StylePreset) -> List[Block]:
    alignment = preset.role(BlockRole.HEADER.value).alignment
    blocks = []
    if header.full_name:
        blocks.append(Block(BlockRole.HEADER, header.full_name, fact=Fact.NAME, alignment=alignment))
    for line in header.lines:
        blocks.append(Block(BlockRole.BODY, line, fact=Fact.CONTACT, alignment=alignment))
    return blocks


def entry_blocks(section: str, index: int, entry: EntryFacts) -> List[Block]:
    """Blocks for one entity, in the fixed within-entry order."""

    def block(role, text, fact, **kwargs):
        return Block(role, text, fact=fact, section=section, entry=index, **kwargs)

    blocks = [block(BlockRole.SUBHEADER, entry.title, Fact.ENTRY_TITLE)]

    if entry.subtitle or entry.date_range:
        row = (
            block(
                BlockRole.BODY,
                entry.subtitle,
                Fact.SUBTITLE if entry.subtitle else None,
                width=SUBTITLE_WIDTH,
            ),
            block(
                BlockRole.BODY,
                entry.date_range,
                Fact.DATE_RANGE if entry.date_range else None,
                width=DATE_WIDTH,
                alignment="right",
            ),
        )
        blocks.append(Block(BlockRole.BODY, section=section, entry=index, columns=row))

    if entry.description:
        blocks.append(block(BlockRole.BODY, entry.description, Fact.DESCRIPTION))

    for bullet in entry.bullets:
        blocks.append(block(BlockRole.BULLET, bullet, Fact.BULLET))

    for label, value in entry.details:
        blocks.append(block(BlockRole.BODY, f"{label}: {value}", Fact.DETAIL))

    if entry.items:
        text = f"{entry.items_label}: {entry.items_text}" if entry.items_label else entry.items_text
        blocks.append(block(BlockRole.BODY, text, Fact.ITEMS, items=entry.items))

    return blocks


def skill_group_blocks(section: str, index: int, entry: EntryFacts) -> List[Block]:
    return [
        Block(BlockRole.BODY, entry.title, fact=Fact.ENTRY_TITLE, section=section, entry=index, bold=True),
        Block(
            BlockRole.BODY,
            entry.items_text,
            fact=Fact.ITEMS,
            section=section,
            entry=index,
            items=entry.items,
        ),
    ]


def section_blocks(section: SectionFacts) -> List[Block]:
    key = section.key.value
    blocks = [Block(BlockRole.SECTION_TITLE, section.title, fact=Fact.SECTION_TITLE, section=key)]

    if section.key is SectionKey.SUMMARY:
        blocks.append(Block(BlockRole.BODY, section.text, fact=Fact.SUMMARY, section=key))
        return blocks

    for index, entry in enumerate(section.entries):
        if section.key is SectionKey.SKILLS:
            blocks.extend(skill_group_blocks(key, index, entry))
        else:
            blocks.extend(entry_blocks(key, index, entry))
    return blocks


def assemble_blocks(facts: DocumentFacts, preset: StylePreset) -> Tuple[Block, ...]:
    """Block sequence for precomputed facts."""
    blocks = header_blocks(facts.header, preset)
    for section in facts.sections:
        blocks.extend(section_blocks(section))
    return tuple(blocks)


def assemble(
    schema: ResumeSchema,
    variant_id: Optional[str] = DEFAULT_VARIANT.value,
    dispatcher: Optional[RenderingDispatcher] = None,
) -> AssembledDocument:
    """
    Assemble the paginated document for a schema.

    The variant id goes through the dispatcher, so unknown ids use the same
    default variant as the preview.

    Args:
        schema: Resume to assemble (not modified)
        variant_id: Requested variant id
        dispatcher: Dispatcher to use (defaults to the built-in variants)

    Returns:
        AssembledDocument with blocks in emission order
    """
    choice = (dispatcher or DEFAULT_DISPATCHER).dispatch(variant_id)
    return AssembledDocument(
        variant_id=choice.variant_id,
        preset=choice.preset,
        blocks=assemble_blocks(document_facts(schema), choice.preset),
        filename=export_filename(schema.personal_info),
    )
