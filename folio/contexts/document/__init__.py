"""
Document Context

Responsibilities:
- Defines the canonical resume schema and its invariants
- Converts between the schema and the camelCase data contract
- Persists the local resume document and the selected variant

Owns: Resume data model, default content, local persistence
Never: Formats or lays out content for display
"""

from folio.contexts.document.defaults import (
    SUGGESTED_SKILL_CATEGORIES,
    default_resume,
    empty_resume,
)
from folio.contexts.document.exceptions import InvalidDocumentError
from folio.contexts.document.schema import (
    SECTION_ORDER,
    SECTION_TITLES,
    Certification,
    Education,
    Experience,
    PersonalInfo,
    Project,
    ResumeSchema,
    SectionKey,
    Skill,
)
from folio.contexts.document.store import StoredDocument, load_document, save_document

__all__ = [
    # Schema
    "ResumeSchema",
    "PersonalInfo",
    "Experience",
    "Education",
    "Skill",
    "Project",
    "Certification",
    "SectionKey",
    "SECTION_ORDER",
    "SECTION_TITLES",
    # Defaults
    "SUGGESTED_SKILL_CATEGORIES",
    "default_resume",
    "empty_resume",
    # Persistence
    "StoredDocument",
    "load_document",
    "save_document",
    "InvalidDocumentError",
]
