"""
Resume Document Schema

Canonical in-memory representation of a resume. This is the single unit
handed to every renderer in the Templating and Rendering contexts.

Document owns:
- The entity dataclasses and their invariants (skill level range, optional fields)
- Conversion to and from the camelCase data contract used by collaborators
- Whole-collection edits keyed by section

Renderers only ever read a snapshot; they never mutate the schema.
"""

import copy
import dataclasses
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar

MIN_SKILL_LEVEL = 1
MAX_SKILL_LEVEL = 5
DEFAULT_SKILL_LEVEL = 3


class SectionKey(str, Enum):
    """Top-level groupings of the schema, in no particular order."""

    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    PROJECTS = "projects"
    CERTIFICATIONS = "certifications"


# Fixed rendering order shared by every variant and the assembler
SECTION_ORDER = (
    SectionKey.SUMMARY,
    SectionKey.EXPERIENCE,
    SectionKey.EDUCATION,
    SectionKey.SKILLS,
    SectionKey.PROJECTS,
    SectionKey.CERTIFICATIONS,
)

SECTION_TITLES = {
    SectionKey.SUMMARY: "Professional Summary",
    SectionKey.EXPERIENCE: "Work Experience",
    SectionKey.EDUCATION: "Education",
    SectionKey.SKILLS: "Skills",
    SectionKey.PROJECTS: "Projects",
    SectionKey.CERTIFICATIONS: "Certifications & Awards",
}


def clean_optional(value: Any) -> Optional[str]:
    """Normalize an optional text field: blank or missing becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def clean_text(value: Any) -> str:
    """Normalize a required text field: missing becomes an empty string."""
    if value is None:
        return ""
    return str(value).strip()


def clean_list(values: Any) -> List[str]:
    """Normalize a list of strings, dropping blank entries."""
    if not isinstance(values, (list, tuple)):
        return []
    return [text for text in (clean_text(v) for v in values) if text]


def clean_flag(value: Any) -> bool:
    """Normalize a boolean flag; strings such as "false" or "0" are false."""
    if isinstance(value, str):
        return value.strip().lower() in ("true", "yes", "1", "on")
    return bool(value)


def clamp_skill_level(level: Any) -> int:
    """Coerce a skill level into [MIN_SKILL_LEVEL, MAX_SKILL_LEVEL]."""
    if isinstance(level, bool):
        return DEFAULT_SKILL_LEVEL
    try:
        value = int(level)
    except (TypeError, ValueError):
        return DEFAULT_SKILL_LEVEL
    return max(MIN_SKILL_LEVEL, min(MAX_SKILL_LEVEL, value))


def _to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


T = TypeVar("T", bound="_Record")


class _Record:
    """
    Mixin for dict conversion of entity dataclasses.

    Keys are accepted in snake_case or camelCase; FIELD_ALIASES lists
    camelCase spellings that the plain conversion would not produce
    (e.g. 'linkedIn', 'zipCode').
    """

    FIELD_ALIASES: Dict[str, str] = {}

    @classmethod
    def _external_name(cls, name: str) -> str:
        return cls.FIELD_ALIASES.get(name, _to_camel(name))

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
        data = data or {}
        kwargs = {}
        for f in fields(cls):
            external = cls._external_name(f.name)
            if external in data:
                kwargs[f.name] = data[external]
            elif f.name in data:
                kwargs[f.name] = data[f.name]
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                value = ""
            elif isinstance(value, list):
                value = list(value)
            result[self._external_name(f.name)] = value
        return result


@dataclass
class PersonalInfo(_Record):
    """Singleton header record. Only first/last name are expected to be set."""

    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    linkedin: Optional[str] = None
    website: Optional[str] = None
    summary: Optional[str] = None

    FIELD_ALIASES = {"linkedin": "linkedIn"}

    def __post_init__(self):
        self.first_name = clean_text(self.first_name)
        self.last_name = clean_text(self.last_name)
        for name in ("email", "phone", "address", "city", "state", "zip_code",
                     "linkedin", "website", "summary"):
            setattr(self, name, clean_optional(getattr(self, name)))

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass
class Experience(_Record):
    """
    One position held.

    When `current` is true the stored end_date is kept but ignored by every
    renderer.
    """

    id: str = ""
    company: str = ""
    position: str = ""
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    description: Optional[str] = None
    achievements: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.id = clean_text(self.id)
        self.company = clean_text(self.company)
        self.position = clean_text(self.position)
        self.location = clean_optional(self.location)
        self.start_date = clean_optional(self.start_date)
        self.end_date = clean_optional(self.end_date)
        self.current = clean_flag(self.current)
        self.description = clean_optional(self.description)
        self.achievements = clean_list(self.achievements)


@dataclass
class Education(_Record):
    """One degree or course of study. Same current/end_date rule as Experience."""

    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    current: bool = False
    gpa: Optional[str] = None
    # `field` is shadowed by the attribute above
    courses: List[str] = dataclasses.field(default_factory=list)

    def __post_init__(self):
        self.id = clean_text(self.id)
        self.institution = clean_text(self.institution)
        self.degree = clean_text(self.degree)
        self.field = clean_text(self.field)
        self.location = clean_optional(self.location)
        self.start_date = clean_optional(self.start_date)
        self.end_date = clean_optional(self.end_date)
        self.current = clean_flag(self.current)
        self.gpa = clean_optional(self.gpa)
        self.courses = clean_list(self.courses)


@dataclass
class Skill(_Record):
    """
    A named skill with a proficiency level in [1, 5].

    The category is free text used only for grouping; values outside
    SUGGESTED_SKILL_CATEGORIES group like any other.
    """

    id: str = ""
    name: str = ""
    level: int = DEFAULT_SKILL_LEVEL
    category: str = ""

    def __post_init__(self):
        self.id = clean_text(self.id)
        self.name = clean_text(self.name)
        self.level = clamp_skill_level(self.level)
        self.category = clean_text(self.category)


@dataclass
class Project(_Record):
    """A project. Start and end dates are independently optional."""

    id: str = ""
    title: str = ""
    description: Optional[str] = None
    technologies: List[str] = field(default_factory=list)
    link: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None

    def __post_init__(self):
        self.id = clean_text(self.id)
        self.title = clean_text(self.title)
        self.description = clean_optional(self.description)
        self.technologies = clean_list(self.technologies)
        self.link = clean_optional(self.link)
        self.start_date = clean_optional(self.start_date)
        self.end_date = clean_optional(self.end_date)


@dataclass
class Certification(_Record):
    """A certification or award. `date` is the issue date."""

    id: str = ""
    name: str = ""
    issuer: str = ""
    date: Optional[str] = None
    expiration: Optional[str] = None
    credential_id: Optional[str] = None
    url: Optional[str] = None

    def __post_init__(self):
        self.id = clean_text(self.id)
        self.name = clean_text(self.name)
        self.issuer = clean_text(self.issuer)
        self.date = clean_optional(self.date)
        self.expiration = clean_optional(self.expiration)
        self.credential_id = clean_optional(self.credential_id)
        self.url = clean_optional(self.url)


# Entity class and id prefix per collection section
SECTION_ENTITIES = {
    SectionKey.EXPERIENCE: (Experience, "exp"),
    SectionKey.EDUCATION: (Education, "edu"),
    SectionKey.SKILLS: (Skill, "skill"),
    SectionKey.PROJECTS: (Project, "proj"),
    SectionKey.CERTIFICATIONS: (Certification, "cert"),
}


def _collection_key(section) -> SectionKey:
    key = SectionKey(section)
    if key not in SECTION_ENTITIES:
        raise ValueError(f"'{key.value}' is not a collection section")
    return key


@dataclass
class ResumeSchema:
    """
    Structured representation of a complete resume.

    Composition of one PersonalInfo and ordered collections of each entity
    type. Collaborators edit a schema by replacing whole collections; the
    renderers receive a snapshot() and never write to it.
    """

    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    experience: List[Experience] = field(default_factory=list)
    education: List[Education] = field(default_factory=list)
    skills: List[Skill] = field(default_factory=list)
    projects: List[Project] = field(default_factory=list)
    certifications: List[Certification] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ResumeSchema":
        """
        Build a schema from the collaborator data contract.

        Accepts camelCase ("personalInfo", "startDate") or snake_case keys.
        Missing sections become empty; entries without an id get a
        positional one ("exp1", "exp2", ...), skipping ids already taken
        in that section.

        Args:
            data: Plain dict, e.g. loaded from YAML or JSON

        Returns:
            ResumeSchema instance
        """
        data = data or {}
        personal = data.get("personalInfo", data.get("personal_info"))
        schema = cls(personal_info=PersonalInfo.from_dict(personal))

        for key, (entity_cls, prefix) in SECTION_ENTITIES.items():
            raw_entries = data.get(key.value) or []
            if not isinstance(raw_entries, (list, tuple)):
                raw_entries = []
            entries = [entity_cls.from_dict(raw) for raw in raw_entries if isinstance(raw, dict)]
            taken = {entry.id for entry in entries if entry.id}
            for position, entry in enumerate(entries, start=1):
                if entry.id:
                    continue
                candidate = position
                while f"{prefix}{candidate}" in taken:
                    candidate += 1
                entry.id = f"{prefix}{candidate}"
                taken.add(entry.id)
            setattr(schema, key.value, entries)

        return schema

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase data contract (absent fields as "")."""
        result: Dict[str, Any] = {"personalInfo": self.personal_info.to_dict()}
        for key in SECTION_ENTITIES:
            result[key.value] = [entry.to_dict() for entry in getattr(self, key.value)]
        return result

    def snapshot(self) -> "ResumeSchema":
        """Independent deep copy for the duration of a render."""
        return copy.deepcopy(self)

    def entries(self, section) -> list:
        """Entries of a collection section, in stored order."""
        return getattr(self, _collection_key(section).value)

    def is_section_present(self, section) -> bool:
        """Whether a section has anything to render."""
        key = SectionKey(section)
        if key is SectionKey.SUMMARY:
            return self.personal_info.summary is not None
        return len(self.entries(key)) > 0

    # Whole-collection edits

    def replace_section(self, section, entries: Iterable) -> None:
        """
        Replace a collection wholesale.

        Args:
            section: Collection section (SectionKey or its value)
            entries: New entries; must be instances of the section's entity class

        Raises:
            ValueError: If the section is not a collection
            TypeError: If an entry has the wrong type
        """
        key = _collection_key(section)
        entity_cls = SECTION_ENTITIES[key][0]
        new_entries = list(entries)
        for entry in new_entries:
            if not isinstance(entry, entity_cls):
                raise TypeError(
                    f"{key.value} entries must be {entity_cls.__name__}, got {type(entry).__name__}"
                )
        setattr(self, key.value, new_entries)

    def find_entry(self, section, entry_id: str):
        """Entry with the given id, or None. Duplicate ids resolve to the last one."""
        for entry in reversed(self.entries(section)):
            if entry.id == entry_id:
                return entry
        return None

    def upsert_entry(self, section, entry) -> None:
        """Replace the last entry sharing entry.id, or append if there is none."""
        current = list(self.entries(section))
        for index in range(len(current) - 1, -1, -1):
            if current[index].id == entry.id:
                current[index] = entry
                break
        else:
            current.append(entry)
        self.replace_section(section, current)

    def remove_entry(self, section, entry_id: str) -> None:
        """Remove every entry with the given id."""
        remaining = [entry for entry in self.entries(section) if entry.id != entry_id]
        self.replace_section(section, remaining)
