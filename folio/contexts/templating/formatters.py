"""
Section Formatters

Pure functions that turn schema sections into presentation-ready facts.
Every template variant and the document assembler read the same facts from
here, so dates, grouping, and omission rules cannot drift between the
preview and the exported document.

None of these functions raise on malformed input: a bad date or an empty
field degrades to an empty string or an omitted line.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

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

# Fixed convention, independent of the process locale
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

PRESENT_MARKER = "Present"
DATE_RANGE_SEPARATOR = " - "
CONTACT_SEPARATOR = " | "
LOCALITY_SEPARATOR = ", "
LIST_SEPARATOR = ", "

# YYYY-MM, optionally followed by -DD and an ISO time part
_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})(?:-(\d{1,2}))?(?:[T ].*)?$")

# Labels shared by both renderers
GPA_LABEL = "GPA"
CREDENTIAL_LABEL = "Credential ID"
EXPIRES_LABEL = "Expires"
LINK_LABEL = "Link"
COURSES_LABEL = "Relevant Coursework"
TECHNOLOGIES_LABEL = "Technologies"


@dataclass(frozen=True)
class HeaderFacts:
    """
    Name and contact lines for the top of the document.

    Each *_items tuple holds only the fields that are present, in display
    order. The *_line properties are the " | "-joined forms used by the
    paginated output; an all-absent line is "" and must be omitted.
    """

    full_name: str
    contact_items: Tuple[str, ...] = ()
    location_items: Tuple[str, ...] = ()
    web_items: Tuple[str, ...] = ()

    @property
    def contact_line(self) -> str:
        return CONTACT_SEPARATOR.join(self.contact_items)

    @property
    def location_line(self) -> str:
        return CONTACT_SEPARATOR.join(self.location_items)

    @property
    def web_line(self) -> str:
        return CONTACT_SEPARATOR.join(self.web_items)

    @property
    def lines(self) -> Tuple[str, ...]:
        """Non-empty contact lines in display order."""
        return tuple(
            line for line in (self.contact_line, self.location_line, self.web_line) if line
        )


@dataclass(frozen=True)
class EntryFacts:
    """
    Presentation facts for one entity (or one skill category).

    Attributes:
        entry_id: Id of the source entity (category name for skill groups)
        title: Main heading (position, degree, project title, ...)
        subtitle: Secondary line (employer/institution with location, issuer)
        date_range: Formatted date or date range, "" if none
        description: Free-text description, "" if none
        bullets: Achievement strings, rendered as a bulleted list
        details: (label, value) lines such as ("GPA", "3.8")
        items_label: Heading for the items list ("Technologies", ...)
        items: Discrete list values (courses, technologies, skill names)
    """

    entry_id: str
    title: str
    subtitle: str = ""
    date_range: str = ""
    description: str = ""
    bullets: Tuple[str, ...] = ()
    details: Tuple[Tuple[str, str], ...] = ()
    items_label: str = ""
    items: Tuple[str, ...] = ()

    @property
    def items_text(self) -> str:
        """Comma-joined items, as used by the paginated output."""
        return LIST_SEPARATOR.join(self.items)


@dataclass(frozen=True)
class SectionFacts:
    """
    One section that is present in the document.

    The summary section carries `text` and no entries; every other section
    carries at least one entry.
    """

    key: SectionKey
    title: str
    entries: Tuple[EntryFacts, ...] = ()
    text: str = ""


@dataclass(frozen=True)
class DocumentFacts:
    """Everything a renderer needs, in rendering order."""

    header: HeaderFacts
    sections: Tuple[SectionFacts, ...]

    @property
    def section_keys(self) -> Tuple[SectionKey, ...]:
        return tuple(section.key for section in self.sections)


@dataclass(frozen=True)
class SkillGroup:
    """Skills sharing one category, in insertion order."""

    category: str
    skills: Tuple[Skill, ...]


# Dates


def format_month_year(value: Optional[str]) -> str:
    """
    Format a stored date as "<Mon> <YYYY>".

    Args:
        value: "YYYY-MM" or "YYYY-MM-DD" (an ISO time suffix is ignored)

    Returns:
        e.g. "Jan 2020"; "" for missing or malformed input

    Examples:
        >>> format_month_year("2020-01")
        'Jan 2020'
        >>> format_month_year("2020-13")
        ''
    """
    if not value or not isinstance(value, str):
        return ""

    match = _DATE_PATTERN.match(value.strip())
    if match is None:
        return ""

    month = int(match.group(2))
    if not 1 <= month <= 12:
        return ""

    day = match.group(3)
    if day is not None and not 1 <= int(day) <= 31:
        return ""

    return f"{MONTH_ABBREVIATIONS[month - 1]} {match.group(1)}"


def format_date_range(
    start: Optional[str], end: Optional[str] = None, current: bool = False
) -> str:
    """
    Format a start/end pair as "<start> - <end>".

    `current` wins over any stored end value, malformed or not. Parts that
    format to "" are dropped together with their separator.

    Examples:
        >>> format_date_range("2020-01", "2019-05", current=True)
        'Jan 2020 - Present'
        >>> format_date_range("2020-01", None)
        'Jan 2020'
        >>> format_date_range(None, "2019-06")
        'Jun 2019'
    """
    end_text = PRESENT_MARKER if current else format_month_year(end)
    return join_present([format_month_year(start), end_text], DATE_RANGE_SEPARATOR)


# Joins


def join_present(values: Iterable[Optional[str]], separator: str) -> str:
    """Join only the non-empty values. All-empty input gives ""."""
    return separator.join(value for value in values if value)


def format_locality(city: Optional[str], state: Optional[str], zip_code: Optional[str]) -> str:
    """
    "City, ST 12345". The zip code only shows alongside a city or state.

    Examples:
        >>> format_locality("Oakland", "CA", None)
        'Oakland, CA'
        >>> format_locality(None, None, "94105")
        ''
    """
    locality = join_present([city, state], LOCALITY_SEPARATOR)
    if locality and zip_code:
        locality = f"{locality} {zip_code}"
    return locality


def header_facts(personal_info: PersonalInfo) -> HeaderFacts:
    """Name plus contact, location, and web items that are present."""
    location_items = [
        personal_info.address,
        format_locality(personal_info.city, personal_info.state, personal_info.zip_code),
    ]
    return HeaderFacts(
        full_name=personal_info.full_name,
        contact_items=_present(personal_info.email, personal_info.phone),
        location_items=_present(*location_items),
        web_items=_present(personal_info.linkedin, personal_info.website),
    )


def _present(*values: Optional[str]) -> Tuple[str, ...]:
    return tuple(value for value in values if value)


# Skills


def group_skills(skills: Sequence[Skill]) -> List[SkillGroup]:
    """
    Partition skills by category.

    Categories appear in first-seen order and skills keep their insertion
    order within a category; nothing is sorted. Any string, including ones
    outside the suggested list, is a valid category.
    """
    grouped = {}
    for skill in skills:
        grouped.setdefault(skill.category, []).append(skill)
    return [SkillGroup(category, tuple(members)) for category, members in grouped.items()]


# Entities


def experience_facts(experience: Experience) -> EntryFacts:
    return EntryFacts(
        entry_id=experience.id,
        title=experience.position,
        subtitle=join_present([experience.company, experience.location], LOCALITY_SEPARATOR),
        date_range=format_date_range(
            experience.start_date, experience.end_date, experience.current
        ),
        description=experience.description or "",
        bullets=tuple(experience.achievements),
    )


def education_facts(education: Education) -> EntryFacts:
    """Degree and field are joined as "<degree> in <field>" when both exist."""
    details = ((GPA_LABEL, education.gpa),) if education.gpa else ()
    return EntryFacts(
        entry_id=education.id,
        title=join_present([education.degree, education.field], " in "),
        subtitle=join_present([education.institution, education.location], LOCALITY_SEPARATOR),
        date_range=format_date_range(education.start_date, education.end_date, education.current),
        details=details,
        items_label=COURSES_LABEL if education.courses else "",
        items=tuple(education.courses),
    )


def project_facts(project: Project) -> EntryFacts:
    details = ((LINK_LABEL, project.link),) if project.link else ()
    return EntryFacts(
        entry_id=project.id,
        title=project.title,
        date_range=format_date_range(project.start_date, project.end_date),
        description=project.description or "",
        details=details,
        items_label=TECHNOLOGIES_LABEL if project.technologies else "",
        items=tuple(project.technologies),
    )


def certification_facts(certification: Certification) -> EntryFacts:
    """The issue date fills the date slot; expiration is a labelled detail."""
    expiration = format_month_year(certification.expiration)
    details = [
        (CREDENTIAL_LABEL, certification.credential_id),
        (EXPIRES_LABEL, expiration),
        (LINK_LABEL, certification.url),
    ]
    return EntryFacts(
        entry_id=certification.id,
        title=certification.name,
        subtitle=certification.issuer,
        date_range=format_month_year(certification.date),
        details=tuple((label, value) for label, value in details if value),
    )


def skill_group_facts(group: SkillGroup) -> EntryFacts:
    return EntryFacts(
        entry_id=group.category,
        title=group.category,
        items=tuple(skill.name for skill in group.skills),
    )


# Document


def section_facts(schema: ResumeSchema, key: SectionKey) -> Optional[SectionFacts]:
    """
    Facts for one section, or None when the section must not render.

    A collection section renders iff it has entries; the summary renders
    iff it is a non-blank string.
    """
    title = SECTION_TITLES[key]

    if key is SectionKey.SUMMARY:
        summary = schema.personal_info.summary
        return SectionFacts(key=key, title=title, text=summary) if summary else None

    if key is SectionKey.SKILLS:
        entries = [skill_group_facts(group) for group in group_skills(schema.skills)]
    else:
        formatter = _ENTRY_FORMATTERS[key]
        entries = [formatter(entry) for entry in schema.entries(key)]

    if not entries:
        return None
    return SectionFacts(key=key, title=title, entries=tuple(entries))


def document_facts(schema: ResumeSchema) -> DocumentFacts:
    """
    Derive all presentation facts for a schema, in rendering order.

    This is the single entry point both renderers use.
    """
    sections = []
    for key in SECTION_ORDER:
        facts = section_facts(schema, key)
        if facts is not None:
            sections.append(facts)
    return DocumentFacts(header=header_facts(schema.personal_info), sections=tuple(sections))


_ENTRY_FORMATTERS = {
    SectionKey.EXPERIENCE: experience_facts,
    SectionKey.EDUCATION: education_facts,
    SectionKey.PROJECTS: project_facts,
    SectionKey.CERTIFICATIONS: certification_facts,
}
