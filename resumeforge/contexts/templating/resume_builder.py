"""
Template-based resume assembly.

Turns structured form data (personal details, skills, experience, education,
projects, certifications) into plain resume text through a Jinja2 template.
The section headers it writes are ones the intake parser recognizes, so the
output flows straight into scoring and rendering. This is the local path used
when AI-based resume generation is unavailable.
"""

import os
from dataclasses import dataclass, field, fields
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError
from omegaconf import OmegaConf

from resumeforge.contexts.intake.section_patterns import is_section_header
from resumeforge.contexts.templating.exceptions import FormDataError, TemplateRenderError
from resumeforge.contexts.templating.logger import _log_debug, _log_info

load_dotenv()

TEMPLATES_PATH = Path(
    os.getenv("RESUME_TEMPLATES_PATH", str(Path(__file__).parent / "templates"))
)
RESUME_TEMPLATE_NAME = "resume.txt.jinja"

BULLET_MARKER = "•"

REQUIRED_FIELDS = ("name", "email")

SCALAR_FIELDS = (
    "name",
    "title",
    "email",
    "phone",
    "location",
    "linkedin",
    "github",
    "portfolio",
    "summary",
)


def _text(value: Any) -> str:
    """Form values may arrive as None, numbers (YAML years) or padded strings."""
    if value is None:
        return ""
    return str(value).strip()


def _join_present(parts, separator: str) -> str:
    return separator.join(part for part in parts if part)


def _date_range(start: str, end: str) -> str:
    if start and end:
        return f"{start} - {end}"
    return start or end


# =============================================================================
# FORM ENTRIES
# =============================================================================


@dataclass(frozen=True)
class ExperienceEntry:
    role: str = ""
    company: str = ""
    start_date: str = ""
    end_date: str = ""
    bullets: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        # Entries without a role are placeholders left in the form
        return not self.role

    @property
    def heading(self) -> str:
        return _join_present((self.role, self.company), " | ")

    @property
    def date_range(self) -> str:
        return _date_range(self.start_date, self.end_date)


@dataclass(frozen=True)
class EducationEntry:
    degree: str = ""
    institute: str = ""
    start_date: str = ""
    end_date: str = ""
    gpa: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.degree

    @property
    def heading(self) -> str:
        # A lone "GPA: 3.8" line would parse as a section header
        if self.gpa:
            return f"{self.degree} (GPA: {self.gpa})"
        return self.degree

    @property
    def detail_line(self) -> str:
        return _join_present((self.institute, _date_range(self.start_date, self.end_date)), " | ")


@dataclass(frozen=True)
class ProjectEntry:
    title: str = ""
    description: str = ""
    tech_stack: str = ""
    link: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.title


@dataclass(frozen=True)
class CertificationEntry:
    name: str = ""
    issuer: str = ""
    date: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.name

    @property
    def display_line(self) -> str:
        return _join_present((self.name, self.issuer, self.date), " | ")


# Form keys use camelCase; map them onto entry field names
_ENTRY_KEY_ALIASES = {
    "startDate": "start_date",
    "endDate": "end_date",
    "techStack": "tech_stack",
}


def _entry_from_dict(entry_class, data: Any, field_name: str):
    if not isinstance(data, Mapping):
        raise FormDataError(f"Expected a mapping, got {type(data).__name__}", field_name)

    known = {f.name for f in fields(entry_class)}
    values: Dict[str, Any] = {}
    for key, value in data.items():
        name = _ENTRY_KEY_ALIASES.get(key, key)
        if name not in known:
            _log_debug(f"Ignoring unknown key '{key}' in {field_name}")
            continue
        if name == "bullets":
            bullets = _as_list(value, f"{field_name}.bullets")
            values[name] = tuple(_text(bullet) for bullet in bullets if _text(bullet))
        else:
            values[name] = _text(value)
    return entry_class(**values)


def _as_list(value: Any, field_name: str) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise FormDataError(f"Expected a list, got {type(value).__name__}", field_name)


def _entries(entry_class, value: Any, field_name: str) -> Tuple:
    return tuple(
        _entry_from_dict(entry_class, item, f"{field_name}[{index}]")
        for index, item in enumerate(_as_list(value, field_name))
    )


# =============================================================================
# FORM DATA
# =============================================================================


@dataclass(frozen=True)
class ResumeFormData:
    """
    Everything a user enters to build a resume from scratch.

    Entry lists may contain empty placeholder entries (as a form with blank
    rows would); those are dropped when the resume text is built.
    """

    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""
    portfolio: str = ""
    summary: str = ""
    skills: Tuple[str, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = field(default_factory=tuple)
    education: Tuple[EducationEntry, ...] = field(default_factory=tuple)
    projects: Tuple[ProjectEntry, ...] = field(default_factory=tuple)
    certifications: Tuple[CertificationEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResumeFormData":
        """
        Build form data from a plain mapping (camelCase entry keys accepted).

        skills may be a list or a comma-separated string.

        Raises:
            FormDataError: data is not a mapping, or a list field is malformed
        """
        if not isinstance(data, Mapping):
            raise FormDataError(f"Form data must be a mapping, got {type(data).__name__}")

        skills = data.get("skills")
        if isinstance(skills, str):
            skills = skills.split(",")
        skills = tuple(_text(skill) for skill in _as_list(skills, "skills") if _text(skill))

        return cls(
            **{name: _text(data.get(name)) for name in SCALAR_FIELDS},
            skills=skills,
            experience=_entries(ExperienceEntry, data.get("experience"), "experience"),
            education=_entries(EducationEntry, data.get("education"), "education"),
            projects=_entries(ProjectEntry, data.get("projects"), "projects"),
            certifications=_entries(
                CertificationEntry, data.get("certifications"), "certifications"
            ),
        )

    @property
    def contact_line(self) -> str:
        return _join_present((self.email, self.phone, self.location), " | ")

    @property
    def missing_required_fields(self) -> Tuple[str, ...]:
        return tuple(name for name in REQUIRED_FIELDS if not getattr(self, name))

    def completion_status(self) -> Dict[str, bool]:
        """Which parts of the form have been filled in."""
        return {
            "Personal Info": bool(self.name),
            "Skills": bool(self.skills),
            "Experience": any(not entry.is_empty for entry in self.experience),
            "Education": any(not entry.is_empty for entry in self.education),
        }


def load_form_data(path: Path) -> ResumeFormData:
    """
    Load form data from a YAML (or JSON) file.

    Raises:
        FormDataError: File missing or not a mapping
    """
    path = Path(path)
    if not path.exists():
        raise FormDataError("Form data file not found", source_path=path)

    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if not isinstance(data, dict):
        raise FormDataError("Form data file must contain a mapping", source_path=path)

    try:
        return ResumeFormData.from_dict(data)
    except FormDataError as e:
        raise FormDataError(e.message, e.field_name, path) from e


# =============================================================================
# RENDERING
# =============================================================================


def header_safe(value: Any) -> str:
    """
    Bullet any line of free text that the intake parser would read as a header.

    Section detection matches known names anywhere in a line, so a summary
    such as "Experienced ..." or a project called "Skills Tracker" would
    otherwise open a section of its own. Bulleted lines are always body text.

    Example:
        >>> header_safe("Skills Tracker")
        '• Skills Tracker'
        >>> header_safe("Billing Dashboard")
        'Billing Dashboard'
    """
    lines = (line.strip() for line in _text(value).splitlines())
    return "\n".join(
        f"{BULLET_MARKER} {line}" if is_section_header(line) else line for line in lines if line
    )


@lru_cache(maxsize=8)
def _get_environment(templates_path: Path) -> Environment:
    environment = Environment(
        loader=FileSystemLoader(str(templates_path)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    environment.filters["header_safe"] = header_safe
    return environment


def build_resume_text(form: ResumeFormData, templates_path: Path = None) -> str:
    """
    Render form data into plain resume text.

    Output layout: name, title, "email | phone | location", profile links,
    then PROFESSIONAL SUMMARY, TECHNICAL SKILLS, PROFESSIONAL EXPERIENCE,
    EDUCATION, PROJECTS and CERTIFICATIONS, each only when it has content.

    Args:
        form: Form data (name and email are required)
        templates_path: Directory holding resume.txt.jinja (defaults to TEMPLATES_PATH)

    Raises:
        FormDataError: A required field is empty
        TemplateRenderError: The template is missing or fails to render
    """
    missing = form.missing_required_fields
    if missing:
        raise FormDataError("Required field is empty", field_name=", ".join(missing))

    templates_path = Path(templates_path) if templates_path else TEMPLATES_PATH
    try:
        template = _get_environment(templates_path).get_template(RESUME_TEMPLATE_NAME)
        text = template.render(
            form=form,
            experience=[entry for entry in form.experience if not entry.is_empty],
            education=[entry for entry in form.education if not entry.is_empty],
            projects=[entry for entry in form.projects if not entry.is_empty],
            certifications=[entry for entry in form.certifications if not entry.is_empty],
            bullet_marker=BULLET_MARKER,
        )
    except TemplateError as e:
        raise TemplateRenderError(
            "Failed to render resume template",
            template_path=templates_path / RESUME_TEMPLATE_NAME,
            original_error=e,
        ) from e

    text = text.strip() + "\n"
    _log_info(f"Built resume for {form.name} ({len(text.splitlines())} lines)")
    return text
