"""
Templating Context

Responsibilities:
- Holds structured resume form data (personal details and entry lists)
- Renders form data into plain resume text through a Jinja2 template

Owns: Form data model, resume text template
Never: Parses, scores or lays out resume text
"""

from resumeforge.contexts.templating.resume_builder import (
    ResumeFormData,
    build_resume_text,
    load_form_data,
)

__all__ = ["ResumeFormData", "build_resume_text", "load_form_data"]
