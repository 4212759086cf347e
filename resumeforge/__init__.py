"""
resumeforge - ATS scoring and paginated rendering of free-form resume text

Turns an unstructured block of resume text into a typed document model, scores
it against a job description with deterministic heuristics, and lays it out
across fixed-size styled pages ready for PDF/DOCX/plain-text output.

Architecture:
- Intake Context: Line classification into header content and named sections
- Scoring Context: Keyword, readability, formatting and completeness scoring
- Templating Context: Template-based resume text assembly from form data
- Rendering Context: Themes, page layout and document serialization
"""

__version__ = "0.1.0"
