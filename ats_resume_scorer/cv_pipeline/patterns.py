"""
Pattern tables used by structured extraction.
Each table is plain constant data so extraction rules can be tested one at a time.
"""

import re
from typing import Dict, List, Tuple

# Canonical section name -> header keywords (case-insensitive substring match).
# Order matters: the first section whose keyword occurs in a header line wins.
SECTION_HEADERS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("contact", ("contact information", "contact details", "contact")),
    ("summary", ("summary", "objective", "profile", "about me")),
    ("experience", ("experience", "employment", "work history")),
    ("education", ("education", "academic background", "academics")),
    ("skills", ("skills", "competencies", "expertise")),
    ("certifications", ("certifications", "certification", "certificates", "licenses")),
    ("projects", ("projects", "portfolio")),
    ("awards", ("awards", "achievements", "honors", "recognition")),
    ("publications", ("publications",)),
)

# Header lines are short labels, not prose
MAX_HEADER_LENGTH = 50
MAX_HEADER_WORDS = 6

# Ideal section order for structure scoring
IDEAL_SECTION_ORDER: Tuple[str, ...] = (
    "contact",
    "summary",
    "experience",
    "education",
    "skills",
    "certifications",
    "projects",
)

REQUIRED_SECTIONS: Tuple[str, ...] = ("summary", "experience", "education", "skills")
OPTIONAL_SECTIONS: Tuple[str, ...] = ("projects", "certifications")

BULLET_MARKERS: Tuple[str, ...] = ("•", "-", "*", "▪", "◦", "‣", "●")

# Skill vocabulary grouped by area (extensible: add a new group or term)
SKILL_VOCABULARY: Dict[str, List[str]] = {
    "programming": [
        "JavaScript", "TypeScript", "Python", "Java", "Go", "C++", "C#", "Ruby",
        "PHP", "Swift", "Kotlin", "Scala", "MATLAB", "SQL",
    ],
    "frontend": [
        "React", "Vue", "Angular", "HTML", "HTML5", "CSS", "CSS3", "SCSS", "Sass",
        "Bootstrap", "Tailwind", "jQuery", "Webpack", "Vite",
    ],
    "backend": [
        "Node.js", "Express", "Django", "Flask", "Spring Boot", "Laravel",
        "Ruby on Rails", "ASP.NET", "FastAPI", "GraphQL", "REST API",
    ],
    "databases": [
        "MongoDB", "PostgreSQL", "MySQL", "Redis", "Elasticsearch", "Cassandra",
        "Oracle", "SQLite", "DynamoDB",
    ],
    "cloud": [
        "AWS", "Google Cloud", "Azure", "Docker", "Kubernetes", "Terraform",
        "Jenkins", "Git", "GitLab", "GitHub Actions", "CI/CD",
    ],
    "data_science": [
        "TensorFlow", "PyTorch", "Pandas", "NumPy", "Scikit-learn", "Matplotlib",
        "Tableau", "Power BI", "Jupyter", "Excel", "Machine Learning",
    ],
    "marketing": [
        "Google Ads", "Facebook Ads", "SEO", "SEM", "Google Analytics", "HubSpot",
        "Salesforce", "Adobe Creative Suite",
    ],
    "project_management": [
        "Agile", "Scrum", "Kanban", "JIRA", "Confluence", "Asana", "Trello", "MS Project",
    ],
    "soft_skills": [
        "Leadership", "Communication", "Teamwork", "Problem Solving",
        "Project Management", "Time Management", "Mentoring", "Collaboration",
    ],
}

# Words that mark a line in the experience section as a new job entry
JOB_TITLE_KEYWORDS: Tuple[str, ...] = (
    "engineer", "manager", "developer", "analyst", "specialist", "coordinator",
    "director", "lead", "designer", "consultant", "architect", "administrator",
    "scientist", "intern", "officer", "associate", "assistant", "president",
)

ACTION_VERBS: Tuple[str, ...] = (
    "achieved", "improved", "increased", "developed", "led", "managed", "created",
    "implemented", "designed", "optimized", "delivered", "built", "established",
    "coordinated", "analyzed", "executed", "streamlined", "enhanced", "launched",
    "architected", "mentored", "reduced",
)

PASSIVE_PHRASES: Tuple[str, ...] = (
    "responsible for",
    "duties included",
    "tasked with",
    "worked on",
    "helped with",
)

# Quantified-achievement patterns (percentages, currency, counts, change phrases)
METRIC_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\d+(?:\.\d+)?%"),
    re.compile(r"\$\d[\d,]*(?:\.\d+)?(?:\s?(?:[KkMmBb]|million|billion|thousand)\b)?\+?"),
    re.compile(r"\b\d+(?:\.\d+)?[KkMmBb]\b\+?"),
    re.compile(r"\b\d[\d,]*\+"),
    re.compile(
        r"\b(?:increased|reduced|improved|decreased|grew|cut|boosted)\s+(?:[\w$-]+\s+){0,4}?by\s+\$?\d[\d,]*(?:\.\d+)?(?:[KkMmBb]\b)?%?\+?",
        re.IGNORECASE,
    ),
    re.compile(r"\b\d+\s*(?:years?|months?)\b", re.IGNORECASE),
)

ACHIEVEMENT_PATTERNS: Tuple[re.Pattern, ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"\bwon\s+[^.!?\n]+",
        r"\bawarded\s+[^.!?\n]+",
        r"\brecognized\s+[^.!?\n]+",
        r"\bpublished\s+[^.!?\n]+",
        r"\bled\s+[^.!?\n]+",
        r"\bincreased\s+[^.!?\n]+?by\s+\d+%?",
        r"\bimproved\s+[^.!?\n]+?by\s+\d+%?",
        r"\breduced\s+[^.!?\n]+?by\s+\d+%?",
    )
)
MAX_ACHIEVEMENTS = 10

# Contact patterns (first match wins)
EMAIL_PATTERN = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
PHONE_PATTERN = re.compile(r"(?:\+\d{1,3}[-.\s]?)?\(?\b\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b")
LOCATION_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"\b[A-Z][a-zA-Z]+(?: [A-Z][a-zA-Z]+)*, ?[A-Z]{2}\b"),
    re.compile(r"\b\d{5}(?:-\d{4})?\b"),
)
LINKEDIN_PATTERN = re.compile(r"linkedin\.com/in/[A-Za-z0-9_-]+", re.IGNORECASE)
NAME_PATTERN = re.compile(r"^[A-Z][a-zA-Z'.-]+(?: [A-Z][a-zA-Z'.-]+){1,3}$")
NAME_SEARCH_LINES = 10

# Education and dates
DEGREE_PATTERN = re.compile(
    r"\b(?:bachelor|master|ph\.?d|doctorate|associate|diploma|mba|b\.?sc?|m\.?sc?|b\.?a|m\.?a)\b",
    re.IGNORECASE,
)
YEAR_PATTERN = re.compile(r"\b(?:19|20)\d{2}\b")
GPA_PATTERN = re.compile(r"\bgpa:?\s*(\d\.\d{1,2})", re.IGNORECASE)
_MONTH = r"\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|sept|oct|nov|dec)[a-z]*\.?"
DATE_RANGE_PATTERN = re.compile(
    rf"(?:{_MONTH}\s+)?(?:19|20)\d{{2}}\s*(?:-|–|—|to)\s*(?:(?:{_MONTH}\s+)?(?:19|20)\d{{2}}|present|current|now)"
    rf"|(?:{_MONTH}\s+)?(?:19|20)\d{{2}}",
    re.IGNORECASE,
)

# Keyword context words that earn the context bonus
KEYWORD_CONTEXT_WORDS: Tuple[str, ...] = ("experience", "skill", "proficient")
KEYWORD_CONTEXT_WINDOW = 30

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
MIN_SENTENCE_CHARS = 10
