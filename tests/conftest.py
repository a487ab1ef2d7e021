"""Shared fixtures: sample resume texts and small in-memory keyword corpora."""

from datetime import datetime, timezone

import pytest

from ats_resume_scorer.keywords.corpus import InMemoryKeywordRepository, KeywordCorpus
from ats_resume_scorer.schemas.keyword_set import KeywordEntry, KeywordSet

STRONG_RESUME = """John Smith
Senior Software Engineer
john.smith@email.com | (555) 123-4567 | San Francisco, CA | linkedin.com/in/johnsmith

PROFESSIONAL SUMMARY
Results-driven software engineer with 8+ years of experience building scalable web applications with Python, Node.js and AWS. Proven track record of leading teams and improving system performance by 60%.

PROFESSIONAL EXPERIENCE
Senior Software Engineer | TechCorp Inc. | 2020-Present
• Architected microservices platform serving 500,000+ daily active users
• Improved application performance by 60% through Redis caching and SQL optimization
• Led a team of 8 developers and ran weekly code review sessions
• Implemented CI/CD pipelines with Docker, reducing deployment time by 75%
Software Engineer | StartupXYZ | 2016-2020
• Built REST API services in Node.js and Express.js backed by MongoDB
• Developed React dashboard increasing user engagement by 40%
• Delivered system design documents for 12 services in an Agile Scrum team

EDUCATION
Bachelor of Science in Computer Science | UC Berkeley | 2016
GPA: 3.7/4.0

TECHNICAL SKILLS
Python, JavaScript, Node.js, Express, SQL, MongoDB, Docker, AWS, React, Git

CERTIFICATIONS
AWS Certified Solutions Architect (2023)

PROJECTS
Real-Time Analytics Dashboard
• Processed 1M+ events daily with Python and Redis"""

END_TO_END_RESUME = """Jane Doe
jane.doe@example.com | (555) 987-6543

SKILLS
JavaScript, Python, AWS

EXPERIENCE
Software Engineer | Acme Corp | 2020-Present
• Increased revenue by 20% by rebuilding the checkout flow

EDUCATION
Bachelor of Science, 2020"""

FIXED_TIME = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)


def make_keyword_set(industry, level, *entries):
    return KeywordSet(
        industry=industry,
        level=level,
        keywords=tuple(
            KeywordEntry(keyword=k, category=c, relevance_weight=w) for k, c, w in entries
        ),
    )


@pytest.fixture
def strong_resume() -> str:
    return STRONG_RESUME


@pytest.fixture
def end_to_end_resume() -> str:
    return END_TO_END_RESUME


@pytest.fixture
def fixed_time() -> datetime:
    return FIXED_TIME


@pytest.fixture
def general_set() -> KeywordSet:
    return make_keyword_set(
        "general",
        "general",
        ("Communication", "soft", 5),
        ("Leadership", "soft", 4),
        ("Problem Solving", "soft", 5),
    )


@pytest.fixture
def small_corpus(general_set) -> KeywordCorpus:
    tech_mid = make_keyword_set(
        "technology",
        "mid",
        ("Python", "technical", 5),
        ("AWS", "technical", 5),
        ("SQL", "technical", 4),
        ("Code Review", "soft", 3),
        ("Agile", "methodology", 3),
    )
    finance_general = make_keyword_set(
        "finance",
        "general",
        ("Financial Modeling", "industry-specific", 5),
        ("Excel", "technical", 4),
    )
    return KeywordCorpus(InMemoryKeywordRepository([tech_mid, finance_general, general_set]))
