from __future__ import annotations

import copy
from typing import Any, Iterator

from studentos.listings.base import ListingRecord, ListingRepository

SEED_LISTINGS: tuple[dict[str, Any], ...] = (
    {
        "listing_id": "coca-cola-scholars-2025",
        "title": "Coca-Cola Scholars Program",
        "provider": "The Coca-Cola Foundation",
        "amount": 20000,
        "deadline": "2025-10-31",
        "description": "Merit-based scholarship recognizing academic excellence, leadership, and service commitment.",
        "requirements": [
            "High school senior in good standing",
            "Minimum 3.0 GPA",
            "Demonstrated leadership",
            "Community service involvement",
        ],
        "application_url": "https://www.coca-colascholarsfoundation.org/apply/",
        "eligibility": {"gpa_min": 3.0, "grade_levels": ["12"], "demographics": ["any"]},
        "competitiveness": "extremely_high",
        "estimated_applicants": 95000,
        "tags": ["merit", "leadership", "service", "national"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "gates-scholarship-2025",
        "title": "Gates Scholarship",
        "provider": "Gates Foundation",
        "amount": 50000,
        "deadline": "2025-09-15",
        "description": "Full-ride scholarship for exceptional minority students with significant financial need.",
        "requirements": [
            "High school senior",
            "Pell Grant eligible",
            "Minimum 3.3 GPA",
            "Demonstrated leadership ability",
        ],
        "application_url": "https://www.thegatesscholarship.org/scholarship",
        "eligibility": {
            "gpa_min": 3.3,
            "grade_levels": ["12"],
            "demographics": ["African American", "Native American", "Asian Pacific Islander", "Hispanic"],
            "income_max": 60000,
        },
        "competitiveness": "extremely_high",
        "estimated_applicants": 34000,
        "tags": ["need-based", "merit", "minority", "full-ride"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "dell-scholars-2025",
        "title": "Dell Scholars Program",
        "provider": "Michael & Susan Dell Foundation",
        "amount": 20000,
        "deadline": "2025-12-01",
        "description": "Supporting students who demonstrate financial need and have overcome significant obstacles.",
        "requirements": [
            "High school senior participating in approved college readiness program",
            "Minimum 2.4 GPA",
            "Demonstrate financial need",
        ],
        "application_url": "https://www.dellscholars.org/scholarship/",
        "eligibility": {
            "gpa_min": 2.4,
            "grade_levels": ["12"],
            "demographics": ["any"],
            "income_max": 50000,
        },
        "competitiveness": "high",
        "estimated_applicants": 15000,
        "tags": ["need-based", "first-generation", "resilience"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "jack-kent-cooke-2025",
        "title": "Jack Kent Cooke College Scholarship",
        "provider": "Jack Kent Cooke Foundation",
        "amount": 55000,
        "deadline": "2025-11-15",
        "description": "Nation's largest private scholarship for high-achieving students with financial need.",
        "requirements": [
            "High school senior",
            "Family income up to $95,000",
            "Minimum 3.5 GPA",
        ],
        "application_url": "https://www.jkcf.org/our-scholarships/college-scholarship-program/",
        "eligibility": {"gpa_min": 3.5, "grade_levels": ["12"], "income_max": 95000},
        "competitiveness": "extremely_high",
        "estimated_applicants": 5000,
        "tags": ["need-based", "merit", "academic-excellence"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "google-lime-scholarship-2025",
        "title": "Google Lime Scholarship",
        "provider": "Google & Lime Connect",
        "amount": 10000,
        "deadline": "2025-12-04",
        "description": "Supporting students with disabilities pursuing computer science degrees.",
        "requirements": [
            "Student with visible or invisible disability",
            "Currently enrolled in computer science program",
        ],
        "application_url": "https://www.limeconnect.com/programs/page/google-lime-scholarship",
        "eligibility": {
            "majors": ["Computer Science", "Software Engineering", "Information Technology"],
            "demographics": ["Students with disabilities"],
        },
        "competitiveness": "medium",
        "estimated_applicants": 2000,
        "tags": ["STEM", "disability", "diversity", "technology"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "society-women-engineers-2025",
        "title": "Society of Women Engineers Scholarship",
        "provider": "Society of Women Engineers",
        "amount": 15000,
        "deadline": "2026-02-15",
        "description": "Supporting women pursuing STEM degrees with various scholarship opportunities.",
        "requirements": ["Female student", "Minimum 3.0 GPA", "Demonstrated commitment to engineering"],
        "application_url": "https://swe.org/scholarships/",
        "eligibility": {
            "gpa_min": 3.0,
            "demographics": ["Female"],
            "majors": ["Engineering", "Computer Science", "Mathematics", "Physics"],
        },
        "competitiveness": "medium",
        "estimated_applicants": 4000,
        "tags": ["STEM", "women", "engineering"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "horatio-alger-scholarship-2025",
        "title": "Horatio Alger National Scholarship",
        "provider": "Horatio Alger Association",
        "amount": 25000,
        "deadline": "2025-10-25",
        "description": "Supporting students who have overcome significant adversity and demonstrate perseverance.",
        "requirements": [
            "High school senior in the United States",
            "Family income below $55,000",
            "Minimum 2.0 GPA",
        ],
        "application_url": "https://scholars.horatioalger.org/scholarships/",
        "eligibility": {
            "gpa_min": 2.0,
            "grade_levels": ["12"],
            "income_max": 55000,
            "demographics": ["any"],
        },
        "competitiveness": "high",
        "estimated_applicants": 10000,
        "tags": ["need-based", "adversity", "national", "resilience"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "amazon-future-engineer-2025",
        "title": "Amazon Future Engineer Scholarship",
        "provider": "Amazon",
        "amount": 10000,
        "deadline": "2026-01-31",
        "description": "Supporting students pursuing computer science degrees, especially underrepresented groups.",
        "requirements": [
            "High school senior planning to study computer science",
            "Minimum 3.0 GPA",
            "Demonstrated financial need",
        ],
        "application_url": "https://www.amazonfutureengineer.com/scholarships",
        "eligibility": {
            "gpa_min": 3.0,
            "grade_levels": ["12"],
            "majors": ["Computer Science", "Software Engineering", "Computer Engineering"],
            "demographics": ["any"],
        },
        "competitiveness": "high",
        "estimated_applicants": 8000,
        "tags": ["STEM", "technology", "diversity", "computer-science"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "burger-king-scholars-2025",
        "title": "Burger King Scholars Program",
        "provider": "Burger King Foundation",
        "amount": 1000,
        "deadline": "2025-12-15",
        "description": "Supporting employees, employees' children, and graduating seniors in North America.",
        "requirements": ["Minimum 2.5 GPA", "Work experience or financial hardship"],
        "application_url": "https://www.bkmclamorefoundation.org/",
        "eligibility": {"gpa_min": 2.5, "grade_levels": ["12"], "demographics": ["any"]},
        "competitiveness": "moderate",
        "estimated_applicants": 25000,
        "tags": ["work-experience", "community-service", "accessible"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "national-merit-scholarship-2025",
        "title": "National Merit Scholarship",
        "provider": "National Merit Scholarship Corporation",
        "amount": 2500,
        "deadline": "2025-10-15",
        "description": "Merit-based awards for students who excel on the PSAT/NMSQT.",
        "requirements": ["Take PSAT/NMSQT in junior year", "SAT confirmation", "High school senior"],
        "application_url": "https://www.nationalmerit.org/",
        "eligibility": {"grade_levels": ["12"], "demographics": ["any"], "sat_min": 1200},
        "competitiveness": "extremely_high",
        "estimated_applicants": 16000,
        "tags": ["merit", "PSAT", "academic-excellence"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "hispanic-scholarship-fund-2025",
        "title": "Hispanic Scholarship Fund",
        "provider": "Hispanic Scholarship Fund",
        "amount": 10000,
        "deadline": "2026-02-15",
        "description": "Scholarship for students of Hispanic heritage pursuing higher education.",
        "requirements": ["Hispanic heritage", "2.5 GPA minimum"],
        "application_url": "https://www.hsf.net/",
        "eligibility": {"gpa_min": 2.5, "demographics": ["Hispanic"]},
        "competitiveness": "high",
        "estimated_applicants": 12000,
        "tags": ["hispanic", "cultural", "diversity"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "axa-achievement-2025",
        "title": "AXA Achievement Scholarship",
        "provider": "AXA Foundation",
        "amount": 25000,
        "deadline": "2025-12-15",
        "description": "Scholarship recognizing students who demonstrate achievement, ambition, and drive.",
        "requirements": ["Demonstrate achievement", "Ambition", "Drive"],
        "application_url": "https://www.axa-achievement.com/",
        "eligibility": {"activities": ["leadership", "achievement"]},
        "competitiveness": "high",
        "estimated_applicants": 10000,
        "tags": ["achievement", "ambition", "leadership"],
        "is_local": False,
        "is_recurring": True,
    },
    {
        "listing_id": "rotary-club-local-scholarship-2025",
        "title": "Local Rotary Club Scholarships",
        "provider": "Rotary International",
        "amount": 2500,
        "deadline": "2026-02-28",
        "description": "Local Rotary clubs offer scholarships to students in their communities.",
        "requirements": [
            "Resident of local Rotary club area",
            "Demonstrated community service",
            "Essay and interview required",
        ],
        "application_url": "https://www.rotary.org/en/our-programs/scholarships",
        "eligibility": {"activities": ["Community Service", "Volunteering"]},
        "competitiveness": "low",
        "estimated_applicants": 150,
        "tags": ["local", "community-service", "rotary", "merit"],
        "is_local": True,
        "is_recurring": True,
    },
)


class SeedListingRepository(ListingRepository):
    """Built-in catalogue used when no listing file or feed is configured."""

    name = "seed"

    def iter_records(self) -> Iterator[ListingRecord]:
        # Copies keep the module-level catalogue read-only for every caller.
        for record in SEED_LISTINGS:
            yield copy.deepcopy(record)
