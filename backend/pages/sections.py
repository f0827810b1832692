# backend/pages/sections.py
# 마이크로사이트 섹션 테이블 (운영자 작성 정적 콘텐츠)

from typing import Dict, List, Optional

SECTIONS: Dict[str, Dict] = {
    # Now Serving
    "coaches": {
        "group": "Now Serving",
        "title": "Coaches & Consultants",
        "blurb": "Calendar upkeep, client onboarding and follow-up so sessions stay full.",
    },
    "creatives": {
        "group": "Now Serving",
        "title": "Creatives",
        "blurb": "Inbox triage, invoicing and project boards while the creative work happens.",
    },
    "ecom": {
        "group": "Now Serving",
        "title": "E-Commerce",
        "blurb": "Product listings, order follow-up and customer service queues.",
    },
    "health": {
        "group": "Now Serving",
        "title": "Healthcare Providers",
        "blurb": "Appointment reminders, intake forms and records housekeeping.",
    },
    "legal": {
        "group": "Now Serving",
        "title": "Legal & Immigration",
        "blurb": "Document collection, deadline tracking and client status updates.",
    },
    "marketing": {
        "group": "Now Serving",
        "title": "Marketing Agencies",
        "blurb": "Content calendars, reporting decks and campaign checklists.",
    },
    "realestate": {
        "group": "Now Serving",
        "title": "Real Estate & Investors",
        "blurb": "Listing updates, showing schedules and deal pipeline tracking.",
    },
    "tax": {
        "group": "Now Serving",
        "title": "Tax & Accounting",
        "blurb": "Document chasing, data entry and season-long client reminders.",
    },
    "tech": {
        "group": "Now Serving",
        "title": "Tech Founders",
        "blurb": "Vendor comparisons, research summaries and investor update prep.",
    },
    "vaagencies": {
        "group": "Now Serving",
        "title": "VA Agencies",
        "blurb": "Overflow support that follows your agency's own playbooks.",
    },
    # Services Provided
    "content": {
        "group": "Services Provided",
        "title": "Content Management & Updates",
        "blurb": "Website, blog and social updates published on schedule.",
    },
    "data": {
        "group": "Services Provided",
        "title": "Data Entry & Formatting",
        "blurb": "Clean spreadsheets, CRM hygiene and consistent formatting.",
    },
    "schedule": {
        "group": "Services Provided",
        "title": "Scheduling, Tracking, & Reporting",
        "blurb": "Calendars, task trackers and weekly status reports.",
    },
    "special": {
        "group": "Services Provided",
        "title": "Special Projects",
        "blurb": "One-off research, migrations and launch checklists.",
    },
    "support": {
        "group": "Services Provided",
        "title": "Support & Coordination",
        "blurb": "Inbox, vendor and team coordination with clear handoffs.",
    },
    # CTA
    "cv": {
        "group": "Profile",
        "title": "Curriculum Vitae",
        "blurb": "Experience, tools and certifications.",
    },
    "book": {
        "group": "Profile",
        "title": "Book Me",
        "blurb": "Pick a time for a short discovery call.",
    },
}


def get_section(slug: str) -> Optional[Dict]:
    section = SECTIONS.get((slug or "").strip().lower())
    if section is None:
        return None
    return {"slug": slug.strip().lower(), **section}


def grouped_sections() -> List[Dict]:
    """네비게이션용 그룹 목록 (입력 순서 유지)"""
    groups: Dict[str, List[Dict]] = {}
    for slug, section in SECTIONS.items():
        groups.setdefault(section["group"], []).append({"slug": slug, "title": section["title"]})
    return [{"name": name, "items": items} for name, items in groups.items()]
