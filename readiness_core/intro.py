from __future__ import annotations
from typing import Any, Dict
from . import config as cfg

CAREERS = ["Process Engineer", "R&D Engineer", "Environmental Consultant", "Quality Assurance Specialist"]
TRAITS = [
    "Analytical thinking",
    "Problem-solving",
    "Persistence",
    "Curiosity",
    "Attention to detail",
    "Strong math/science background",
]
INDUSTRIES = [
    "Energy & Petroleum",
    "Pharmaceuticals",
    "Materials Science",
    "Food Processing",
    "Environmental Engineering",
    "Nanotechnology",
]

def intro_content() -> Dict[str, Any]:
    return {
        "title": f"Is {cfg.FIELD_NAME} Right for You?",
        "subtitle": "A Personalized Readiness & Fit Assessment",
        "summary": (
            f"This assessment will help you determine whether {cfg.FIELD_NAME} aligns with your "
            "interests, abilities, and career goals through psychometric evaluation, aptitude "
            "testing, and career alignment analysis."
        ),
        "about": (
            f"{cfg.FIELD_NAME} applies chemistry, physics, biology, and mathematics to convert raw "
            "materials into valuable products sustainably and safely. It bridges science and industry "
            "to solve complex problems."
        ),
        "duration": "approximately 25-30 minutes",
        "careers": list(CAREERS),
        "traits": list(TRAITS),
        "industries": list(INDUSTRIES),
    }
