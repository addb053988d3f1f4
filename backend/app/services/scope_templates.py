"""Common scope-of-work texts offered when building quotation lines."""

from typing import List

SCOPE_TEMPLATES: List[dict] = [
    {
        "name": "Frameless Glass Partition",
        "category": "GLASS",
        "scope_of_work": "Supply and installation of 12mm clear tempered frameless glass partition with "
        "stainless steel patch fittings and floor/ceiling channels.",
        "unit": "sqm",
    },
    {
        "name": "Shower Enclosure",
        "category": "GLASS",
        "scope_of_work": "Supply and installation of 10mm clear tempered glass shower enclosure with hinged door, "
        "stainless steel hinges, handle and silicone sealing.",
        "unit": "nos",
    },
    {
        "name": "Glass Balustrade",
        "category": "GLASS",
        "scope_of_work": "Supply and installation of 12mm tempered laminated glass balustrade with aluminum "
        "base shoe channel and stainless steel top handrail.",
        "unit": "rm",
    },
    {
        "name": "Aluminum Sliding Window",
        "category": "ALUMINUM",
        "scope_of_work": "Fabrication and installation of powder coated aluminum sliding window with 6mm clear "
        "glass, rollers, locks and weather seals.",
        "unit": "sqm",
    },
    {
        "name": "Aluminum Curtain Wall",
        "category": "ALUMINUM",
        "scope_of_work": "Design, supply and installation of stick-system aluminum curtain wall with double "
        "glazed units, brackets, anchors and structural silicone.",
        "unit": "sqm",
    },
    {
        "name": "Door Hardware Set",
        "category": "HARDWARE",
        "scope_of_work": "Supply and fixing of door hardware set: floor spring, top and bottom patch fittings, "
        "lock and pull handles.",
        "unit": "set",
    },
    {
        "name": "Site Installation Labor",
        "category": "LABOR",
        "scope_of_work": "Installation labor including site measurement, handling, fixing and final cleaning.",
        "unit": "day",
    },
]


def list_scope_templates(category: str | None = None) -> List[dict]:
    if category:
        return [template for template in SCOPE_TEMPLATES if template["category"] == category]
    return list(SCOPE_TEMPLATES)
