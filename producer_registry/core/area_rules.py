"""Area Breakdown Rule — pure check that land-use areas fit inside the farm.

Invariants:
    - check_area_breakdown is PURE: returns failures, never raises
    - Failure entries use the same keys as request validation failures
      (field, message, type, location) so both share one 400 envelope
    - Equality is allowed: cultivable + vegetation == total passes

Design Decisions:
    - Applied by the route layer only when ENFORCE_AREA_RULE is on;
      the schema stays limited to field-level shape checks
"""

AREA_RULE_TYPE = "area_breakdown"


def check_area_breakdown(
    total_area: float, cultivable_area: float, vegetation_area: float,
) -> list[dict]:
    """Return per-field failures when cultivable + vegetation > total."""
    used = cultivable_area + vegetation_area
    if used <= total_area:
        return []
    message = (
        f"cultivableArea + vegetationArea ({used:g}) "
        f"must not exceed totalArea ({total_area:g})"
    )
    return [
        {
            "field": name,
            "message": message,
            "type": AREA_RULE_TYPE,
            "location": "body",
        }
        for name in ("cultivableArea", "vegetationArea")
    ]
