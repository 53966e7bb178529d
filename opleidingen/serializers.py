# opleidingen/serializers.py
"""JSON projections of programs."""


def opleiding_summary(opleiding) -> dict:
    return {"id": opleiding.pk, "naam": opleiding.naam, "code": opleiding.code}


def opleiding_detail(opleiding) -> dict:
    """Full projection used by the admin screens."""
    data = opleiding_summary(opleiding)
    data.update(
        {
            "beschrijving": opleiding.beschrijving or None,
            "actief": opleiding.actief,
            "autoGoedkeuringStudentActiviteiten": opleiding.auto_goedkeuring_student_activiteiten,
        }
    )
    return data
