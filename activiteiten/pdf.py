# activiteiten/pdf.py
"""
PDF export of the scorekaart.

This module renders the hours computed by
:func:`activiteiten.scorekaart.bereken_scorekaart` with ReportLab.
"""

from io import BytesIO

from django.utils.timezone import now
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas


def render_scorekaart_pdf(naam: str, kaart: dict) -> bytes:
    """
    Render a scorekaart as a one or more page PDF.

    Parameters
    ----------
    naam : str
        Display name of the student.
    kaart : dict
        Result of :func:`activiteiten.scorekaart.bereken_scorekaart`.

    Returns
    -------
    bytes
        The PDF document.
    """
    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=A4)
    width, height = A4
    margin = 20 * mm
    y = height - margin

    # --- Header ---
    c.setFont("Helvetica-Bold", 16)
    c.drawString(margin, y, f"Scorekaart {kaart['schooljaar']}")
    y -= 10 * mm
    c.setFont("Helvetica", 11)
    c.drawString(margin, y, f"Student: {naam}")
    y -= 6 * mm
    c.drawString(margin, y, f"Aangemaakt op: {now().strftime('%d/%m/%Y %H:%M')}")
    y -= 12 * mm

    # --- Hours per level ---
    c.setFont("Helvetica-Bold", 12)
    c.drawString(margin, y, "Uren per niveau")
    y -= 8 * mm
    c.setFont("Helvetica", 11)
    for niveau, uren in kaart["urenPerNiveau"].items():
        c.drawString(margin, y, f"Niveau {niveau}")
        c.drawRightString(width - margin, y, f"{uren:.2f} u")
        y -= 6 * mm
    c.setFont("Helvetica-Bold", 11)
    c.drawString(margin, y, "Totaal")
    c.drawRightString(width - margin, y, f"{kaart['totaal']:.2f} u")
    y -= 12 * mm

    # --- Counted activities ---
    c.setFont("Helvetica-Bold", 12)
    c.drawString(margin, y, "Activiteiten")
    y -= 8 * mm
    c.setFont("Helvetica", 10)
    if not kaart["activiteiten"]:
        c.drawString(margin, y, "Nog geen goedgekeurde deelnames.")
    for regel in kaart["activiteiten"]:
        if y < 25 * mm:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - margin
        c.drawString(margin, y, f"{regel['datum']}  {regel['titel'][:70]}")
        c.drawRightString(width - margin, y, f"niv. {regel['niveau']}  {regel['uren']:.2f} u")
        y -= 6 * mm

    # --- Footer ---
    c.setFont("Helvetica-Oblique", 9)
    c.drawString(margin, 15 * mm, "PXL Activiteiten")
    c.showPage()
    c.save()
    return buffer.getvalue()
