import datetime
from pathlib import Path
from typing import Iterable, Union

from loguru import logger
from reportlab.lib.pagesizes import A4, landscape
from reportlab.pdfgen import canvas

import config
from core.errors import DataFileError
from models.member import Member
from services.file_manager import ensure_folder
from services.report_service import TABLE_COLUMNS, format_summary, roster_summary, table_row

# x offsets of each table column on a landscape A4 page
COLUMN_X = [40, 110, 300, 370, 450, 520, 620]
ROW_HEIGHT = 16


def create_roster_pdf(save_path: Union[str, Path], members: Iterable[Member]) -> int:
    """
    Generates a PDF report of the roster: one table row per member followed by
    the summary block.

    Args:
        save_path: Where the PDF will be written.
        members: Members in display order.

    Returns:
        int: Number of member rows written.
    """
    save_path = Path(save_path)
    members = list(members)

    try:
        ensure_folder(save_path.parent)
        c = canvas.Canvas(str(save_path), pagesize=landscape(A4))
        w, h = landscape(A4)
        y = h - 50

        # --- HEADER ---
        c.setFont("Helvetica-Bold", 16)
        c.setFillColorRGB(0.8, 0.0, 0.0)
        c.drawString(40, y, f"{config.APP_NAME} - Roster ({datetime.date.today().isoformat()})")
        y -= 30

        def draw_header(y_pos: float) -> None:
            c.setFont("Helvetica-Bold", 10)
            c.setFillColorRGB(0, 0, 0)
            for x, title in zip(COLUMN_X, TABLE_COLUMNS):
                c.drawString(x, y_pos, title)

        draw_header(y)
        y -= ROW_HEIGHT
        c.setFont("Helvetica", 10)

        # --- BODY ---
        for m in members:
            if y < 60:
                c.showPage()
                y = h - 50
                draw_header(y)
                y -= ROW_HEIGHT
                c.setFont("Helvetica", 10)
            for x, value in zip(COLUMN_X, table_row(m)):
                c.drawString(x, y, value[:30])
            y -= ROW_HEIGHT

        # --- SUMMARY ---
        y -= ROW_HEIGHT
        c.setFont("Helvetica-Oblique", 10)
        c.setFillColorRGB(0.3, 0.3, 0.3)
        for line in format_summary(roster_summary(members)).splitlines():
            if y < 40:
                c.showPage()
                y = h - 50
                c.setFont("Helvetica-Oblique", 10)
            c.drawString(40, y, line)
            y -= 14

        c.save()
    except OSError as e:
        logger.error(f"Could not write roster PDF {save_path}: {e}")
        raise DataFileError(f"Could not write to file: {save_path} ({e})")

    logger.info(f"Exported {len(members)} members to {save_path}")
    return len(members)
