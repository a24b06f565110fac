import io
import logging
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from sme.utilities import config

logger = logging.getLogger(__name__)

_TABLE_STYLE = TableStyle([
    ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
    ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
    ("ALIGN", (0,0), (-1,-1), "CENTER"),
    ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
    ("FONTSIZE", (0,0), (-1,0), 12),
    ("BOTTOMPADDING", (0,0), (-1,0), 10),
    ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
])


def _build(title: str, rows, note: str = "") -> bytes:
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )
    styles = getSampleStyleSheet()
    elements = [Paragraph(title, styles["Title"]), Spacer(1, 16)]
    if note:
        elements += [Paragraph(note, styles["Normal"]), Spacer(1, 12)]
    table = Table(rows, repeatRows=1)
    table.setStyle(_TABLE_STYLE)
    elements.append(table)
    doc.build(elements)
    return buf.getvalue()


def generate_pdf_for_workflow(graph):
    """Schedule table in topological order, marking the tasks on the critical path."""
    order = graph.topological_order()
    if order is None:
        raise ValueError("Workflow graph has a cycle")
    critical = graph.critical_path()
    on_path = {t.id for t in critical.path}

    data = [["Step", "Task", "Duration (days)", "Critical"]]
    for step, task in enumerate(order, start=1):
        data.append([str(step), task.name, str(task.duration_days), "yes" if task.id in on_path else ""])

    pdf = _build("Workflow Plan", data, note=f"Critical path duration: {critical.total_duration} days")
    logger.info(f"Workflow PDF generated for {len(order)} tasks")
    return pdf


def generate_pdf_for_low_stock(inventory, limit=None):
    """Table of products at or below their reorder level, lowest stock first."""
    limit = config.LOW_STOCK_ALERT_LIMIT if limit is None else limit
    products = inventory.low_stock_alerts(limit)
    data = [["ID", "Product", "Category", "Stock", "Reorder level"]]
    for p in products:
        data.append([str(p.id), p.name, p.category, str(p.stock), str(p.reorder_level)])
    pdf = _build("Low-stock Alerts", data)
    logger.info(f"Low-stock PDF generated with {len(products)} products")
    return pdf
