"""Icon builders for header and form controls."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QIcon, QPainter, QPen, QPixmap, QPolygonF

ICON_COLOR = "#8b5cf6"


def _canvas(size: int) -> tuple[QPixmap, QPainter]:
    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)
    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    return pixmap, painter


def _pen(color: str, width: float) -> QPen:
    pen = QPen(QColor(color))
    pen.setWidthF(width)
    pen.setCapStyle(Qt.PenCapStyle.RoundCap)
    return pen


def build_refresh_icon(size: int = 16, color: str = ICON_COLOR) -> QIcon:
    pixmap, painter = _canvas(size)
    painter.setPen(_pen(color, 1.8))
    painter.drawArc(QRectF(2.0, 2.0, size - 4.0, size - 4.0), 38 * 16, 280 * 16)

    head = QPolygonF(
        [
            QPointF(size - 2.6, size * 0.46),
            QPointF(size - 6.1, size * 0.34),
            QPointF(size - 4.4, size * 0.68),
        ]
    )
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(QColor(color))
    painter.drawPolygon(head)
    painter.end()
    return QIcon(pixmap)


def build_calendar_icon(size: int = 16, color: str = ICON_COLOR) -> QIcon:
    pixmap, painter = _canvas(size)
    painter.setPen(_pen(color, 1.6))
    painter.setBrush(Qt.BrushStyle.NoBrush)

    painter.drawRoundedRect(QRectF(2.2, 3.0, size - 4.4, size - 5.0), 2.6, 2.6)
    painter.drawLine(QPointF(2.4, 6.4), QPointF(size - 2.4, 6.4))
    painter.drawLine(QPointF(5.0, 1.8), QPointF(5.0, 4.6))
    painter.drawLine(QPointF(size - 5.0, 1.8), QPointF(size - 5.0, 4.6))

    # Clock hand hints that the picker also sets a time.
    center = QPointF(size / 2, size * 0.66)
    painter.setPen(_pen(color, 1.4))
    painter.drawLine(center, QPointF(center.x(), center.y() - 2.6))
    painter.drawLine(center, QPointF(center.x() + 2.2, center.y()))
    painter.end()
    return QIcon(pixmap)
