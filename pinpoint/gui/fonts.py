"""Conversion of toolkit-neutral FontSpec values into QFont."""

from PyQt6.QtGui import QFont

from pinpoint.report.interface_customization import FontSpec


def to_qfont(spec: FontSpec) -> QFont:
    font = QFont(spec.family) if spec.family else QFont()
    font.setPointSizeF(spec.point_size)
    font.setBold(spec.bold)
    return font
