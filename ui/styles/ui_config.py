from PySide6.QtCore import Qt
from PySide6.QtWidgets import QSizePolicy


class UIConfig:
    """Central UI design system for the task forms"""

    # =====================
    # Spacing & margins
    # =====================
    SPACING_XS = 4
    SPACING_SM = 8
    SPACING_MD = 12
    SPACING_LG = 24
    MARGIN_MD = 12

    # =====================
    # Inputs
    # =====================
    INPUT_HEIGHT = 28
    INPUT_MIN_WIDTH = 160
    TEXTEDIT_MIN_HEIGHT = 120
    NOTES_MIN_HEIGHT = 220

    INPUT_POLICY = QSizePolicy(QSizePolicy.Expanding, QSizePolicy.Fixed)
    TEXTEDIT_POLICY = QSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

    CHECKBOX_HEIGHT = 20
    CHECKBOX_POLICY = QSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)

    # =====================
    # Numeric ranges
    # =====================
    MIN_VALUE = 0
    DURATION_MAX = 3650
    HOURS_MAX = 100_000.0
    HOURS_DECIMALS = 1
    HOURS_STEP = 1.0

    # =====================
    # Formats & alignment
    # =====================
    DATE_FORMAT = "yyyy-MM-dd"
    ALIGN_RIGHT = Qt.AlignRight
    ALIGN_LEFT = Qt.AlignLeft
    ALIGN_CENTER = Qt.AlignVCenter
    ALIGN_TOP = Qt.AlignTop

    # =====================
    # Colors
    # =====================
    COLOR_DANGER = "#c0392b"
    COLOR_TEXT_SECONDARY = "#6b7280"
    ERROR_TEXT_STYLE = f"color: {COLOR_DANGER}; font-size: 9pt;"
    INFO_TEXT_STYLE = f"color: {COLOR_TEXT_SECONDARY}; font-size: 9pt; font-style: italic;"

    # =====================
    # Labels
    # =====================
    TITLE_LABEL = "Title:"
    DESCRIPTION_LABEL = "Description:"
    START_DATE_LABEL = "Start date:"
    DURATION_LABEL = "Duration (days):"
    END_DATE_LABEL = "End date:"
    PRIORITY_LABEL = "Priority:"
    ESTIMATED_HOURS_LABEL = "Estimated hours:"
    PRIORITY_LABELS = {
        "low": "Low",
        "medium": "Medium",
        "high": "High",
        "critical": "Critical",
    }
