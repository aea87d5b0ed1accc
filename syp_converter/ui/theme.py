"""
Theme configuration for the converter.
Provides consistent colors, typography, and component styles.
"""

class Theme:
    # Color Palette
    PRIMARY = "#047857"      # Emerald - Main color
    ACCENT = "#d97706"       # Gold - Highlights and accents
    OLD_CURRENCY = "#d97706" # Amber - Old pound amounts
    NEW_CURRENCY = "#059669" # Green - New pound amounts

    # Text Colors
    TEXT_SECONDARY = "#6b7280" # Gray - Secondary text

    # Font Sizes
    FONT_SIZE_NORMAL = "14px"
    FONT_SIZE_RESULT = "26px"

    # Component Styles
    TABLE_STYLE = """
        QTableWidget {
            background-color: white;
            border: 1px solid #dcdde1;
            border-radius: 5px;
            gridline-color: #f5f6fa;
        }
        QTableWidget::item {
            padding: 5px;
        }
        QHeaderView::section {
            background-color: #047857;
            color: white;
            padding: 8px;
            border: none;
            font-weight: bold;
        }
    """

    GROUP_BOX_STYLE = """
        QGroupBox {
            border: 1px solid #dcdde1;
            border-radius: 5px;
            margin-top: 10px;
            font-weight: bold;
            background-color: white;
        }
        QGroupBox::title {
            subcontrol-origin: margin;
            right: 10px;
            padding: 0 3px;
            color: %(title_color)s;
        }
    """

    INPUT_STYLE = """
        QLineEdit {
            border: 1px solid #dcdde1;
            border-radius: 5px;
            padding: 8px;
            font-size: 18px;
            background-color: white;
            selection-background-color: #059669;
        }
        QLineEdit:focus {
            border: 2px solid #059669;
        }
        QLineEdit:read-only {
            background-color: #f8f9fa;
        }
    """

    TAB_STYLE = """
        QTabWidget::pane {
            border: 1px solid #dcdde1;
            border-radius: 5px;
            background-color: white;
        }
        QTabBar::tab {
            background-color: #f8f9fa;
            color: #1f2937;
            padding: 8px 15px;
            margin-right: 2px;
            border-top-left-radius: 5px;
            border-top-right-radius: 5px;
            font-weight: bold;
        }
        QTabBar::tab:selected {
            background-color: #047857;
            color: white;
        }
    """

    @classmethod
    def get_group_box_style(cls, title_color):
        """Get group box style with specific title color."""
        return cls.GROUP_BOX_STYLE % {
            'title_color': title_color
        }

    @classmethod
    def get_amount_label_style(cls, color, size=None):
        return f"color: {color}; font-size: {size or cls.FONT_SIZE_NORMAL}; font-weight: bold;"

