import logging
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QGroupBox,
    QTabBar, QTableWidget, QTableWidgetItem, QHeaderView, QCheckBox,
    QMainWindow, QStatusBar
)
from PyQt6.QtGui import QFont
from PyQt6.QtCore import Qt, QTimer
from syp_converter import config
from syp_converter.ui.theme import Theme
from syp_converter.ui.arabic_amount import (
    number_to_arabic_words_with_currency, number_to_simple_arabic_words
)
from syp_converter.utils.helpers import (
    OLD_TO_NEW, NEW_TO_OLD, OLD_DENOMINATIONS, NEW_DENOMINATIONS,
    get_direction_arabic, convert_amount_text, convert_old_to_new,
    convert_new_to_old, parse_amount, clean_amount_input, format_number,
    has_arabic_numerals, western_to_arabic, ARABIC_THOUSANDS_SEPARATOR
)

logger = logging.getLogger(__name__)

OLD_LABEL = "الليرة القديمة"
NEW_LABEL = "الليرة الجديدة"
OLD_SYMBOL = "ل.س قديمة"
NEW_SYMBOL = "ل.س جديدة"
DIRECTIONS = [OLD_TO_NEW, NEW_TO_OLD]


class ConverterWindow(QMainWindow):
    """Converter between the old and the new Syrian pound."""

    def __init__(self, rate=None, preview_delay=None, use_arabic=None):
        super().__init__()
        self.rate = rate if rate is not None else config.get_conversion_rate()
        self.preview_delay = preview_delay if preview_delay is not None else config.get_preview_delay()
        self.use_arabic = use_arabic if use_arabic is not None else config.use_arabic_numerals()
        self.direction = OLD_TO_NEW
        self.result_text = ""

        self.setWindowTitle("محول العملة السورية")
        self.setGeometry(100, 100, 640, 760)
        self.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.layout = QVBoxLayout(self.central_widget)

        # Debounce conversions while the user is typing
        self.convert_timer = QTimer(self)
        self.convert_timer.setSingleShot(True)
        self.convert_timer.timeout.connect(self.convert)

        self.setup_ui()
        self.update_labels()
        self.refresh_denominations()

    def setup_ui(self):
        """Set up the UI components."""
        title = QLabel("محول العملة السورية")
        title.setFont(QFont("Arial", 18, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet(f"color: {Theme.PRIMARY}; margin-bottom: 5px;")
        self.layout.addWidget(title)

        self.rate_label = QLabel()
        self.rate_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.rate_label.setStyleSheet(f"color: {Theme.TEXT_SECONDARY};")
        self.layout.addWidget(self.rate_label)

        # Direction tabs
        self.direction_tabs = QTabBar()
        self.direction_tabs.setStyleSheet(Theme.TAB_STYLE)
        for direction in DIRECTIONS:
            self.direction_tabs.addTab(get_direction_arabic(direction))
        self.direction_tabs.currentChanged.connect(self.on_direction_changed)
        self.layout.addWidget(self.direction_tabs, alignment=Qt.AlignmentFlag.AlignCenter)

        self.arabic_numerals_check = QCheckBox("عرض الأرقام العربية (١٢٣)")
        self.arabic_numerals_check.setChecked(self.use_arabic)
        self.arabic_numerals_check.toggled.connect(self.on_numerals_toggled)
        self.layout.addWidget(self.arabic_numerals_check)

        # Source amount
        self.source_group = QGroupBox()
        self.source_group.setStyleSheet(Theme.get_group_box_style(Theme.OLD_CURRENCY))
        source_layout = QVBoxLayout()
        self.source_input = QLineEdit()
        self.source_input.setPlaceholderText("أدخل المبلغ")
        self.source_input.setStyleSheet(Theme.INPUT_STYLE)
        self.source_input.textChanged.connect(self.on_amount_changed)
        source_layout.addWidget(self.source_input)
        self.source_words_label = QLabel()
        self.source_words_label.setWordWrap(True)
        self.source_words_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        source_layout.addWidget(self.source_words_label)
        self.source_group.setLayout(source_layout)
        self.layout.addWidget(self.source_group)

        # Target amount
        self.target_group = QGroupBox()
        self.target_group.setStyleSheet(Theme.get_group_box_style(Theme.NEW_CURRENCY))
        target_layout = QVBoxLayout()
        self.target_output = QLineEdit()
        self.target_output.setReadOnly(True)
        self.target_output.setPlaceholderText("النتيجة")
        self.target_output.setStyleSheet(Theme.INPUT_STYLE)
        target_layout.addWidget(self.target_output)
        self.target_words_label = QLabel()
        self.target_words_label.setWordWrap(True)
        self.target_words_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        target_layout.addWidget(self.target_words_label)
        self.target_group.setLayout(target_layout)
        self.layout.addWidget(self.target_group)

        # Result in words
        self.result_group = QGroupBox("نتيجة التحويل")
        self.result_group.setStyleSheet(Theme.get_group_box_style(Theme.PRIMARY))
        result_layout = QVBoxLayout()
        self.result_label = QLabel()
        self.result_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        result_layout.addWidget(self.result_label)
        words_layout = QHBoxLayout()
        self.old_words_label = QLabel()
        self.old_words_label.setWordWrap(True)
        self.old_words_label.setStyleSheet(Theme.get_amount_label_style(Theme.OLD_CURRENCY))
        self.new_words_label = QLabel()
        self.new_words_label.setWordWrap(True)
        self.new_words_label.setStyleSheet(Theme.get_amount_label_style(Theme.NEW_CURRENCY))
        words_layout.addWidget(self.old_words_label)
        words_layout.addWidget(QLabel("="))
        words_layout.addWidget(self.new_words_label)
        result_layout.addLayout(words_layout)
        self.result_group.setLayout(result_layout)
        self.result_group.setVisible(False)
        self.layout.addWidget(self.result_group)

        # Banknotes
        denominations_group = QGroupBox("الفئات النقدية")
        denominations_group.setStyleSheet(Theme.get_group_box_style(Theme.ACCENT))
        denominations_layout = QVBoxLayout()
        self.denominations_table = QTableWidget(0, 3)
        self.denominations_table.setHorizontalHeaderLabels(["الفئة", "العملة", "تعادل"])
        self.denominations_table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
        self.denominations_table.verticalHeader().setVisible(False)
        self.denominations_table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.denominations_table.setStyleSheet(Theme.TABLE_STYLE)
        denominations_layout.addWidget(self.denominations_table)
        denominations_group.setLayout(denominations_layout)
        self.layout.addWidget(denominations_group)

        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

    def display_number(self, text):
        """Show a Western-digit number string in the selected numeral script."""
        if self.use_arabic:
            return western_to_arabic(text.replace(",", ARABIC_THOUSANDS_SEPARATOR))
        return text

    def source_is_old(self):
        return self.direction == OLD_TO_NEW

    def update_labels(self):
        """Refresh the labels that depend on direction and numeral script."""
        self.rate_label.setText(
            f"{self.display_number(format_number(self.rate))} {OLD_SYMBOL} = "
            f"{self.display_number('1')} {NEW_SYMBOL}"
        )
        if self.source_is_old():
            self.source_group.setTitle(f"من: {OLD_LABEL}")
            self.target_group.setTitle(f"إلى: {NEW_LABEL}")
        else:
            self.source_group.setTitle(f"من: {NEW_LABEL}")
            self.target_group.setTitle(f"إلى: {OLD_LABEL}")
        self.update_source_words()
        self.update_result()

    def source_amount(self):
        """Read the source input the same way the conversion does."""
        return parse_amount(clean_amount_input(self.source_input.text()))

    def update_source_words(self):
        amount = self.source_amount()
        self.source_words_label.setText(number_to_simple_arabic_words(amount))

    def update_result(self):
        """Render the converted amount, its preview and the currency phrases."""
        if not self.result_text:
            self.target_output.clear()
            self.target_words_label.clear()
            self.result_group.setVisible(False)
            return

        source_amount = self.source_amount()
        target_amount = parse_amount(self.result_text)
        self.target_output.setText(self.display_number(self.result_text))
        self.target_words_label.setText(number_to_simple_arabic_words(target_amount))

        if self.source_is_old():
            old_amount, new_amount = source_amount, target_amount
            symbol = NEW_SYMBOL
        else:
            old_amount, new_amount = target_amount, source_amount
            symbol = OLD_SYMBOL
        self.result_label.setText(f"{self.display_number(self.result_text)} {symbol}")
        self.result_label.setStyleSheet(Theme.get_amount_label_style(
            Theme.NEW_CURRENCY if self.source_is_old() else Theme.OLD_CURRENCY,
            Theme.FONT_SIZE_RESULT
        ))
        self.old_words_label.setText(number_to_arabic_words_with_currency(old_amount, is_new=False))
        self.new_words_label.setText(number_to_arabic_words_with_currency(new_amount, is_new=True))
        self.result_group.setVisible(True)

    def refresh_denominations(self):
        """Fill the banknotes table with each note and its equivalent."""
        rows = [
            (value, OLD_LABEL, f"{format_number(convert_old_to_new(value, self.rate), fraction_digits=2)} {NEW_SYMBOL}")
            for value in OLD_DENOMINATIONS
        ] + [
            (value, NEW_LABEL, f"{format_number(convert_new_to_old(value, self.rate))} {OLD_SYMBOL}")
            for value in NEW_DENOMINATIONS
        ]
        self.denominations_table.setRowCount(len(rows))
        for row, (value, currency, equivalent) in enumerate(rows):
            self.denominations_table.setItem(row, 0, QTableWidgetItem(self.display_number(format_number(value))))
            self.denominations_table.setItem(row, 1, QTableWidgetItem(currency))
            self.denominations_table.setItem(row, 2, QTableWidgetItem(self.display_number(equivalent)))

    def on_amount_changed(self, text):
        if has_arabic_numerals(text) and not self.use_arabic:
            self.arabic_numerals_check.setChecked(True)
        self.update_source_words()
        self.status_bar.showMessage("جاري التحويل...")
        self.convert_timer.start(self.preview_delay)

    def convert(self):
        """Convert the source amount in the current direction."""
        self.result_text = convert_amount_text(self.source_input.text(), self.direction, self.rate)
        logger.debug(f"Converted {self.source_input.text()!r} ({self.direction}) -> {self.result_text!r}")
        self.status_bar.clearMessage()
        self.update_result()

    def set_direction(self, direction):
        """Switch direction and clear both amounts."""
        if direction == self.direction:
            return
        self.direction = direction
        self.source_input.clear()
        self.convert_timer.stop()
        self.result_text = ""
        self.direction_tabs.setCurrentIndex(DIRECTIONS.index(direction))
        self.update_labels()

    def on_direction_changed(self, index):
        self.set_direction(DIRECTIONS[index])

    def on_numerals_toggled(self, checked):
        self.use_arabic = checked
        self.update_labels()
        self.refresh_denominations()
