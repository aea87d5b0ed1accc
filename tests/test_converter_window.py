import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from syp_converter.ui.converter_window import ConverterWindow  # noqa: E402
from syp_converter.utils.helpers import NEW_TO_OLD  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


@pytest.fixture
def window(qapp):
    w = ConverterWindow(rate=100, preview_delay=0, use_arabic=False)
    yield w
    w.close()


def test_old_to_new_conversion(window):
    window.source_input.setText("5000")
    window.convert()
    assert window.target_output.text() == "50"
    assert window.old_words_label.text() == "خمسة آلاف ليرة سورية قديمة"
    assert window.new_words_label.text() == "خمسون ليرة سورية جديدة"
    assert not window.result_group.isHidden()


def test_live_preview_uses_short_spelling(window):
    window.source_input.setText("2000")
    assert window.source_words_label.text() == "ألفين"


def test_switching_direction_clears_amounts(window):
    window.source_input.setText("5000")
    window.convert()
    window.set_direction(NEW_TO_OLD)
    assert window.source_input.text() == ""
    assert window.target_output.text() == ""
    assert window.result_group.isHidden()
    assert window.direction_tabs.currentIndex() == 1


def test_new_to_old_conversion(window):
    window.set_direction(NEW_TO_OLD)
    window.source_input.setText("2")
    window.convert()
    assert window.target_output.text() == "200"
    assert window.new_words_label.text() == "ليرتان سوريتان جديدتان"


def test_arabic_digits_switch_numerals(window):
    window.source_input.setText("٥٠٠٠")
    assert window.arabic_numerals_check.isChecked()
    window.convert()
    assert window.target_output.text() == "٥٠"


def test_invalid_input_hides_result(window):
    window.source_input.setText("1.2.3")
    window.convert()
    assert window.result_group.isHidden()
    assert window.source_words_label.text() == "صفر"


def test_denominations_table(window):
    assert window.denominations_table.rowCount() == 11
    assert window.denominations_table.item(0, 2).text() == "10 ل.س جديدة"
    assert window.denominations_table.item(5, 2).text() == "500 ل.س قديمة"


def test_input_with_extra_characters_reads_same_everywhere(window):
    window.source_input.setText("5000 ل.س")
    window.convert()
    assert window.target_output.text() == "50"
    assert window.source_words_label.text() == "خمسة آلاف"
    assert window.old_words_label.text() == "خمسة آلاف ليرة سورية قديمة"
    assert window.new_words_label.text() == "خمسون ليرة سورية جديدة"
