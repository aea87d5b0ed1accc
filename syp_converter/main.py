import logging
import sys
from PyQt6.QtWidgets import QApplication, QMessageBox
from PyQt6.QtGui import QFont
from PyQt6.QtCore import Qt
from dotenv import load_dotenv
from syp_converter.config import setup_environment, get_log_level
from syp_converter.ui.converter_window import ConverterWindow

logger = logging.getLogger(__name__)

def load_stylesheet():
    """Load and return the application stylesheet"""
    return """
        QWidget {
            font-family: Arial;
        }
        QMainWindow {
            background-color: #f8f9fa;
        }
        QMessageBox {
            background-color: #f5f5f5;
        }
        QMessageBox QPushButton {
            background-color: #047857;
            color: white;
            border-radius: 5px;
            padding: 6px 12px;
            font-weight: bold;
        }
        QCheckBox {
            color: #1f2937;
            font-size: 13px;
        }
    """

def main():
    # .env values take precedence over the built-in defaults
    load_dotenv()
    setup_environment()

    logging.basicConfig(
        level=get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    app.setLayoutDirection(Qt.LayoutDirection.RightToLeft)

    # Set application-wide font for Arabic support
    font = QFont("Arial", 11)
    app.setFont(font)
    app.setStyleSheet(load_stylesheet())

    try:
        window = ConverterWindow()
    except Exception as e:
        logger.exception("Failed to start the converter")
        QMessageBox.critical(None, "خطأ", f"تعذر تشغيل المحول: {str(e)}")
        sys.exit(1)

    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
