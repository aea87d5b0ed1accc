import logging
import math
import re
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

logger = logging.getLogger(__name__)

# 100 old pounds = 1 new pound
CONVERSION_RATE = 100

OLD_DENOMINATIONS = [1000, 2000, 5000, 10000, 50000]
NEW_DENOMINATIONS = [5, 10, 25, 50, 100, 500]

OLD_TO_NEW = "old-to-new"
NEW_TO_OLD = "new-to-old"

ARABIC_NUMERALS = "٠١٢٣٤٥٦٧٨٩"
ARABIC_THOUSANDS_SEPARATOR = "٬"

_TO_WESTERN = str.maketrans(ARABIC_NUMERALS, "0123456789")
_TO_ARABIC = str.maketrans("0123456789", ARABIC_NUMERALS)


def get_direction_arabic(direction):
    """Convert a conversion direction to its Arabic label."""
    direction_map = {
        OLD_TO_NEW: "قديمة إلى جديدة",
        NEW_TO_OLD: "جديدة إلى قديمة",
    }
    return direction_map.get(direction, direction)


def convert_old_to_new(amount, rate=CONVERSION_RATE):
    """Convert an amount of old pounds to new pounds."""
    return amount / rate


def convert_new_to_old(amount, rate=CONVERSION_RATE):
    """Convert an amount of new pounds to old pounds."""
    return amount * rate


def arabic_to_western(text):
    """Replace Arabic-Indic digits with Western digits."""
    return text.translate(_TO_WESTERN)


def western_to_arabic(text):
    """Replace Western digits with Arabic-Indic digits."""
    return text.translate(_TO_ARABIC)


def has_arabic_numerals(text):
    """Check whether text contains any Arabic-Indic digit."""
    return any(c in ARABIC_NUMERALS for c in text)


def clean_amount_input(text):
    """Normalise raw input: Western digits and the decimal point only."""
    return re.sub(r"[^\d.]", "", arabic_to_western(text or ""), flags=re.ASCII)


def parse_amount(text):
    """Parse an amount typed by the user.

    Args:
        text (str): Amount with Western or Arabic-Indic digits, optionally
            grouped with "," or "٬"

    Returns:
        float: The parsed amount, or 0 if the text is empty or not a number
    """
    if not text:
        return 0
    cleaned = arabic_to_western(re.sub(f"[,{ARABIC_THOUSANDS_SEPARATOR}]", "", text)).strip()
    try:
        value = float(cleaned)
    except ValueError:
        logger.debug(f"Could not parse amount {text!r}, using 0")
        return 0
    if not math.isfinite(value):
        logger.debug(f"Ignoring non-finite amount {text!r}")
        return 0
    return value


def format_number(number, use_arabic=False, fraction_digits=0):
    """Format a number with grouped thousands.

    Args:
        number (float): The number to format
        use_arabic (bool): Use Arabic-Indic digits and the Arabic separator
        fraction_digits (int): Maximum number of fraction digits kept;
            trailing zeros are dropped

    Returns:
        str: Formatted number, e.g. "1,234.5" or "١٬٢٣٤.٥"
    """
    quantum = Decimal(1).scaleb(-fraction_digits)
    try:
        rounded = Decimal(str(number)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        logger.debug(f"Cannot format {number!r}")
        return str(number)
    formatted = f"{rounded:,f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")
    if formatted == "-0":
        formatted = "0"
    if use_arabic:
        return western_to_arabic(formatted.replace(",", ARABIC_THOUSANDS_SEPARATOR))
    return formatted


def convert_amount_text(text, direction=OLD_TO_NEW, rate=CONVERSION_RATE):
    """Convert raw input text in the given direction.

    Returns:
        str: The converted amount formatted with Western digits, or an
        empty string when the input is empty or not a number
    """
    cleaned = clean_amount_input(text)
    if not cleaned:
        return ""
    try:
        amount = float(cleaned)
    except ValueError:
        logger.debug(f"Invalid amount input {text!r}")
        return ""
    if not math.isfinite(amount):
        logger.debug(f"Ignoring non-finite amount input {text!r}")
        return ""
    if direction == OLD_TO_NEW:
        return format_number(convert_old_to_new(amount, rate), fraction_digits=2)
    if direction == NEW_TO_OLD:
        return format_number(convert_new_to_old(amount, rate), fraction_digits=0)
    raise ValueError(f"Unknown conversion direction: {direction}")
