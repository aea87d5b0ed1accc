"""
Module for converting numbers to Arabic words.

Amounts are spelled in Modern Standard Arabic, with magnitude and currency
nouns agreeing with their count (one, two, three to ten, eleven and above).
"""
import math
from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

ZERO = "صفر"
NEGATIVE = "سالب"
POINT = "فاصلة"
AND = " و"

ONES = [
    "", "واحد", "اثنان", "ثلاثة", "أربعة", "خمسة",
    "ستة", "سبعة", "ثمانية", "تسعة", "عشرة",
    "أحد عشر", "اثنا عشر", "ثلاثة عشر", "أربعة عشر", "خمسة عشر",
    "ستة عشر", "سبعة عشر", "ثمانية عشر", "تسعة عشر",
]
TENS = ["", "", "عشرون", "ثلاثون", "أربعون", "خمسون", "ستون", "سبعون", "ثمانون", "تسعون"]
HUNDREDS = ["", "مئة", "مئتان", "ثلاثمئة", "أربعمئة", "خمسمئة", "ستمئة", "سبعمئة", "ثمانمئة", "تسعمئة"]

# singular: count of one, dual: two, plural: three to ten,
# counted: the noun after a numeral of eleven or more
NounForms = namedtuple("NounForms", ["singular", "dual", "plural", "counted"])

BILLION = NounForms("مليار", "ملياران", "مليارات", "مليار")
MILLION = NounForms("مليون", "مليونان", "ملايين", "مليون")
THOUSAND = NounForms("ألف", "ألفان", "آلاف", "ألف")
# The short preview uses the oblique dual for thousands
# and writes "<count> مليون" for every count above one.
THOUSAND_SIMPLE = NounForms("ألف", "ألفين", "آلاف", "ألف")
MILLION_SIMPLE = NounForms("مليون", "اثنان مليون", "مليون", "مليون")

CURRENCY_ERA = {True: "جديدة", False: "قديمة"}
CURRENCY_DUAL_ERA = {True: "جديدتان", False: "قديمتان"}


def currency_name(is_new=True):
    """Return the singular currency noun phrase for the given era."""
    return f"ليرة سورية {CURRENCY_ERA[is_new]}"


def currency_forms(is_new=True):
    """Build the four agreement forms of the currency noun phrase."""
    return NounForms(
        singular=f"{currency_name(is_new)} واحدة",
        dual=f"ليرتان سوريتان {CURRENCY_DUAL_ERA[is_new]}",
        plural=f"ليرات سورية {CURRENCY_ERA[is_new]}",
        counted=currency_name(is_new),
    )


def _convert_tens(number):
    """Spell 0-99. Units come before tens: "خمسة وعشرون"."""
    if number < 20:
        return ONES[number]
    ten, one = divmod(number, 10)
    if one == 0:
        return TENS[ten]
    return f"{ONES[one]}{AND}{TENS[ten]}"


def _convert_hundreds(number):
    """Spell 0-999."""
    hundred, remainder = divmod(number, 100)
    if hundred == 0:
        return _convert_tens(remainder)
    if remainder == 0:
        return HUNDREDS[hundred]
    return f"{HUNDREDS[hundred]}{AND}{_convert_tens(remainder)}"


def _spell_count(count):
    """Spell the count of a magnitude band."""
    if count < 1000:
        return _convert_hundreds(count)
    # Only reached for integer parts of a trillion and more.
    return _spell_integer(count)


def _select_form(count, forms, spelled=None):
    """
    Pick the noun phrase agreeing with count.

    Args:
        count (int): How many of the noun there are
        forms (NounForms): The four agreement forms of the noun
        spelled (str): Words to put before the noun when a numeral is
            needed. Defaults to the spelling of count.

    Returns:
        str: The counted noun phrase
    """
    if count == 1:
        return forms.singular
    if count == 2:
        return forms.dual
    if spelled is None:
        spelled = _spell_count(count)
    if 3 <= count <= 10:
        return f"{spelled} {forms.plural}"
    return f"{spelled} {forms.counted}"


def _spell_integer(number):
    """Spell a positive integer as "و"-joined magnitude bands."""
    billions = number // 10**9
    millions = number % 10**9 // 10**6
    thousands = number % 10**6 // 10**3
    remainder = number % 1000

    parts = []
    if billions > 0:
        parts.append(_select_form(billions, BILLION))
    if millions > 0:
        parts.append(_select_form(millions, MILLION))
    if thousands > 0:
        parts.append(_select_form(thousands, THOUSAND))
    if remainder > 0:
        parts.append(_convert_hundreds(remainder))
    return AND.join(parts)


def _split(value):
    """Split a value into its floor and the fraction rounded to hundredths."""
    int_part = math.floor(value)
    fraction = value - int_part
    if fraction <= 0:
        return int_part, 0
    cents = Decimal(fraction).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return int_part, int(cents * 100) % 100


def number_to_arabic_words(value):
    """
    Convert a number to Arabic words.

    Args:
        value (int or float): Any finite number, negative values included

    Returns:
        str: The integer part in words, followed by "فاصلة" and the
        hundredths in words when the fraction does not round to zero
    """
    if value < 0:
        return f"{NEGATIVE} {number_to_arabic_words(abs(value))}"

    int_part, hundredths = _split(value)
    result = _spell_integer(int_part) if int_part > 0 else ZERO
    if hundredths > 0:
        result += f" {POINT} {number_to_arabic_words(hundredths)}"
    return result


def number_to_arabic_words_with_currency(value, is_new=True):
    """
    Convert an amount to Arabic words followed by the Syrian pound noun.

    Args:
        value (int or float): A non-negative amount
        is_new (bool): True for the new pound, False for the old pound

    Returns:
        str: The amount in words with the currency noun in agreement
    """
    int_part = math.floor(value)
    if int_part == 0:
        return f"{ZERO} {currency_name(is_new)}"
    return _select_form(
        int_part,
        currency_forms(is_new),
        spelled=number_to_arabic_words(value),
    )


def number_to_simple_arabic_words(value):
    """
    Short spelling for the live preview under the amount input.

    Billions are dropped, millions read "<count> مليون" above one, the
    dual of thousands is "ألفين" and the fraction reads as "و<N> من مئة".
    """
    if value < 0:
        return f"{NEGATIVE} {number_to_simple_arabic_words(abs(value))}"

    int_part, hundredths = _split(value)
    millions = int_part % 10**9 // 10**6
    thousands = int_part % 10**6 // 10**3
    remainder = int_part % 1000

    parts = []
    if millions > 0:
        parts.append(_select_form(millions, MILLION_SIMPLE))
    if thousands > 0:
        parts.append(_select_form(thousands, THOUSAND_SIMPLE))
    if remainder > 0:
        parts.append(_convert_hundreds(remainder))
    result = AND.join(parts)

    if hundredths > 0:
        result = f"{result or ZERO}{AND}{_convert_hundreds(hundredths)} من مئة"
    return result or ZERO
