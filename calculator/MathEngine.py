# MathEngine.py
"""""
Core calculation engine for the calculator.

Pipeline
--------
1) Tokenizer: converts a raw input string into a flat list of Number / Operator tokens.
2) Reducer: folds (Number, Operator, Number) triples tier by tier,
   first '×' and '÷', then '+' and '-', until a single Number is left.
3) Formatter: renders the float result for the display.

Everything here is stateless: each call builds its own token list and throws it away.
"""""

import math
from decimal import Decimal, localcontext, ROUND_HALF_UP

from . import config_manager as config_manager
from . import error as E

# Debug toggle for optional prints in this module (main.py sets it from config.json)
debug = False

# Supported operators (kept as a simple list for quick membership checks)
Operations = ["+", "-", "×", "÷"]

# Reduction order: each tier is folded completely before the next one
PRECEDENCE_TIERS = (("×", "÷"), ("+", "-"))

# Smallest positive double (subnormal); divisors below it count as zero
SMALLEST_DIVISOR = math.ulp(0.0)


# -----------------------------
# Utilities / small helpers
# -----------------------------

def isOp(zeichen):
    """Return index of a known operator or -1 if unknown."""
    try:
        return Operations.index(zeichen)
    except ValueError:
        return -1


def parse_number(str_number):
    """Turn an accumulated digit run into a Number token.

    Only ASCII digits, '.' and a leading '-' are accepted. Runs like '1.2.3',
    '.' or a lone '-' fail here, not in the tokenizer.
    """
    if not str_number.isascii():
        raise E.InvalidNumber(E.ERROR_MESSAGES["3002"] + str_number)
    try:
        return Number(float(str_number))
    except ValueError:
        raise E.InvalidNumber(E.ERROR_MESSAGES["3002"] + str_number)


# -----------------------------
# Token types
# -----------------------------

class Number:
    """Token for a numeric literal (or an already folded result)."""
    def __init__(self, value):
        self.value = float(value)

    def __eq__(self, other):
        return isinstance(other, Number) and self.value == other.value

    def __repr__(self):
        return f"Number({self.value!r})"


class Operator:
    """Token for one of the binary operators in Operations."""
    def __init__(self, symbol):
        self.symbol = symbol

    def __eq__(self, other):
        return isinstance(other, Operator) and self.symbol == other.symbol

    def __repr__(self):
        return f"Operator({self.symbol!r})"


# -----------------------------
# Tokenizer
# -----------------------------

def tokenize(problem):
    """Convert the raw input string into a token list.

    Notes:
    - Whitespace is skipped and never ends a number.
    - A '-' at the start or right after another operator is a sign: it opens
      the next number instead of becoming an Operator token.
    """
    tokens = []
    current_number = ""

    for current_char in problem:

        # --- Numbers: digits and decimal separator ---
        if current_char.isdecimal() or current_char == ".":
            current_number += current_char

        # --- Operators ---
        elif isOp(current_char) != -1:
            if current_number:
                tokens.append(parse_number(current_number))
                current_number = ""

            if current_char == "-" and (not tokens or isinstance(tokens[-1], Operator)):
                current_number = "-"
            else:
                tokens.append(Operator(current_char))

        # --- Whitespace (ignored) ---
        elif current_char.isspace():
            continue

        else:
            raise E.InvalidCharacter(E.ERROR_MESSAGES["3001"] + current_char)

    if current_number:
        tokens.append(parse_number(current_number))

    if not tokens:
        raise E.InvalidExpression()

    if debug == True:
        print(tokens)

    return tokens


# -----------------------------
# Reducer
# -----------------------------

def perform_operation(left, operator, right):
    """Apply a binary operator to two floats."""
    if operator == '+':
        return left + right
    elif operator == '-':
        return left - right
    elif operator == '×':
        return left * right
    elif operator == '÷':
        if abs(right) < SMALLEST_DIVISOR:
            raise E.DivisionByZero()
        return left / right
    else:
        raise E.UnknownOperator(E.ERROR_MESSAGES["3004"] + str(operator))


def is_foldable(tokens, b, operator_set):
    """True if tokens[b:b+3] is Number, Operator (in operator_set), Number.

    A triple whose left number is still the right operand of a same-tier
    operator waits for a later pass: in '100-10-10-10' the second '10-10'
    must not be folded before '90-10'.
    """
    if b + 2 >= len(tokens):
        return False
    # Required for left-to-right associativity; a plain non-overlapping scan
    # would turn 100-10-10-10 into 100-10 and 10-10 and answer 90.
    if b > 0 and isinstance(tokens[b - 1], Operator) and tokens[b - 1].symbol in operator_set:
        return False
    left, operator, right = tokens[b], tokens[b + 1], tokens[b + 2]
    return (isinstance(left, Number) and isinstance(operator, Operator)
            and isinstance(right, Number) and operator.symbol in operator_set)


def reduce_by_precedence(tokens, operator_set):
    """Fold every operator of one precedence tier, left to right.

    One pass replaces non-overlapping triples; a freshly folded number is only
    looked at again on the next pass. Passes repeat until nothing shrinks, so
    '2×3×4' goes [2, ×, 3, ×, 4] -> [6, ×, 4] -> [24].
    The input list is never modified.
    """
    if len(tokens) < 3:
        return tokens

    while True:
        reduced = []
        b = 0
        while b < len(tokens):
            if is_foldable(tokens, b, operator_set):
                ergebnis = perform_operation(tokens[b].value, tokens[b + 1].symbol, tokens[b + 2].value)
                reduced.append(Number(ergebnis))
                b += 3
            else:
                reduced.append(tokens[b])
                b += 1

        if debug == True:
            print(f"Pass {operator_set}: {reduced}")

        if len(reduced) == len(tokens):
            return reduced
        tokens = reduced


# -----------------------------
# Evaluation
# -----------------------------

def evaluate(problem):
    """Evaluate an expression string to a float, or raise a MathError subclass."""
    if problem is None or not problem.strip():
        raise E.EmptyExpression()

    tokens = tokenize(problem)

    for operator_set in PRECEDENCE_TIERS:
        tokens = reduce_by_precedence(tokens, operator_set)

    if len(tokens) != 1 or not isinstance(tokens[0], Number):
        raise E.InvalidExpressionFormat()

    return tokens[0].value


# -----------------------------
# Result formatting
# -----------------------------

def format_result(ergebnis, significant_digits=10):
    """Render a result for the display.

    Whole numbers are printed without a decimal point. Everything else is
    rounded to `significant_digits` and written in plain positional notation
    (no exponent), so the text can be typed back into evaluate().
    """
    if math.isnan(ergebnis) or math.isinf(ergebnis):
        return str(ergebnis)

    if ergebnis % 1 == 0:
        return str(int(ergebnis))

    with localcontext() as ctx:
        # Temporary precision boost prevents InvalidOperation in quantize()
        ctx.prec = max(128, significant_digits + 60)
        exakt = Decimal(ergebnis)
        stellen = significant_digits - exakt.adjusted() - 1
        gerundet = exakt.quantize(Decimal(1).scaleb(-stellen), rounding=ROUND_HALF_UP)

    ausgabe_string = format(gerundet, "f")
    if "." in ausgabe_string:
        ausgabe_string = ausgabe_string.rstrip("0").rstrip(".")
    return ausgabe_string


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API for front ends: evaluate → format with the configured precision."""
    settings = config_manager.validate_settings(config_manager.load_setting_value("all"))
    try:
        ergebnis = evaluate(problem)
        # Overflow leaves inf/nan behind, which the display could not feed back in
        if not math.isfinite(ergebnis):
            raise E.NumberTooBig()
        return format_result(ergebnis, settings["significant_digits"])

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Convert unexpected Python exceptions to our unified error type
    except (ValueError, TypeError, ArithmeticError) as e:
        raise E.MathError(message=E.ERROR_MESSAGES["9999"] + str(e).strip(), code="9999", equation=problem)
