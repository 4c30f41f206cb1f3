

class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

class ParseError(MathError):
    pass

class CalculationError(MathError):
    pass

class ConfigurationError(MathError):
    def __init__(self, message, code="5000", equation=None):
        super().__init__(message, code=code, equation=equation)


# Concrete kinds carry their own default code, so raising sites only pass the detail.

class EmptyExpression(ParseError):
    def __init__(self, message="Expression cannot be empty.", code="3000", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidCharacter(ParseError):
    def __init__(self, message, code="3001", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidNumber(ParseError):
    def __init__(self, message, code="3002", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidExpression(ParseError):
    def __init__(self, message="Invalid expression.", code="3005", equation=None):
        super().__init__(message, code=code, equation=equation)

class InvalidExpressionFormat(ParseError):
    def __init__(self, message="Invalid expression format.", code="3006", equation=None):
        super().__init__(message, code=code, equation=equation)

class DivisionByZero(CalculationError):
    def __init__(self, message="Division by Zero", code="3003", equation=None):
        super().__init__(message, code=code, equation=equation)

class UnknownOperator(CalculationError):
    def __init__(self, message, code="3004", equation=None):
        super().__init__(message, code=code, equation=equation)

class NumberTooBig(CalculationError):
    def __init__(self, message="Number too big.", code="3026", equation=None):
        super().__init__(message, code=code, equation=equation)




Error_Dictionary= {

    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3000" : "Expression cannot be empty.",
    "3001" : "Invalid character in expression: ", # + character
    "3002" : "Invalid number: ", # + number text
    "3003" : "Division by Zero",
    "3004" : "Unknown operator: ", # + operator
    "3005" : "Invalid expression.",
    "3006" : "Invalid expression format.",
    "3026" : "Number too big.",


    "5000" : "Invalid setting: ", # + setting name


    "9999" : "Unexpected Error: " #+error
}


def describe(code):
    """Return (category, message) for an error code; unknown codes map to the unexpected error."""
    if code not in ERROR_MESSAGES:
        code = "9999"
    category = Error_Dictionary.get(code[0], Error_Dictionary["9"])
    return category, ERROR_MESSAGES[code]
