"""Calculator engine package: expression evaluator, errors and settings."""
