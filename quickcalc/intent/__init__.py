"""Input classification and evaluation.

The intent layer turns one line of free text (a date, a date offset, a unit conversion or an
arithmetic expression) into a strict `ParsedIntent` and evaluates it into German display text.
"""
