DEFAULT_DELIMITER = '.'
ESCAPE_CHARACTER = '\\'

def is_valid_delimiter(delimiter : object) -> bool:
    # the escape character cannot double as delimiter: a masked delimiter would be indistinguishable from a masked escape
    return isinstance(delimiter, str) and len(delimiter) == 1 and delimiter != ESCAPE_CHARACTER

__all__ = ['DEFAULT_DELIMITER', 'ESCAPE_CHARACTER', 'is_valid_delimiter']
